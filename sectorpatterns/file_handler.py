#file_handler.py
import os

from .validators import validate_type, validate_file_exists


class RawPatternFile:
    """A flat pattern file: pure payload, no signature, header or trailer."""

    def write(self, file_path, data):
        validate_type(data, "Data", bytes)
        try:
            # 'wb' truncates any earlier file of the same name
            with open(file_path, 'wb') as file:
                file.write(data)
        except OSError as e:
            raise IOError(f"Failed to write {os.path.basename(file_path)}: generation incomplete ({e})") from e
        return len(data)

    def read(self, file_path):
        validate_file_exists(file_path)
        with open(file_path, 'rb') as file:
            data = file.read()
        return data
