import os
from typing import List, Optional

from .file_handler import RawPatternFile
from .logger import Logger, PatternFileLog, VerificationLog
from .models import PatternFileInfo
from .patterns import BasePattern, get_pattern, get_all_patterns


class PatternFileGenerator:
    """Writes the four sector test patterns, one file per pattern."""

    def __init__(self, output_folder: Optional[str] = None, logger: Optional[Logger] = None) -> None:
        if output_folder is None:
            output_folder = os.getcwd()
        self.output_folder = output_folder
        self.logger = logger
        self.patterns: List[BasePattern] = get_all_patterns(logger)
        self.file_handler = RawPatternFile()

    def full_path(self, pattern: BasePattern) -> str:
        return os.path.join(self.output_folder, pattern.file_name)

    def _log(self, log) -> None:
        if self.logger is not None:
            self.logger.log(log)

    def generate(self) -> List[PatternFileInfo]:
        """
        Create or overwrite every pattern file.

        Files are written in pattern order. A failing write raises IOError and
        files written before it are left in place.

        Returns:
            List[PatternFileInfo]: One entry per written file.
        """
        written = []
        for pattern in self.patterns:
            path = self.full_path(pattern)
            size = self.file_handler.write(path, pattern.generate_track())
            self._log(PatternFileLog(pattern.file_name, pattern.code, size))
            written.append(PatternFileInfo(pattern.file_name, path, pattern.code, size))
        return written

    def verify_pattern(self, pattern: BasePattern) -> bool:
        path = self.full_path(pattern)
        if not os.path.exists(path):
            self._log(VerificationLog(pattern.file_name, False, "file missing"))
            return False
        data = self.file_handler.read(path)
        expected_size = pattern.layout.track_size
        if len(data) != expected_size:
            self._log(VerificationLog(pattern.file_name, False, f"size {len(data)} != {expected_size}"))
            return False
        # unlogged copy, verification emits no progress steps
        if data != get_pattern(pattern.code).generate_track():
            self._log(VerificationLog(pattern.file_name, False, "content mismatch"))
            return False
        self._log(VerificationLog(pattern.file_name, True))
        return True

    def verify(self) -> bool:
        # check every file so each mismatch gets its own log entry
        results = [self.verify_pattern(pattern) for pattern in self.patterns]
        return all(results)


def generate(output_folder: Optional[str] = None, logger: Optional[Logger] = None) -> List[PatternFileInfo]:
    """
    Write test1.raw .. test4.raw, by default into the current working directory.

    Raises:
        IOError: If a file cannot be opened or written.
    """
    return PatternFileGenerator(output_folder, logger).generate()


def verify(output_folder: Optional[str] = None, logger: Optional[Logger] = None) -> bool:
    """Check that every pattern file on disk matches its pattern."""
    return PatternFileGenerator(output_folder, logger).verify()
