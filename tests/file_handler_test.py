import os
import tempfile
import unittest
from sectorpatterns.file_handler import RawPatternFile

class TestRawPatternFile(unittest.TestCase):
    def setUp(self):
        self.handler = RawPatternFile()
        self.folder = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.folder.name, "data.raw")

    def tearDown(self):
        self.folder.cleanup()

    def test_write_read(self):
        size = self.handler.write(self.path, b"\x00\x01\x02")
        self.assertEqual(size, 3)
        self.assertEqual(self.handler.read(self.path), b"\x00\x01\x02")

    def test_write_truncates(self):
        self.handler.write(self.path, b"\xff" * 100)
        self.handler.write(self.path, b"\x01")
        self.assertEqual(os.path.getsize(self.path), 1)

    def test_write_rejects_non_bytes(self):
        with self.assertRaises(ValueError):
            self.handler.write(self.path, "text")

    def test_write_failure_names_file(self):
        missing = os.path.join(self.folder.name, "no_such_dir", "test1.raw")
        with self.assertRaises(IOError) as context:
            self.handler.write(missing, b"\x00")
        self.assertIn("test1.raw", str(context.exception))
        self.assertIn("incomplete", str(context.exception))

    def test_read_missing_file(self):
        with self.assertRaises(ValueError):
            self.handler.read(self.path)

if __name__ == '__main__':
    unittest.main()
