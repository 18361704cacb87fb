#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from sectorpatterns.logger import Logger, Log, LogLevel, PatternFileLog, VerificationLog, GenerationProgressStep

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_failed_verification_is_error(self):
        self.logger.log(VerificationLog("test2.raw", False, "content mismatch"))
        self.assertEqual(len(self.logger.get_logs(LogLevel.ERROR)), 1)
        self.assertIn("content mismatch", self.captured_output.getvalue())

    def test_pattern_file_log(self):
        self.logger.log(PatternFileLog("test1.raw", 1, 70560))
        self.assertEqual(self.logger.logs[0].size, 70560)
        self.assertEqual(len(self.logger.get_logs(LogLevel.INFO)), 1)

    def test_progress_display_interval(self):
        self.logger.generation_step_interval_count = 2
        for _ in range(4):
            self.logger.log(GenerationProgressStep("Generating", 4))
        printed_output = self.captured_output.getvalue()
        self.assertIn("(2/4)", printed_output)
        self.assertIn("(4/4)", printed_output)
        self.assertNotIn("(1/4)", printed_output)
        self.assertEqual(len(self.logger.logs), 0)

    def test_save(self):
        self.logger.log("first")
        self.logger.log("second")
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "log.txt")
            self.logger.save(path)
            with open(path) as f:
                lines = f.read().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("second", lines[1])

if __name__ == '__main__':
    unittest.main()
