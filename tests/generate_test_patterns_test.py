import importlib.util
import io
import os
import sys
import tempfile
import unittest
from unittest import mock

import matplotlib
matplotlib.use("Agg")

SCRIPT_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "generate_test_patterns.py")

def load_script():
    spec = importlib.util.spec_from_file_location("generate_test_patterns", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

class TestGenerateTestPatternsScript(unittest.TestCase):
    def setUp(self):
        self.script = load_script()
        self.folder = tempfile.TemporaryDirectory()
        self.saved_cwd = os.getcwd()
        os.chdir(self.folder.name)
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout
        os.chdir(self.saved_cwd)
        self.folder.cleanup()

    def test_main_leaves_only_pattern_files(self):
        status = self.script.main()
        self.assertEqual(status, 0)
        self.assertEqual(sorted(os.listdir(self.folder.name)),
                         ["test1.raw", "test2.raw", "test3.raw", "test4.raw"])
        self.assertIn("All pattern files verified.", self.captured_output.getvalue())

    def test_main_fails_when_verification_fails(self):
        with mock.patch.object(self.script, "verify", return_value=False):
            status = self.script.main()
        self.assertNotEqual(status, 0)
        self.assertIn("verification failed", self.captured_output.getvalue())

    def test_main_optional_outputs(self):
        status = self.script.main(save_images=True, log_path="run.log")
        self.assertEqual(status, 0)
        files = sorted(os.listdir(self.folder.name))
        self.assertIn("run.log", files)
        for index in range(1, 5):
            self.assertIn(f"test{index}.png", files)

if __name__ == '__main__':
    unittest.main()
