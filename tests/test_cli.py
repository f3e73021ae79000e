"""
Tests for the command line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

from tankvent.cli import main, EXIT_OK, EXIT_VALIDATION_ERROR
from tankvent.core.config import CalculationInput, reference_case

class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.case_path = os.path.join(self.tmpdir.name, "case.yaml")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_example_writes_reference_case(self):
        code, _, _ = self._main("example", "-o", self.case_path)
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(CalculationInput.from_yaml(self.case_path), reference_case())

    def test_run_summary(self):
        self._main("example", "-o", self.case_path)
        code, out, _ = self._main("run", self.case_path)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("TK-3120", out)
        self.assertIn("Emergency Venting", out)

    def test_run_json_with_edition_override(self):
        self._main("example", "-o", self.case_path)
        out_path = os.path.join(self.tmpdir.name, "result.json")
        code, out, _ = self._main("run", self.case_path, "--edition", "5TH",
                                  "--json", "-o", out_path)
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(json.loads(out)["api_edition"], "5TH")
        with open(out_path) as f:
            self.assertEqual(json.load(f)["api_edition"], "5TH")

    def test_invalid_case_exit_code(self):
        reference_case().copy(diameter=0.0).to_yaml(self.case_path)
        code, _, err = self._main("run", self.case_path)
        self.assertEqual(code, EXIT_VALIDATION_ERROR)
        self.assertIn("Diameter", err)

    def test_missing_file_exit_code(self):
        code, _, _ = self._main("run", os.path.join(self.tmpdir.name, "missing.yaml"))
        self.assertEqual(code, EXIT_VALIDATION_ERROR)


if __name__ == '__main__':
    unittest.main()
