import os
import json
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from classpathfinder.main import cli
from classpathfinder.config import save_config

class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        self.class_path = {"/m2/kotlin-stdlib-1.3.21.jar", "/m2/libcore-1.2.0.jar"}

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _stdout(self, result):
        # Log lines go to stderr; the result is always the last lines of output
        return result.output.strip().splitlines()

    @patch("classpathfinder.commands.resolve.find_class_path")
    def test_resolve_default_format(self, mock_find):
        mock_find.return_value = set(self.class_path)
        result = self.runner.invoke(cli, ["--path", self.test_dir, "resolve"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self._stdout(result)[-1], os.pathsep.join(sorted(self.class_path)))
        mock_find.assert_called_once_with([os.path.abspath(self.test_dir)], conf={})

    @patch("classpathfinder.commands.resolve.find_class_path")
    def test_resolve_reads_config_from_path_option(self, mock_find):
        mock_find.return_value = set(self.class_path)
        save_config({"classpath": {"stdlib_marker": "scala-library"}}, path=self.test_dir)
        first = os.path.join(self.test_dir, "first")
        second = os.path.join(self.test_dir, "second")
        os.makedirs(first)
        os.makedirs(second)
        save_config({"classpath": {"stdlib_marker": "ignored"}}, path=first)

        result = self.runner.invoke(cli, ["--path", self.test_dir, "resolve", first, second])
        self.assertEqual(result.exit_code, 0)
        mock_find.assert_called_once_with(
            [os.path.abspath(first), os.path.abspath(second)],
            conf={"classpath": {"stdlib_marker": "scala-library"}}
        )

    @patch("classpathfinder.commands.resolve.find_class_path")
    def test_resolve_lines_format(self, mock_find):
        mock_find.return_value = set(self.class_path)
        result = self.runner.invoke(cli, ["resolve", "--format", "lines", self.test_dir])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self._stdout(result)[-2:], sorted(self.class_path))

    @patch("classpathfinder.commands.resolve.find_class_path")
    def test_resolve_json_format(self, mock_find):
        mock_find.return_value = set(self.class_path)
        result = self.runner.invoke(cli, ["resolve", "--format", "json", self.test_dir])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output[result.output.index("\n[\n") + 1:]), sorted(self.class_path))

    @patch("classpathfinder.commands.resolve.find_class_path", side_effect=RuntimeError("boom"))
    def test_resolve_unexpected_error_exits_non_zero(self, mock_find):
        result = self.runner.invoke(cli, ["resolve", self.test_dir])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("boom", result.output)

    @patch("classpathfinder.commands.doctor.find_stdlib", return_value=None)
    @patch("classpathfinder.commands.doctor.get_gradle_command", return_value="/usr/bin/gradle")
    @patch("classpathfinder.commands.doctor.mvn_command", return_value="/usr/bin/mvn")
    def test_doctor_reports_missing_stdlib(self, mock_mvn, mock_gradle, mock_stdlib):
        result = self.runner.invoke(cli, ["--path", self.test_dir, "doctor"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("/usr/bin/mvn", result.output)
        self.assertIn("kotlin-stdlib is not in any local cache", result.output)

    def test_config_view_not_found(self):
        result = self.runner.invoke(cli, ["--path", self.test_dir, "config", "view"])
        self.assertIn("Error: No classpathfinder.toml found", result.output)

if __name__ == "__main__":
    unittest.main()
