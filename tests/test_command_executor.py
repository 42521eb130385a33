import os
import shutil
import stat
import tempfile
import unittest
from unittest.mock import patch, MagicMock
from classpathfinder.utils.command_executor import run_shell_command, find_command_on_path, find_executable_on_path
from classpathfinder import maven

def make_executable(directory, name):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write("#!/bin/sh\n")
    os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR)
    return path

class TestFindCommand(unittest.TestCase):

    def setUp(self):
        self.first = tempfile.mkdtemp()
        self.second = tempfile.mkdtemp()
        self.path = os.pathsep.join([self.first, self.second])

    def tearDown(self):
        shutil.rmtree(self.first)
        shutil.rmtree(self.second)

    def test_find_executable_on_path_first_directory_wins(self):
        expected = make_executable(self.first, "mvn")
        make_executable(self.second, "mvn")
        with patch.dict(os.environ, {"PATH": self.path}):
            self.assertEqual(find_executable_on_path("mvn"), os.path.abspath(expected))

    def test_non_executable_is_skipped(self):
        with open(os.path.join(self.first, "mvn"), "w") as f:
            f.write("")
        os.chmod(os.path.join(self.first, "mvn"), 0o644)
        expected = make_executable(self.second, "mvn")
        with patch.dict(os.environ, {"PATH": self.path}):
            self.assertEqual(find_command_on_path("mvn"), os.path.abspath(expected))

    def test_missing_command(self):
        with patch.dict(os.environ, {"PATH": self.path}):
            self.assertIsNone(find_command_on_path("mvn"))

    @patch("classpathfinder.utils.command_executor.is_os_windows", return_value=True)
    def test_windows_suffix_order(self, mock_is_windows):
        make_executable(self.first, "mvn.exe")
        expected = make_executable(self.second, "mvn.bat")
        with patch.dict(os.environ, {"PATH": self.path}):
            self.assertEqual(find_command_on_path("mvn"), os.path.abspath(expected))

    @patch("classpathfinder.maven.find_command_on_path", return_value="/opt/maven/bin/mvn")
    def test_mvn_command_is_memoized(self, mock_find):
        maven.mvn_command.cache_clear()
        try:
            self.assertEqual(maven.mvn_command(), "/opt/maven/bin/mvn")
            self.assertEqual(maven.mvn_command(), "/opt/maven/bin/mvn")
            mock_find.assert_called_once_with("mvn")
        finally:
            maven.mvn_command.cache_clear()

class TestRunShellCommand(unittest.TestCase):

    def setUp(self):
        self.bin_dir = tempfile.mkdtemp()
        self.script = os.path.join(self.bin_dir, "noisy")
        with open(self.script, "w") as f:
            f.write("#!/bin/sh\nprintf '\\377\\376 garbage\\n'\necho done\n")
        os.chmod(self.script, 0o755)

    def tearDown(self):
        shutil.rmtree(self.bin_dir)

    @unittest.skipIf(os.name == "nt", "needs a POSIX shell")
    def test_run_replaces_undecodable_output(self):
        stdout, stderr, returncode = run_shell_command([self.script])
        self.assertEqual(returncode, 0)
        self.assertIn("\ufffd", stdout)
        self.assertTrue(stdout.endswith("done\n"))

    @unittest.skipIf(os.name == "nt", "needs a POSIX shell")
    def test_stream_replaces_undecodable_output(self):
        lines, process = run_shell_command([self.script], stream_output=True)
        lines = list(lines)
        self.assertEqual(process.returncode, 0)
        self.assertIn("\ufffd", lines[0])
        self.assertEqual(lines[-1], "done\n")

    @patch("subprocess.run")
    def test_run_captures_output(self, mock_run):
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)
        self.assertEqual(run_shell_command(["gradle", "tasks"], cwd="/tmp"), ("out", "err", 3))
        self.assertEqual(mock_run.call_args.kwargs["cwd"], "/tmp")

    @patch("classpathfinder.utils.command_executor.logger")
    @patch("subprocess.run", side_effect=FileNotFoundError(2, "No such file", "gradle"))
    def test_run_missing_command(self, mock_run, mock_logger):
        stdout, stderr, returncode = run_shell_command(["gradle"])
        self.assertEqual(stdout, "")
        self.assertEqual(returncode, -1)
        mock_logger.error.assert_called_once()

    @patch("classpathfinder.utils.command_executor.logger")
    @patch("subprocess.Popen", side_effect=FileNotFoundError(2, "No such file", "mvn"))
    def test_stream_missing_command(self, mock_popen, mock_logger):
        lines, process = run_shell_command(["mvn"], stream_output=True)
        self.assertEqual(list(lines), [])
        self.assertEqual(process.returncode, -1)

if __name__ == "__main__":
    unittest.main()
