import os
import subprocess
from ..cli_logger import logger

# Suffixes tried, in order, when looking a command up on Windows
WINDOWS_EXECUTABLE_SUFFIXES = (".cmd", ".bat", ".exe")


class _FailedProcess:
    returncode = -1


def run_shell_command(command, stream_output=False, env=None, input_data=None, cwd=None):
    """
    Executes a command, with options for streaming output and providing input.

    Args:
        command (list): The command to execute as a list of strings.
        stream_output (bool): If True, streams the output in real-time.
        env (dict, optional): A dictionary of environment variables.
        input_data (str, optional): Data to be passed to the command's stdin.
            Passing an empty string runs the command with a closed stdin.
        cwd (str, optional): The working directory for the command.

    Output is decoded as UTF-8; undecodable bytes are replaced.

    Returns:
        If stream_output is True, returns a tuple (line generator, process);
        the process' returncode is set once the generator is exhausted.
        If stream_output is False, returns a tuple (stdout, stderr, return_code).
    """
    try:
        if stream_output:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                bufsize=1,
                encoding="utf-8",
                errors="replace",
                env=env,
                cwd=cwd
            )

            def _generator():
                for line in process.stdout:
                    yield line
                process.communicate()
            return _generator(), process

        else:
            result = subprocess.run(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                env=env,
                input=input_data,
                check=False,
                cwd=cwd
            )
            return result.stdout, result.stderr, result.returncode

    except OSError as e:
        if isinstance(e, FileNotFoundError):
            logger.error(f"Command not found: {e.filename}")
        else:
            logger.error(f"Could not run {command[0]}: {e}")
        if stream_output:
            return iter([]), _FailedProcess()
        else:
            return "", str(e), -1


def is_os_windows():
    return os.name == "nt"


def find_executable_on_path(file_name):
    """Return the absolute path of the first executable `file_name` on PATH, or None."""
    for directory in os.environ.get("PATH", "").split(os.pathsep):
        if not directory:
            continue
        candidate = os.path.join(directory, file_name)
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            candidate = os.path.abspath(candidate)
            logger.debug(f"Found {file_name} at {candidate}")
            return candidate
    return None


def find_command_on_path(name):
    """Locate a build-tool command, honouring the Windows script suffixes."""
    if is_os_windows():
        for suffix in WINDOWS_EXECUTABLE_SUFFIXES:
            found = find_executable_on_path(f"{name}{suffix}")
            if found:
                return found
        return None
    return find_executable_on_path(name)
