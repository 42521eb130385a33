from .command_executor import run_shell_command, find_command_on_path, find_executable_on_path, is_os_windows
from .file_manager import create_temp_file, remove_file, resolve_if_exists, resolve_starting_with
from .resolution import try_resolving, first_non_null
