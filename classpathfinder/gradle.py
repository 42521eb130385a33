import os
import re
import importlib.resources
from .cli_logger import logger
from .exceptions import CommandNotFoundError
from .utils import run_shell_command, find_command_on_path, is_os_windows, create_temp_file, remove_file, try_resolving, first_non_null

# Both names are also hard-coded in resources/classpathFinder.gradle
GRADLE_MARKER = "classpathfinder-gradle"
GRADLE_TASK = "classpathFinderDeps"
GRADLE_TEMPLATE = "classpathFinder.gradle"


def artifact_pattern(marker):
    return re.compile(rf"^{re.escape(marker)} (.+?)\r?$", re.MULTILINE)


def create_temporary_gradle_file():
    """Write the bundled init script to a temporary file and return its path."""
    template = importlib.resources.files("classpathfinder").joinpath("resources").joinpath(GRADLE_TEMPLATE)
    return create_temp_file("classpath", ".gradle", template.read_text(encoding="utf-8"))


def get_gradle_command(project_directory):
    """Prefer the project's Gradle wrapper, fall back to `gradle` on PATH."""
    wrapper_name = "gradlew.bat" if is_os_windows() else "gradlew"
    wrapper = os.path.abspath(os.path.join(project_directory, wrapper_name))
    if os.path.exists(wrapper):
        return wrapper
    gradle = find_command_on_path("gradle")
    if gradle is None:
        raise CommandNotFoundError("gradle")
    return gradle


def parse_gradle_cli_dependencies(output, marker=GRADLE_MARKER):
    return {match.group(1) for match in artifact_pattern(marker).finditer(output)}


def read_dependencies_via_gradle_cli(project_directory):
    logger.debug("Attempting dependency resolution through CLI...")
    gradle = get_gradle_command(project_directory)
    config = create_temporary_gradle_file()
    try:
        command = [gradle, "-I", config, GRADLE_TASK, "--console=plain"]
        logger.info(f"Run {' '.join(command)} in {project_directory}")
        stdout, stderr, returncode = run_shell_command(command, input_data="", cwd=project_directory)
    finally:
        remove_file(config)

    logger.debug(stdout)
    if returncode != 0:
        logger.warning(f"gradle exited with code {returncode} in {project_directory}: {stderr.strip()}")
    return parse_gradle_cli_dependencies(stdout)


def read_build_gradle(build_file):
    """Resolve the dependency files of the Gradle project owning `build_file`."""
    project_directory = os.path.dirname(os.path.abspath(build_file))

    # The first successful resolver wins (evaluated top to bottom)
    dependencies = first_non_null(
        lambda: try_resolving("dependencies using Gradle dependencies CLI", lambda: read_dependencies_via_gradle_cli(project_directory))
    ) or set()

    if not dependencies:
        logger.warning("Could not resolve Gradle dependencies using any resolution strategy!")
    else:
        logger.info(f"Successfully resolved {len(dependencies)} Gradle dependencies")
    return dependencies
