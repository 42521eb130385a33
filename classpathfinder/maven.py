import os
import functools
from .cli_logger import logger
from .artifact import is_artifact_line, parse_artifact
from .exceptions import CommandNotFoundError
from .local_artifacts import find_maven_artifact
from .utils import run_shell_command, find_command_on_path, create_temp_file, remove_file, try_resolving, first_non_null


@functools.lru_cache(maxsize=None)
def mvn_command():
    """Path to the mvn executable, looked up once per process."""
    return find_command_on_path("mvn")


def generate_maven_dependency_list(pom):
    """Run `mvn dependency:list` for `pom` and return the path of the file it wrote."""
    mvn = mvn_command()
    if mvn is None:
        raise CommandNotFoundError("mvn")

    maven_output = create_temp_file("deps", ".txt")
    working_directory = os.path.dirname(os.path.abspath(pom))
    command = [mvn, "dependency:list", "-DincludeScope=test", f"-DoutputFile={maven_output}"]
    logger.info(f"Run {' '.join(command)} in {working_directory}")

    lines, process = run_shell_command(command, stream_output=True, cwd=working_directory)
    for line in lines:
        line = line.strip()
        if line and not line.startswith("Progress"):
            logger.debug(f"Maven: {line}")

    if process.returncode != 0:
        logger.warning(f"mvn exited with code {process.returncode} in {working_directory}")
    return maven_output


def read_maven_dependency_list(maven_output):
    with open(maven_output, "r", encoding="utf-8", errors="ignore") as f:
        return {parse_artifact(line) for line in f if is_artifact_line(line)}


def read_dependencies_via_maven_cli(pom):
    maven_output = generate_maven_dependency_list(pom)
    try:
        return read_maven_dependency_list(maven_output)
    finally:
        remove_file(maven_output)


def read_pom(pom, maven_home=None, source=False):
    """Resolve the jars a Maven project depends on.

    Coordinates are listed by Maven and then mapped onto the local repository;
    coordinates without a jar on disk are skipped.
    """
    artifacts = first_non_null(
        lambda: try_resolving("dependencies using Maven dependency CLI", lambda: read_dependencies_via_maven_cli(pom))
    )
    if artifacts is None:
        logger.warning(f"Could not resolve Maven dependencies of {pom} using any resolution strategy!")
        return set()

    if not artifacts:
        logger.warning(f"No artifacts found in {pom}")
    elif len(artifacts) < 5:
        logger.info(f"Found {', '.join(sorted(str(a) for a in artifacts))} in {pom}")
    else:
        logger.info(f"Found {len(artifacts)} artifacts in {pom}")

    jars = set()
    for artifact in artifacts:
        jar = find_maven_artifact(artifact, source=source, maven_home=maven_home)
        if jar:
            jars.add(jar)
    return jars
