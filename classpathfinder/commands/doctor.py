import click
import os
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..local_artifacts import maven_repository, gradle_caches, find_stdlib
from ..maven import mvn_command
from ..gradle import get_gradle_command
from ..exceptions import CommandNotFoundError

@click.command()
@click.pass_context
@handle_exceptions
def doctor(ctx):
    """Check which build tools and local caches are available for resolution."""
    path = ctx.obj["path"]
    settings = config_module.get_classpath_settings(config_module.load_config(path=path))
    logger.info("Running environment check...")
    problems = 0

    mvn = mvn_command()
    if mvn:
        logger.success(f"mvn: {mvn}")
    else:
        logger.warning("mvn was not found on PATH. Maven projects cannot be resolved.")
        problems += 1

    try:
        logger.success(f"gradle: {get_gradle_command(path)}")
    except CommandNotFoundError:
        logger.warning("Neither a Gradle wrapper nor gradle on PATH was found. Gradle projects cannot be resolved.")
        problems += 1

    repository = maven_repository(settings["maven_home"])
    if os.path.isdir(repository):
        logger.success(f"Maven repository: {repository}")
    else:
        logger.warning(f"Maven repository {repository} does not exist.")
        problems += 1

    caches = gradle_caches(settings["gradle_home"])
    if caches:
        logger.success(f"Gradle cache: {caches}")
    else:
        logger.warning("No Gradle files cache was found.")
        problems += 1

    stdlib = find_stdlib(settings["stdlib_group"], settings["stdlib_artifact"],
                         maven_home=settings["maven_home"], gradle_home=settings["gradle_home"])
    if stdlib:
        logger.success(f"{settings['stdlib_artifact']}: {stdlib}")
    else:
        logger.warning(f"{settings['stdlib_group']}:{settings['stdlib_artifact']} is not in any local cache.")
        problems += 1

    if problems:
        logger.error(f"Environment check found {problems} issue(s). Please review the warnings above.")
    else:
        logger.success("Environment check completed successfully.")
