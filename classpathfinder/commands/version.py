import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of classpathfinder."""
    try:
        click.echo(f"classpathfinder {importlib.metadata.version('classpathfinder')}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of classpathfinder. Is it installed correctly?")
