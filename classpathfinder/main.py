import click
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.option("--verbose", "-v", is_flag=True, help="Echo debug output (build tool output included).")
@click.pass_context
def cli(ctx, path, verbose):
    """Resolve the runtime classpath of Maven and Gradle projects."""
    ctx.obj = {"path": path}
    logger.verbose = verbose

cli.add_command(resolve)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
