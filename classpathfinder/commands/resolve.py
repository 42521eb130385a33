import click
import json
import os
from .. import config as config_module
from ..classpath import find_class_path
from ..decorators import handle_exceptions
from ..cli_logger import logger

@click.command()
@click.pass_context
@click.argument("roots", nargs=-1, type=click.Path(exists=True, file_okay=False))
@click.option("--format", "output_format", type=click.Choice(["path", "lines", "json"]), default="path",
              help="Output as a single path-separator joined string, one entry per line, or a JSON list.")
@handle_exceptions
def resolve(ctx, roots, output_format):
    """Resolve the classpath of one or more project roots.

    ROOTS: Project directories to resolve (defaults to --path).

    Settings are read from the classpathfinder.toml in --path, whichever roots are given.
    """
    roots = [os.path.abspath(root) for root in (roots or [ctx.obj["path"]])]
    conf = config_module.load_config(path=ctx.obj["path"])

    logger.info(f"Resolving classpath for {', '.join(roots)}...")
    class_path = sorted(find_class_path(roots, conf=conf))
    logger.success(f"Resolved {len(class_path)} classpath entries.")

    if output_format == "json":
        click.echo(json.dumps(class_path, indent=4))
    elif output_format == "lines":
        for entry in class_path:
            click.echo(entry)
    else:
        click.echo(os.pathsep.join(class_path))
