import click
import os
import json
from .. import config as config_module
from ..cli_logger import logger

def _load_or_report(ctx):
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found in {ctx.obj['path']}.")
    return conf

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the classpathfinder.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Print the raw contents of classpathfinder.toml."""
    if not _load_or_report(ctx):
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_file_path}: {e}")

@config.command("list")
@click.pass_context
def list_settings(ctx):
    """List the effective [classpath] settings, defaults included."""
    conf = config_module.load_config(path=ctx.obj["path"])
    click.echo(json.dumps(config_module.get_classpath_settings(conf), indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from classpathfinder.toml (dotted keys, e.g. classpath.stdlib_marker)."""
    conf = _load_or_report(ctx)
    if not conf:
        return

    value = conf
    try:
        for k in key.split('.'):
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")

@config.command("set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in classpathfinder.toml, creating the file if needed."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    table = conf
    for k in keys[:-1]:
        table = table.setdefault(k, {})
    table[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from classpathfinder.toml."""
    conf = _load_or_report(ctx)
    if not conf:
        return

    keys = key.split('.')
    table = conf
    try:
        for k in keys[:-1]:
            table = table[k]
        del table[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
