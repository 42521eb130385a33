import functools
import click
import sys
from .cli_logger import logger
from .exceptions import ClasspathFinderError

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except ClasspathFinderError as e:
            logger.error(f"Error: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
