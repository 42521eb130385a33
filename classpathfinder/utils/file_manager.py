import os
import contextlib
import tempfile
from ..cli_logger import logger


def create_temp_file(prefix, suffix, content=None):
    """Create a temporary file (optionally filled with `content`) and return its path."""
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix)
    with os.fdopen(fd, "w") as f:
        if content:
            f.write(content)
    logger.debug(f"Created temporary file {path}")
    return path


def remove_file(path):
    """Remove a temporary file, ignoring one that is already gone."""
    with contextlib.suppress(FileNotFoundError):
        os.remove(path)


def resolve_if_exists(root, *segments):
    """Join `segments` onto `root` and return the absolute path if it exists."""
    result = os.path.abspath(os.path.join(root, *segments))
    return result if os.path.exists(result) else None


def resolve_starting_with(directory, prefix):
    """Return the first child of `directory` (by name) that starts with `prefix`."""
    if directory is None or not os.path.isdir(directory):
        return None
    for name in sorted(os.listdir(directory)):
        if name.startswith(prefix):
            return os.path.join(directory, name)
    return None
