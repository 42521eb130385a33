"""
Assembles the runtime classpath of one or more JVM project roots.

Every Maven/Gradle build file found below a root contributes the jars its
build tool resolved. The result always holds at most one copy of the runtime
standard library (``kotlin-stdlib`` unless configured otherwise), falls back to
just that library when nothing could be resolved, and includes the compiled
output directories that exist.
"""
from .cli_logger import logger
from .config import get_classpath_settings
from .build_files import project_files, read_build_file
from .local_artifacts import find_stdlib
from .utils import resolve_if_exists


def find_class_path(project_roots, conf=None):
    """Return the set of absolute classpath entries for `project_roots`."""
    settings = get_classpath_settings(conf)
    maven_home = settings["maven_home"]
    gradle_home = settings["gradle_home"]

    def stdlib():
        return find_stdlib(settings["stdlib_group"], settings["stdlib_artifact"],
                           maven_home=maven_home, gradle_home=gradle_home)

    paths = set()
    for root in project_roots:
        for build_file in project_files(root, exclude_dirs=settings["exclude_dirs"]):
            logger.info(f"Reading {build_file.kind} build file {build_file.path}")
            paths |= read_build_file(build_file, maven_home=maven_home)

    class_path = ensure_stdlib_in_paths(paths, settings["stdlib_marker"], stdlib)
    if not class_path:
        logger.warning("No classpath entries could be resolved, falling back to the standard library only")
        class_path = backup_class_path(stdlib)

    for root in project_roots:
        class_path |= output_directories(root, settings["output_dirs"])

    return class_path


def ensure_stdlib_in_paths(paths, marker, find_stdlib_path):
    """Make sure `paths` holds at most one entry containing `marker`.

    A single existing entry is kept; none or several are replaced by the one
    found through `find_stdlib_path`.
    """
    stdlibs = sorted(path for path in paths if marker in path)
    if len(stdlibs) == 1:
        return set(paths)

    result = {path for path in paths if marker not in path}
    stdlib = find_stdlib_path()
    if stdlib is None and stdlibs:
        logger.warning(f"Found {len(stdlibs)} {marker} entries but no canonical one on disk, keeping {stdlibs[0]}")
        stdlib = stdlibs[0]
    elif stdlib is None:
        logger.warning(f"Could not find {marker} in the local Maven or Gradle caches")

    if stdlib is not None:
        result.add(stdlib)
    return result


def backup_class_path(find_stdlib_path):
    stdlib = find_stdlib_path()
    return {stdlib} if stdlib else set()


def output_directories(root, output_dirs):
    """Return the compiled-output directories of `root` that exist on disk."""
    found = set()
    for output_dir in output_dirs:
        directory = resolve_if_exists(root, *output_dir.split("/"))
        if directory:
            found.add(directory)
    return found
