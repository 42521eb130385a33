"""
Lookup of artifacts in the local Maven repository and Gradle cache.

Both caches are populated by earlier build-tool runs and are only ever read
here. Layout shapes::

    Maven:  <maven_home>/repository/<group path>/<name>/<version>/<name>-<version>.jar
    Gradle: <gradle_home>/caches/modules-*/files-*/<group>/<name>/<version>/<hash>/<name>*.jar

Classifier jars (sources, javadoc) sitting next to the binary jar are never
picked from the Gradle cache.
"""
import os
import functools
from enum import Enum
from .cli_logger import logger
from .utils import try_resolving, first_non_null, resolve_starting_with

# Depth below the selected version directory at which the jar may sit
# (Gradle nests a hash-named directory in between).
MAX_JAR_SEARCH_DEPTH = 2

# Gradle stores these beside the binary jar in their own hash directories
CLASSIFIER_SUFFIXES = ("-sources.jar", "-javadoc.jar")


def default_maven_home():
    return os.path.join(os.path.expanduser("~"), ".m2")


def default_gradle_home():
    return os.environ.get("GRADLE_USER_HOME") or os.path.join(os.path.expanduser("~"), ".gradle")


def maven_repository(maven_home=None):
    return os.path.join(maven_home or default_maven_home(), "repository")


def gradle_caches(gradle_home=None):
    """Return the Gradle files cache directory, or None if Gradle never ran here."""
    caches = os.path.join(gradle_home or default_gradle_home(), "caches")
    modules = resolve_starting_with(caches, "modules")
    return resolve_starting_with(modules, "files")


class CacheLayout(Enum):
    MAVEN = "Maven"
    GRADLE = "Gradle"

    def artifact_dir(self, group, name, maven_home=None, gradle_home=None):
        """Directory holding one sub-directory per cached version, or None."""
        if self is CacheLayout.MAVEN:
            base = os.path.join(maven_repository(maven_home), group.replace(".", os.sep))
        else:
            base = gradle_caches(gradle_home)
            if base is None:
                return None
            base = os.path.join(base, group)
        artifact_dir = os.path.join(base, name)
        return artifact_dir if os.path.isdir(artifact_dir) else None

    def is_artifact_file(self, name, file_path, version):
        file_name = os.path.basename(file_path)
        if self is CacheLayout.MAVEN:
            return file_name == f"{name}-{version}.jar"
        return (file_name.startswith(name) and file_name.endswith(".jar")
                and not file_name.endswith(CLASSIFIER_SUFFIXES))


def compare_versions(left, right):
    """Order version directory names, "best" first.

    Components are compared as character-reversed strings and the result is
    negated; when all shared components are equal the name with fewer
    components sorts later.
    """
    left_version = left.split(".")
    right_version = right.split(".")

    for left_part, right_part in zip(left_version, right_version):
        left_rev = left_part[::-1]
        right_rev = right_part[::-1]
        if left_rev != right_rev:
            return 1 if left_rev < right_rev else -1

    if len(left_version) == len(right_version):
        return 0
    return 1 if len(left_version) < len(right_version) else -1


def sort_versions(versions):
    return sorted(versions, key=functools.cmp_to_key(compare_versions))


def select_version(versions):
    """Pick the best of the given version names, or None if there are none."""
    ordered = sort_versions(versions)
    return ordered[0] if ordered else None


def _find_file(directory, predicate, max_depth):
    """Breadth-first search for the first file under `directory` matching `predicate`."""
    level = [directory]
    for _ in range(max_depth):
        next_level = []
        for current in level:
            try:
                entries = sorted(os.listdir(current))
            except OSError:
                continue
            for entry in entries:
                path = os.path.join(current, entry)
                if os.path.isdir(path):
                    next_level.append(path)
                elif predicate(path):
                    return path
        level = next_level
    return None


def find_local_artifact_using(layout, group, name, maven_home=None, gradle_home=None):
    artifact_dir = layout.artifact_dir(group, name, maven_home=maven_home, gradle_home=gradle_home)
    if artifact_dir is None:
        logger.debug(f"{group}:{name} is not in the local {layout.value} cache")
        return None

    versions = [v for v in os.listdir(artifact_dir) if os.path.isdir(os.path.join(artifact_dir, v))]
    version = select_version(versions)
    if version is None:
        return None

    def is_correct_artifact(path):
        # For Maven the version is the name of the jar's parent directory
        return layout.is_artifact_file(name, path, os.path.basename(os.path.dirname(path)))

    return _find_file(os.path.join(artifact_dir, version), is_correct_artifact, MAX_JAR_SEARCH_DEPTH)


def find_local_artifact(group, name, maven_home=None, gradle_home=None):
    """Find a jar for group:name, trying the Maven repository first, then the Gradle cache."""
    return first_non_null(
        lambda: try_resolving(
            f"{name} using Maven",
            lambda: find_local_artifact_using(CacheLayout.MAVEN, group, name, maven_home, gradle_home)
        ),
        lambda: try_resolving(
            f"{name} using Gradle",
            lambda: find_local_artifact_using(CacheLayout.GRADLE, group, name, maven_home, gradle_home)
        ),
    )


def maven_jar_name(artifact, source=False):
    if source:
        return f"{artifact.name}-{artifact.version}-sources.jar"
    return f"{artifact.name}-{artifact.version}.jar"


def find_maven_artifact(artifact, source=False, maven_home=None):
    """Map an exact coordinate to its jar in the Maven repository."""
    result = os.path.join(
        maven_repository(maven_home),
        artifact.group.replace(".", os.sep),
        artifact.name,
        artifact.version,
        maven_jar_name(artifact, source)
    )
    if os.path.exists(result):
        return result
    logger.warning(f"Couldn't find {artifact} in {result}")
    return None


def find_stdlib(group, name, maven_home=None, gradle_home=None):
    return find_local_artifact(group, name, maven_home=maven_home, gradle_home=gradle_home)
