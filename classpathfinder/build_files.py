import os
from collections import namedtuple
from .exceptions import InvalidBuildFileError
from .gradle import read_build_gradle
from .maven import read_pom

MAVEN = "maven"
GRADLE = "gradle"

BUILD_FILE_NAMES = {
    "pom.xml": MAVEN,
    "build.gradle": GRADLE,
    "build.gradle.kts": GRADLE,
}

BuildFile = namedtuple("BuildFile", ["path", "kind"])


def classify_build_file(path):
    kind = BUILD_FILE_NAMES.get(os.path.basename(path))
    if kind is None:
        raise InvalidBuildFileError(path)
    return BuildFile(os.path.abspath(path), kind)


def project_files(workspace_root, exclude_dirs=None):
    """Yield every Maven and Gradle build file below `workspace_root`."""
    exclude_dirs = set(exclude_dirs or ())
    for root, dirs, files in os.walk(workspace_root):
        dirs[:] = sorted(d for d in dirs if d not in exclude_dirs)
        for file in sorted(files):
            if file in BUILD_FILE_NAMES:
                yield classify_build_file(os.path.join(root, file))


def read_build_file(build_file, maven_home=None):
    """Resolve the classpath entries declared by one build file."""
    if not isinstance(build_file, BuildFile):
        build_file = classify_build_file(build_file)
    path, kind = build_file

    if kind == MAVEN:
        return read_pom(path, maven_home=maven_home)
    elif kind == GRADLE:
        return read_build_gradle(path)
    else:
        raise InvalidBuildFileError(path)
