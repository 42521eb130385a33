"""
Exception hierarchy for classpathfinder.

Most failures are recovered where they happen (a missing build tool or an
artifact that is not in any local cache only degrades the result), so these
are raised by the strategies and caught by the resolution fallback chain.
"""


class ClasspathFinderError(Exception):
    """Base exception for all classpathfinder errors."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class CommandNotFoundError(ClasspathFinderError):
    """A build-tool executable could not be located."""

    def __init__(self, executable):
        super().__init__(
            f"Could not find '{executable}' on PATH",
            details={"executable": executable}
        )
        self.executable = executable


class InvalidBuildFileError(ClasspathFinderError, ValueError):
    """A file was handed to a resolver but is neither a Maven nor a Gradle build file."""

    def __init__(self, path):
        super().__init__(
            f"{path} is not a valid project configuration file (pom.xml, build.gradle or build.gradle.kts)",
            details={"path": path}
        )
        self.path = path


class ArtifactParseError(ClasspathFinderError, ValueError):
    """A coordinate string does not have 3 or 5 colon-separated fields."""

    def __init__(self, raw):
        super().__init__(
            f"{raw} is not a properly formed Maven/Gradle artifact",
            details={"raw": raw}
        )
        self.raw = raw
