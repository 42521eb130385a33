import re
from collections import namedtuple
from .exceptions import ArtifactParseError

# group:name:version or group:name:packaging:version:scope
ARTIFACT_PATTERN = re.compile(r"[^\s:]+:[^\s:]+:[^\s:]+(?::[^\s:]+:[^\s:]+)?")


class Artifact(namedtuple("Artifact", ["group", "name", "version"])):
    """A (group, name, version) dependency coordinate."""
    __slots__ = ()

    def __str__(self):
        return f"{self.group}:{self.name}:{self.version}"


def is_artifact_line(line):
    """True if the first token of `line` is a 3- or 5-field coordinate.

    Maven appends annotations after the coordinate on some lines
    (e.g. ``-- module foo``), so only the first token is considered.
    """
    tokens = line.split()
    return bool(tokens) and ARTIFACT_PATTERN.fullmatch(tokens[0]) is not None


def parse_artifact(raw_artifact, version=None):
    """Parse a coordinate string into an Artifact.

    `version`, when given, replaces the version read from the string.
    """
    tokens = raw_artifact.split()
    parts = tokens[0].split(":") if tokens else []

    if len(parts) == 3:
        return Artifact(parts[0], parts[1], version or parts[2])
    if len(parts) == 5:
        return Artifact(parts[0], parts[1], version or parts[3])
    raise ArtifactParseError(raw_artifact)
