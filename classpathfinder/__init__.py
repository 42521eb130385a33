from .artifact import Artifact, parse_artifact
from .classpath import find_class_path

__all__ = ["Artifact", "parse_artifact", "find_class_path"]
