from .config import config
from .doctor import doctor
from .log import log
from .resolve import resolve
from .version import version

__all__ = ["config", "doctor", "log", "resolve", "version"]
