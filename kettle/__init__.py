"""Per-application directories and a small INI settings store."""

from .app import App, app
from .config import DEFAULT_CONFIG_FILE, Config
from .document import Document
from .errors import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    DirectoryResolutionError,
    KettleError,
)
from .paths import DirKind, UserDirs, resolve, root_for

__version__ = "0.1.0"

__all__ = [
    "App",
    "app",
    "Config",
    "DEFAULT_CONFIG_FILE",
    "Document",
    "DirKind",
    "UserDirs",
    "resolve",
    "root_for",
    "KettleError",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "DirectoryResolutionError",
]
