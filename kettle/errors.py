"""Errors raised by the kettle library."""

from __future__ import annotations

from pathlib import Path


class KettleError(Exception):
    """Base class for kettle errors."""


class DirectoryResolutionError(KettleError):
    """Raised when a per-user root directory cannot be determined."""


class ConfigError(KettleError):
    """Base class for failures tied to a config file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigIOError(ConfigError):
    """The config file could not be read, written or created."""


class ConfigParseError(ConfigError):
    """The config file is not valid INI text."""
