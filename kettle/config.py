"""Small INI-backed key/value store living in an application's config directory."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from .document import Document, check_key, check_section, check_value
from .errors import ConfigIOError, ConfigParseError

__all__ = ["Config", "DEFAULT_CONFIG_FILE"]

DEFAULT_CONFIG_FILE = "config"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Handle on one config file, optionally scoped to a section.

    Handles are plain values: building one performs no I/O, and every
    :meth:`get` or :meth:`set` reloads the file from disk. Several handles may
    point at the same file; concurrent writers are not coordinated and the
    last completed write wins.
    """

    directory: Path
    filename: str = DEFAULT_CONFIG_FILE
    section: str | None = None

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.filename

    def with_section(self, name: str) -> "Config":
        """Return a new handle whose lookups and writes target ``[name]``."""

        return replace(self, section=name)

    # ---------- Public API ----------

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or ``None`` when it cannot be found.

        A missing, unreadable or malformed file reads as "nothing configured".
        """

        document = self._load_quietly()
        if document is None:
            return None
        return document.get(self.section, key)

    def items(self) -> dict[str, str]:
        """Return every key/value pair in this handle's scope."""

        document = self._load_quietly()
        if document is None:
            return {}
        return document.items(self.section)

    def set(self, key: str, value: str | None) -> None:
        """Store ``value`` under ``key``; ``None`` removes the key.

        The directory and an empty file are created when the file does not
        exist yet. Keys, values or section names that would not read back
        unchanged raise ``ValueError`` before the file is touched. Any other
        read, parse or write failure raises a
        :class:`~kettle.errors.KettleError`.
        """

        if value is not None and not isinstance(value, str):
            raise TypeError(f"config values must be strings, not {type(value).__name__}")
        check_section(self.section)
        check_key(key)
        if value is not None:
            check_value(value)

        document = self._load()
        if document is None:
            self._create_empty()
            document = self._load()
            if document is None:
                raise ConfigIOError(self.path, "file vanished after creation")

        if value is None:
            document.delete(self.section, key)
        else:
            document.set(self.section, key, value)
        self._save(document)

    # ---------- Internal helpers ----------

    def _read_text(self) -> str | None:
        """Return the file contents, or ``None`` when the file does not exist."""

        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigIOError(self.path, f"unable to read config: {exc}") from exc

    def _load(self) -> Document | None:
        text = self._read_text()
        if text is None:
            return None
        try:
            return Document.parse(text)
        except configparser.Error as exc:
            raise ConfigParseError(self.path, f"invalid config: {exc}") from exc

    def _load_quietly(self) -> Document | None:
        try:
            return self._load()
        except ConfigParseError as exc:
            logger.warning("ignoring malformed config %s", exc)
        except ConfigIOError as exc:
            logger.debug("ignoring unreadable config %s", exc)
        return None

    def _create_empty(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(b"")
        except OSError as exc:
            raise ConfigIOError(self.path, f"unable to create config: {exc}") from exc
        logger.debug("created empty config at %s", self.path)

    def _save(self, document: Document) -> None:
        try:
            document.write(self.path)
        except OSError as exc:
            raise ConfigIOError(self.path, f"unable to write config: {exc}") from exc
        logger.debug("saved config %s", self.path)
