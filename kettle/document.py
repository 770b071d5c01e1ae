"""INI document model used by the config store.

The document wraps :class:`configparser.ConfigParser` with three adjustments:

* lines that appear before the first ``[section]`` header belong to an
  unnamed default scope, which is never confused with a named section;
* ``[DEFAULT]`` is an ordinary section (no value inheritance);
* key case and ``%`` characters are kept verbatim.
"""

from __future__ import annotations

import configparser
from pathlib import Path

__all__ = ["Document", "check_key", "check_section", "check_value"]

# Header names no ``[...]`` line in a text file can reasonably produce.
_ROOT = "\x00root"
_DEFAULTS = "\x00defaults"

_DELIMITERS = ("=", ":")
_COMMENT_PREFIXES = ("#", ";")


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=_DELIMITERS,
        comment_prefixes=_COMMENT_PREFIXES,
        strict=False,
        empty_lines_in_values=False,
        default_section=_DEFAULTS,
        interpolation=None,
    )
    parser.optionxform = str
    return parser


def check_section(section: str | None) -> None:
    """Raise ``ValueError`` unless ``section`` can be written as a ``[header]``."""

    if section is None:
        return
    if not section or section != section.strip():
        raise ValueError(f"invalid section name {section!r}: empty or padded with whitespace")
    if any(char in section for char in "]\n\r\x00"):
        raise ValueError(f"invalid section name {section!r}: contains ']' or a line break")


def check_key(key: str) -> None:
    """Raise ``ValueError`` unless ``key`` reads back as the same key."""

    if not key or key != key.strip():
        raise ValueError(f"invalid key {key!r}: empty or padded with whitespace")
    if any(char in key for char in (*_DELIMITERS, "\n", "\r")):
        raise ValueError(f"invalid key {key!r}: contains a delimiter or a line break")
    if key.startswith(("[", *_COMMENT_PREFIXES)):
        raise ValueError(f"invalid key {key!r}: starts with '[' or a comment prefix")


def check_value(value: str) -> None:
    """Raise ``ValueError`` unless ``value`` reads back verbatim.

    Multi-line values are stored as continuation lines, so every line must be
    non-blank and free of surrounding whitespace, and only the first may start
    with a comment prefix.
    """

    if "\r" in value:
        raise ValueError("invalid value: contains a carriage return")
    first, *rest = value.split("\n")
    if first != first.strip():
        raise ValueError("invalid value: padded with whitespace")
    for line in rest:
        if not line.strip():
            raise ValueError("invalid value: contains a blank line")
        if line != line.strip() or line.startswith(_COMMENT_PREFIXES):
            raise ValueError(f"invalid value: continuation line {line!r} would not survive")


def _format_entry(key: str, value: str) -> str:
    return f"{key} = {value}".replace("\n", "\n\t")


class Document:
    """Sections and key/value pairs of one INI file."""

    def __init__(self, parser: configparser.ConfigParser | None = None) -> None:
        if parser is None:
            parser = _new_parser()
            parser.add_section(_ROOT)
        self._parser = parser

    @classmethod
    def parse(cls, text: str) -> "Document":
        """Parse INI text; raises :class:`configparser.Error` on malformed input."""

        parser = _new_parser()
        parser.read_string(f"[{_ROOT}]\n{text}")
        return cls(parser)

    @staticmethod
    def _scope(section: str | None) -> str:
        return _ROOT if section is None else section

    def sections(self) -> list[str]:
        """Named sections in file order (the default scope is not listed)."""

        return [name for name in self._parser.sections() if name != _ROOT]

    def has_section(self, section: str) -> bool:
        return section != _ROOT and self._parser.has_section(section)

    def items(self, section: str | None) -> dict[str, str]:
        name = self._scope(section)
        if not self._parser.has_section(name):
            return {}
        return dict(self._parser.items(name, raw=True))

    def get(self, section: str | None, key: str) -> str | None:
        name = self._scope(section)
        if not self._parser.has_section(name):
            return None
        return self._parser.get(name, key, raw=True, fallback=None)

    def set(self, section: str | None, key: str, value: str) -> None:
        check_section(section)
        check_key(key)
        check_value(value)
        name = self._scope(section)
        if not self._parser.has_section(name):
            self._parser.add_section(name)
        self._parser.set(name, key, value)

    def delete(self, section: str | None, key: str) -> None:
        """Remove ``key``; a named section left without keys is dropped."""

        name = self._scope(section)
        if not self._parser.has_section(name):
            return
        removed = self._parser.remove_option(name, key)
        if removed and section is not None and not self._parser.options(name):
            self._parser.remove_section(name)

    def serialize(self) -> str:
        blocks: list[str] = []
        for name in self._parser.sections():
            lines = [] if name == _ROOT else [f"[{name}]"]
            lines.extend(
                _format_entry(key, value)
                for key, value in self._parser.items(name, raw=True)
            )
            if lines:
                blocks.append("\n".join(lines))
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def write(self, path: Path) -> None:
        """Overwrite ``path`` with the serialized document."""

        path.write_text(self.serialize(), encoding="utf-8")
