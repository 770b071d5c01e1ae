"""Platform-independent helpers for per-application directories."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from platformdirs import (
    user_cache_dir,
    user_config_dir,
    user_data_dir,
    user_desktop_dir,
    user_documents_dir,
    user_downloads_dir,
    user_music_dir,
    user_pictures_dir,
    user_runtime_dir,
    user_videos_dir,
)

from .errors import DirectoryResolutionError

__all__ = [
    "DirKind",
    "UserDirs",
    "audio_dir",
    "desktop_dir",
    "document_dir",
    "download_dir",
    "executable_dir",
    "font_dir",
    "home_dir",
    "picture_dir",
    "public_dir",
    "resolve",
    "root_for",
    "runtime_dir",
    "template_dir",
    "video_dir",
]


class DirKind(str, Enum):
    """Directory kinds that every supported platform defines."""

    CACHE = "cache"
    CONFIG = "config"
    DATA = "data"
    DATA_LOCAL = "data_local"
    PREFERENCE = "preference"


def _platform() -> str:
    return sys.platform


def home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise DirectoryResolutionError("unable to determine the home directory") from exc


def _checked_root(kind: DirKind, lookup: Callable[[], str]) -> Path:
    try:
        root = Path(lookup())
    except (KeyError, OSError, RuntimeError) as exc:
        raise DirectoryResolutionError(f"unable to determine the {kind.value} directory") from exc
    if not root.is_absolute():
        # platformdirs hands back "~/..." untouched when the home directory is unknown
        raise DirectoryResolutionError(f"unable to determine the {kind.value} directory: {root}")
    return root


def root_for(kind: DirKind | str) -> Path:
    """Return the OS root directory for ``kind`` (without any application name).

    Raises :class:`DirectoryResolutionError` when the root cannot be determined.
    """

    kind = DirKind(kind)
    if kind is DirKind.CACHE:
        return _checked_root(kind, user_cache_dir)
    if kind is DirKind.CONFIG:
        return _checked_root(kind, lambda: user_config_dir(roaming=True))
    if kind is DirKind.DATA:
        return _checked_root(kind, lambda: user_data_dir(roaming=True))
    if kind is DirKind.DATA_LOCAL:
        return _checked_root(kind, lambda: user_data_dir(roaming=False))
    if _platform() == "darwin":
        return home_dir() / "Library" / "Preferences"
    return root_for(DirKind.CONFIG)


def resolve(kind: DirKind | str, app_name: str) -> Path:
    """Join the OS root for ``kind`` with ``app_name``; nothing is created."""

    return root_for(kind) / app_name


# ---------- Optional per-user directories ----------
#
# These have no guaranteed convention on every platform and return ``None``
# where the host does not define one.


def _optional(value: str | None) -> Path | None:
    return Path(value) if value else None


def runtime_dir() -> Path | None:
    if _platform().startswith("linux") and os.environ.get("XDG_RUNTIME_DIR"):
        return Path(user_runtime_dir())
    return None


def executable_dir() -> Path | None:
    if not _platform().startswith("linux"):
        return None
    override = os.environ.get("XDG_BIN_HOME")
    if override:
        return Path(override)
    return home_dir() / ".local" / "bin"


def font_dir() -> Path | None:
    platform = _platform()
    if platform == "darwin":
        return home_dir() / "Library" / "Fonts"
    if platform.startswith("linux"):
        return root_for(DirKind.DATA) / "fonts"
    return None


def desktop_dir() -> Path | None:
    return _optional(user_desktop_dir())


def document_dir() -> Path | None:
    return _optional(user_documents_dir())


def download_dir() -> Path | None:
    return _optional(user_downloads_dir())


def audio_dir() -> Path | None:
    return _optional(user_music_dir())


def picture_dir() -> Path | None:
    return _optional(user_pictures_dir())


def video_dir() -> Path | None:
    return _optional(user_videos_dir())


def _linux_user_dir(env_var: str, default_name: str) -> Path | None:
    configured = os.environ.get(env_var)
    if configured:
        return Path(configured)
    candidate = home_dir() / default_name
    return candidate if candidate.is_dir() else None


def public_dir() -> Path | None:
    platform = _platform()
    if platform == "darwin":
        return home_dir() / "Public"
    if platform == "win32":
        return _optional(os.environ.get("PUBLIC"))
    return _linux_user_dir("XDG_PUBLICSHARE_DIR", "Public")


def template_dir() -> Path | None:
    platform = _platform()
    if platform == "darwin":
        return None
    if platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) / "Microsoft" / "Windows" / "Templates" if appdata else None
    return _linux_user_dir("XDG_TEMPLATES_DIR", "Templates")


@dataclass(frozen=True)
class UserDirs:
    """Expose the platform-configured locations for one application."""

    app_name: str
    cache_dir_override: Path | None = None
    config_dir_override: Path | None = None
    data_dir_override: Path | None = None
    data_local_dir_override: Path | None = None
    preference_dir_override: Path | None = None

    def dir_for(self, kind: DirKind | str) -> Path:
        kind = DirKind(kind)
        override = getattr(self, f"{kind.value}_dir_override")
        return Path(override) if override else resolve(kind, self.app_name)

    def cache_dir(self) -> Path:
        return self.dir_for(DirKind.CACHE)

    def config_dir(self) -> Path:
        return self.dir_for(DirKind.CONFIG)

    def data_dir(self) -> Path:
        return self.dir_for(DirKind.DATA)

    def data_local_dir(self) -> Path:
        return self.dir_for(DirKind.DATA_LOCAL)

    def preference_dir(self) -> Path:
        return self.dir_for(DirKind.PREFERENCE)
