"""Application binding that ties a name to its directories and config files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_CONFIG_FILE, Config
from .paths import UserDirs


@dataclass(frozen=True)
class App:
    """Per-application entry point.

    Declare one at module level and use it everywhere::

        MY_APP = kettle.app("my_app")
        MY_APP.config().set("view", "horizontal")
        MY_APP.config_file("profiles").with_section("dev").get("view")
    """

    name: str
    default_config_file: str | None = None
    user_dirs: UserDirs | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("application name must not be empty")
        if self.user_dirs is None:
            object.__setattr__(self, "user_dirs", UserDirs(app_name=self.name))

    def config(self) -> Config:
        """Handle to the default config file."""
        return self.config_file(self.default_config_file or DEFAULT_CONFIG_FILE)

    def config_file(self, filename: str) -> Config:
        """Handle to a named config file in the config directory."""
        return Config(directory=self.config_dir(), filename=filename)

    def cache_dir(self) -> Path:
        return self.user_dirs.cache_dir()

    def config_dir(self) -> Path:
        return self.user_dirs.config_dir()

    def data_dir(self) -> Path:
        return self.user_dirs.data_dir()

    def data_local_dir(self) -> Path:
        return self.user_dirs.data_local_dir()

    def preference_dir(self) -> Path:
        return self.user_dirs.preference_dir()


def app(
    name: str,
    config_file: str | None = None,
    *,
    user_dirs: UserDirs | None = None,
) -> App:
    """Declare an application; bind the result to a module-level constant."""

    return App(name=name, default_config_file=config_file, user_dirs=user_dirs)
