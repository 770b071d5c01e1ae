"""Tests for the application binding."""

from __future__ import annotations

from pathlib import Path

import pytest

import kettle
from kettle import paths
from kettle.paths import UserDirs


def _isolated(name: str, root: Path, config_file: str | None = None) -> kettle.App:
    return kettle.app(
        name,
        config_file,
        user_dirs=UserDirs(app_name=name, config_dir_override=root / name),
    )


def test_default_config_handle(tmp_path: Path) -> None:
    this_app = _isolated("this_app", tmp_path)

    this_app.config().set("view", "horizontal")

    assert this_app.config().get("view") == "horizontal"
    assert this_app.config().path == tmp_path / "this_app" / "config"


def test_custom_default_config_filename(tmp_path: Path) -> None:
    this_app = _isolated("this_app", tmp_path, "config.ini")

    assert this_app.config().path == tmp_path / "this_app" / "config.ini"
    assert this_app.config_file("other").path == tmp_path / "this_app" / "other"


def test_named_config_file_with_section(tmp_path: Path) -> None:
    this_app = _isolated("this_app", tmp_path)

    this_app.config_file("admin_profiles").with_section("dev").set("view", None)

    assert this_app.config_file("admin_profiles").with_section("dev").get("view") is None
    assert this_app.config().get("view") is None
    assert (tmp_path / "this_app" / "admin_profiles").is_file()


def test_directories_join_app_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths, "user_cache_dir", lambda: str(tmp_path / "cache"))
    monkeypatch.setattr(
        paths, "user_config_dir", lambda roaming=False: str(tmp_path / "config")
    )
    monkeypatch.setattr(
        paths,
        "user_data_dir",
        lambda roaming=False: str(tmp_path / ("data" if roaming else "local")),
    )
    monkeypatch.setattr(paths, "_platform", lambda: "linux")

    this_app = kettle.app("this_app")

    assert this_app.cache_dir() == tmp_path / "cache" / "this_app"
    assert this_app.config_dir() == tmp_path / "config" / "this_app"
    assert this_app.data_dir() == tmp_path / "data" / "this_app"
    assert this_app.data_local_dir() == tmp_path / "local" / "this_app"
    assert this_app.preference_dir() == tmp_path / "config" / "this_app"
    assert this_app.config().directory == this_app.config_dir()
    assert not this_app.cache_dir().exists()


def test_app_requires_a_name() -> None:
    with pytest.raises(ValueError):
        kettle.app("")
