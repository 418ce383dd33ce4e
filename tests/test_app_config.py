# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from pynote.services.config.app_config import AppConfig, build_app_config
from pynote.utils.constants import APP_NAME


class FakeIni:
    """Minimal IniConfigService-like fake backed by a dict of sections."""

    def __init__(self, data: dict[str, dict[str, str]] | None = None) -> None:
        self._data = data or {}

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._data.get(section, {}).get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        v = self.get(section, key)
        try:
            return int(v) if v is not None else default
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        v = self.get(section, key)
        if v is None:
            return default
        return {"true": True, "false": False}.get(v, default)


def test_defaults_from_empty_config():
    cfg = AppConfig.from_service(FakeIni())
    assert cfg == AppConfig()
    assert cfg.app_name == APP_NAME
    assert (cfg.window_width, cfg.window_height) == (800, 600)
    assert cfg.word_wrap is True
    assert cfg.log_level == "WARNING"


def test_values_are_read():
    cfg = AppConfig.from_service(
        FakeIni(
            {
                "app": {"name": "Scratch"},
                "window": {"width": "1024", "height": "700"},
                "editor": {"word_wrap": "false"},
                "logging": {"level": "debug"},
            }
        )
    )
    assert cfg.app_name == "Scratch"
    assert (cfg.window_width, cfg.window_height) == (1024, 700)
    assert cfg.word_wrap is False
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize("width", ["0", "-5", "wide"])
def test_bad_sizes_fall_back(width):
    cfg = AppConfig.from_service(FakeIni({"window": {"width": width}}))
    assert cfg.window_width == 800


def test_unknown_log_level_falls_back():
    cfg = AppConfig.from_service(FakeIni({"logging": {"level": "chatty"}}))
    assert cfg.log_level == "WARNING"


def test_build_app_config_reads_project_ini(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(
        "pynote.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "empty"),
    )
    ini = tmp_path / "repo" / "config" / "config.ini"
    ini.parent.mkdir(parents=True)
    ini.write_text("[app]\nname = From Repo\n", encoding="utf-8")

    cfg = build_app_config(project_root=tmp_path / "repo")
    assert cfg.app_name == "From Repo"


def test_build_app_config_explicit_ini(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(
        "pynote.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "empty"),
    )
    explicit = tmp_path / "mine.ini"
    explicit.write_text("[window]\nheight = 900\n", encoding="utf-8")

    cfg = build_app_config(explicit_ini=explicit, project_root=tmp_path / "none")
    assert cfg.window_height == 900
