from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from pynote.domain.interfaces import IConfigService
from pynote.services.config.ini_config_service import IniConfigService
from pynote.utils.constants import APP_NAME

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # pynote/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """Typed view over the INI settings the application actually uses."""

    app_name: str = APP_NAME
    window_width: int = 800
    window_height: int = 600
    word_wrap: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_service(cls, cfg: IConfigService) -> AppConfig:
        width = cfg.get_int("window", "width", None)
        height = cfg.get_int("window", "height", None)
        level = (cfg.get("logging", "level", None) or "").strip().upper()
        name = (cfg.get("app", "name", None) or "").strip()
        return cls(
            app_name=name or APP_NAME,
            window_width=width if width and width > 0 else cls.window_width,
            window_height=height if height and height > 0 else cls.window_height,
            word_wrap=cfg.get_bool("editor", "word_wrap", True) is not False,
            log_level=level if level in _LEVELS else cls.log_level,
        )


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig.from_service(ini)
