from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from mdpane.services.config.ini_config_service import IniConfigService
from mdpane.utils.constants import (
    APP_NAME,
    DEFAULT_FONT_FILE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode walks up from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> mdpane/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """Typed view over IniConfigService with the application's defaults."""

    ini: IniConfigService

    def window_title(self) -> str:
        return (self.ini.get("window", "title") or "").strip() or APP_NAME

    def window_size(self) -> tuple[int, int]:
        w = self.ini.get_int("window", "width", DEFAULT_WINDOW_WIDTH) or DEFAULT_WINDOW_WIDTH
        h = self.ini.get_int("window", "height", DEFAULT_WINDOW_HEIGHT) or DEFAULT_WINDOW_HEIGHT
        if w <= 0 or h <= 0:
            return DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
        return w, h

    def font_file(self) -> str:
        return (self.ini.get("fonts", "family_file") or "").strip() or DEFAULT_FONT_FILE

    def log_level(self) -> int:
        name = (self.ini.get("logging", "level") or "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
