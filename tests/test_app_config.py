from __future__ import annotations

import logging
from pathlib import Path

from mdpane.services.config.app_config import AppConfig, _project_root_fallback, build_app_config
from mdpane.services.config.ini_config_service import IniConfigService


def _config(tmp_path: Path, text: str) -> AppConfig:
    ini = tmp_path / "config.ini"
    ini.write_text(text, encoding="utf-8")
    return AppConfig(ini=IniConfigService(explicit_path=ini))


def test_defaults(tmp_path):
    cfg = _config(tmp_path, "[other]\nx = 1\n")
    assert cfg.window_title() == "Markdown"
    assert cfg.window_size() == (960, 540)
    assert cfg.font_file() == "SmileySans-Oblique.ttf"
    assert cfg.log_level() == logging.INFO


def test_overrides(tmp_path):
    cfg = _config(
        tmp_path,
        "[window]\ntitle = Notes\nwidth = 1280\nheight = 720\n"
        "[fonts]\nfamily_file = NotoSansCJK.ttc\n"
        "[logging]\nlevel = debug\n",
    )
    assert cfg.window_title() == "Notes"
    assert cfg.window_size() == (1280, 720)
    assert cfg.font_file() == "NotoSansCJK.ttc"
    assert cfg.log_level() == logging.DEBUG


def test_invalid_values_use_defaults(tmp_path):
    cfg = _config(
        tmp_path,
        "[window]\ntitle =   \nwidth = -5\nheight = wide\n[logging]\nlevel = LOUD\n",
    )
    assert cfg.window_title() == "Markdown"
    assert cfg.window_size() == (960, 540)
    assert cfg.log_level() == logging.INFO


def test_project_root_fallback_pyinstaller(monkeypatch, tmp_path):
    monkeypatch.setattr("sys._MEIPASS", str(tmp_path), raising=False)
    assert _project_root_fallback() == tmp_path


def test_build_app_config_reads_project_config(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "mdpane.services.config.ini_config_service.user_config_dir",
        lambda app: str(tmp_path / "no-user-config"),
    )
    ini = tmp_path / "config" / "config.ini"
    ini.parent.mkdir()
    ini.write_text("[window]\ntitle = Repo\n", encoding="utf-8")

    cfg = build_app_config(project_root=tmp_path)
    assert cfg.window_title() == "Repo"
    assert cfg.loaded_from == ini
