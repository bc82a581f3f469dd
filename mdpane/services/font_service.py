from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from PyQt6.QtCore import QStandardPaths
from PyQt6.QtGui import QFont, QFontDatabase
from PyQt6.QtWidgets import QApplication

from mdpane.domain.interfaces import IFontService
from mdpane.utils.constants import DEFAULT_FONT_FILE

logger = logging.getLogger(__name__)


def system_font_dirs() -> list[Path]:
    """Qt's font locations followed by the usual per-platform font directories."""
    dirs = [
        Path(p)
        for p in QStandardPaths.standardLocations(QStandardPaths.StandardLocation.FontsLocation)
    ]
    home = Path.home()
    if sys.platform.startswith("win"):
        windir = os.environ.get("WINDIR", r"C:\Windows")
        dirs.append(Path(windir) / "Fonts")
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
    elif sys.platform == "darwin":
        dirs += [home / "Library" / "Fonts", Path("/Library/Fonts"), Path("/System/Library/Fonts")]
    else:
        dirs += [
            home / ".fonts",
            home / ".local" / "share" / "fonts",
            Path("/usr/local/share/fonts"),
            Path("/usr/share/fonts"),
        ]

    seen: set[Path] = set()
    unique: list[Path] = []
    for d in dirs:
        if d not in seen:
            seen.add(d)
            unique.append(d)
    return unique


def find_font_file(file_name: str, search_dirs: Iterable[Path]) -> Path | None:
    """Return the first file called `file_name` (case-insensitive) under any of the dirs."""
    wanted = file_name.lower()
    for root in search_dirs:
        if not root.is_dir():
            continue
        for dirpath, _dirnames, filenames in os.walk(root):
            for name in filenames:
                if name.lower() == wanted:
                    return Path(dirpath) / name
    return None


class FontService(IFontService):
    """
    Makes a bundled CJK-capable font the application default.

    Qt's default font may lack glyphs for non-Latin scripts. A missing or broken
    font file is logged and otherwise ignored; the app keeps the default font.
    """

    def __init__(
        self,
        file_name: str = DEFAULT_FONT_FILE,
        search_dirs: Sequence[Path] | None = None,
    ) -> None:
        self.file_name = file_name
        self._search_dirs = search_dirs

    def install(self) -> str | None:
        dirs = self._search_dirs if self._search_dirs is not None else system_font_dirs()
        path = find_font_file(self.file_name, dirs)
        if path is None:
            logger.error("Font %r not found; non-Latin text may not render", self.file_name)
            return None

        logger.info("Found %r in %s", self.file_name, path.parent)

        font_id = QFontDatabase.addApplicationFont(str(path))
        if font_id < 0:
            logger.error("Could not load font data from %s", path)
            return None

        families = QFontDatabase.applicationFontFamilies(font_id)
        if not families:
            logger.error("Font %s has no usable family", path)
            return None

        family = families[0]
        QApplication.setFont(QFont(family))
        logger.info("Application font set to %r", family)
        return family
