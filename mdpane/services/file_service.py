from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdpane.domain.interfaces import IFileService


class FileService(IFileService):
    """Whole-file UTF-8 reads and atomic writes. Content round-trips byte for byte."""

    def read_text(self, path: Path) -> str:
        # read_bytes() avoids universal-newline translation
        return path.read_bytes().decode("utf-8")

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
