from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to a full HTML string (including CSS)."""

    def to_html(self, markdown_text: str) -> str: ...


class IFileService(Protocol):
    """Read/write whole text files. Errors surface as OSError."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IFontService(Protocol):
    """Register an extra application font for scripts the default font lacks."""

    def install(self) -> str | None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration values."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...

    @property
    def loaded_from(self) -> Path | None: ...
