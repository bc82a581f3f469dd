"""Concrete service implementations."""

from .file_service import FileService
from .font_service import FontService
from .markdown_renderer import MarkdownRenderer

__all__ = ["FileService", "FontService", "MarkdownRenderer"]
