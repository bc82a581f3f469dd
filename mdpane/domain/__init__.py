"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IConfigService, IFileService, IFontService, IMarkdownRenderer
from .models import FileReference, has_markdown_suffix, join_line_endings, split_line_endings

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IFontService",
    "IConfigService",
    "FileReference",
    "has_markdown_suffix",
    "split_line_endings",
    "join_line_endings",
]
