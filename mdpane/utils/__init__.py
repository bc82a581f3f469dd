"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    DEFAULT_FONT_FILE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    HTML_TEMPLATE,
    MD_FILTER,
    MD_SUFFIX,
    UNTITLED_NAME,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "DEFAULT_WINDOW_WIDTH",
    "DEFAULT_WINDOW_HEIGHT",
    "DEFAULT_FONT_FILE",
    "MD_SUFFIX",
    "MD_FILTER",
    "UNTITLED_NAME",
]
