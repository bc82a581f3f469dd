# mdpane/services/markdown_renderer.py
from __future__ import annotations

from collections.abc import Sequence

import markdown

from mdpane.domain.interfaces import IMarkdownRenderer
from mdpane.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "extra",
    "sane_lists",
    "pymdownx.tilde",  # ~~strike~~
    "pymdownx.tasklist",  # - [ ] / - [x]
    "pymdownx.magiclink",  # bare URLs become links
)


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts the whole Markdown buffer to a standalone HTML page.

    Every call parses from scratch; there is no caching or incremental state,
    so the output depends only on the text passed in.
    """

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = list(extensions)

    def to_html(self, markdown_text: str) -> str:
        body = markdown.markdown(
            markdown_text,
            extensions=self.extensions,
            extension_configs={"pymdownx.tasklist": {"custom_checkbox": False}},
            output_format="html",
        )
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body)
