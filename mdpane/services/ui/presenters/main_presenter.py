from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from mdpane.domain.interfaces import IFileService, IMarkdownRenderer
from mdpane.domain.models import (
    FileReference,
    has_markdown_suffix,
    join_line_endings,
    split_line_endings,
)
from mdpane.services.ui.ports.dialogs import IFileDialogService
from mdpane.services.ui.ports.messages import IMessageService
from mdpane.utils.constants import APP_NAME, MD_FILTER, UNTITLED_NAME

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor/preview
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_preview_html(self, html: str) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_save_enabled(self, enabled: bool) -> None: ...


class MainPresenter:
    """
    Owns the file reference and implements the file menu and live preview.

    The view only forwards events here; every decision about what gets read,
    written, rejected or shown is made in this class.
    """

    def __init__(
        self,
        view: IMainView,
        renderer: IMarkdownRenderer,
        files: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        base_title: str = APP_NAME,
        parent: Any | None = None,
    ) -> None:
        self.view = view
        self.renderer = renderer
        self.files = files
        self.messages = messages
        self.dialogs = dialogs
        self.base_title = base_title
        self.parent = parent
        self.current = FileReference()

        self.view.set_title(self.base_title)
        self.view.set_save_enabled(self.current.save_enabled)

    # ---------- Preview ----------

    def render_preview(self) -> None:
        html = self.renderer.to_html(self.view.get_editor_text())
        self.view.set_preview_html(html)

    # ---------- File menu ----------

    def open_document(self) -> None:
        start_dir = str(self.current.path.parent) if self.current.path else None
        path = self.dialogs.get_open_file(self.parent, "Open", start_dir, MD_FILTER)
        if path is None:
            return
        self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            text = self.files.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to open %s: %s", path, e)
            self.messages.error(self.parent, "Open Error", f"Failed to open file:\n{e}")
            return False

        # The editor widget only knows LF; the file's own endings are put back on save.
        buffer_text, line_endings = split_line_endings(text)
        # Unsaved edits are replaced without asking.
        self.view.set_editor_text(buffer_text)
        self._track(path, line_endings)
        logger.info("Opened %s", path)
        return True

    def save_document(self) -> None:
        if self.current.path is None:
            return
        self._write_to(self.current.path)

    def save_document_as(self) -> None:
        start = (
            str(self.current.path.parent / UNTITLED_NAME) if self.current.path else UNTITLED_NAME
        )
        path = self.dialogs.get_save_file(self.parent, "Save as", start, MD_FILTER)
        if path is None:
            return
        if not has_markdown_suffix(path):
            self.messages.info(self.parent, "Notice", "Use .md or .MD as the file extension")
            return
        if self._write_to(path):
            self._track(path)

    # ---------- Helpers ----------

    def _write_to(self, path: Path) -> bool:
        text = join_line_endings(self.view.get_editor_text(), self.current.line_endings)
        try:
            self.files.write_text_atomic(path, text)
        except OSError as e:
            logger.error("Failed to save %s: %s", path, e)
            self.messages.error(self.parent, "Save Error", f"Failed to save file:\n{e}")
            return False
        logger.info("Saved %s", path)
        return True

    def _track(self, path: Path, line_endings: tuple[str, ...] | None = None) -> None:
        self.current.track(path, line_endings)
        self.view.set_save_enabled(self.current.save_enabled)
        # Built from the base title each time, so repeated opens do not keep appending names.
        self.view.set_title(f"{self.base_title}-{self.current.display_name}")
