from __future__ import annotations

import os
from pathlib import Path

import pytest

# Widgets must be creatable on headless CI machines.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from mdpane.services.file_service import FileService  # noqa: E402
from mdpane.services.markdown_renderer import MarkdownRenderer  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeDialogs:
    """Returns queued paths; an empty queue behaves like Cancel."""

    def __init__(self) -> None:
        self.open_results: list[Path | None] = []
        self.save_results: list[Path | None] = []
        self.calls: list[tuple[str, str | None, str]] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.calls.append(("open", start_dir, filter_str))
        return self.open_results.pop(0) if self.open_results else None

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.calls.append(("save", start_path, filter_str))
        return self.save_results.pop(0) if self.save_results else None


class FakeMessages:
    def __init__(self) -> None:
        self.infos: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def info(self, parent, title, text):
        self.infos.append((title, text))

    def error(self, parent, title, text):
        self.errors.append((title, text))


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()
