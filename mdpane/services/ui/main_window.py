from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QSplitter,
    QTextBrowser,
    QTextEdit,
)

from mdpane.services.ui.presenters.main_presenter import MainPresenter
from mdpane.utils.constants import APP_NAME, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH


class MainWindow(QMainWindow):
    """Thin PyQt window: editor on the left, rendered preview on the right.

    All behaviour lives in the attached MainPresenter; this class only owns
    widgets and forwards their signals.
    """

    def __init__(
        self,
        *,
        app_title: str = APP_NAME,
        size: tuple[int, int] = (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT),
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(*size)

        self.presenter: MainPresenter | None = None
        self.preview_html = ""

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        self._build_actions()
        self._build_menu()
        self.center_on_screen()

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction("Open", self, shortcut=QKeySequence.StandardKey.Open)
        self.act_save = QAction("Save", self, shortcut=QKeySequence.StandardKey.Save)
        self.act_save_as = QAction("Save as", self, shortcut=QKeySequence.StandardKey.SaveAs)
        # Enabled once a file is associated
        self.act_save.setEnabled(False)

    def _build_menu(self):
        filem = self.menuBar().addMenu("file")
        filem.addAction(self.act_open)
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)

    def center_on_screen(self) -> None:
        screen = self.screen() or QApplication.primaryScreen()
        if screen is None:
            return
        geo = self.frameGeometry()
        geo.moveCenter(screen.availableGeometry().center())
        self.move(geo.topLeft())

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter
        self.act_open.triggered.connect(presenter.open_document)
        self.act_save.triggered.connect(presenter.save_document)
        self.act_save_as.triggered.connect(presenter.save_document_as)
        self.editor.textChanged.connect(presenter.render_preview)
        presenter.render_preview()

    # ---------- IMainView (structural) ----------
    def get_editor_text(self) -> str:
        # toPlainText() turns U+00A0 into plain spaces; the raw text keeps it.
        return self.editor.document().toRawText().replace("\u2029", "\n")

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def set_preview_html(self, html: str) -> None:
        self.preview_html = html
        self.preview.setHtml(html)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_save_enabled(self, enabled: bool) -> None:
        self.act_save.setEnabled(enabled)
