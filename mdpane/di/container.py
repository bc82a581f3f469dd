from __future__ import annotations

from pathlib import Path

from mdpane.domain.interfaces import IFileService, IFontService, IMarkdownRenderer
from mdpane.services.config.app_config import AppConfig, build_app_config
from mdpane.services.file_service import FileService
from mdpane.services.font_service import FontService
from mdpane.services.markdown_renderer import MarkdownRenderer
from mdpane.services.ui.adapters import QtFileDialogService, QtMessageService
from mdpane.services.ui.main_window import MainWindow
from mdpane.services.ui.ports import IFileDialogService, IMessageService
from mdpane.services.ui.presenters import MainPresenter


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the window and binds the presenter to it
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        fonts: IFontService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.font_service: IFontService = fonts or FontService(self.config.font_file())
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(config: AppConfig | None = None) -> Container:
        return Container(config=config)

    # ---------- UI factories ----------

    def build_main_presenter(self, view: MainWindow) -> MainPresenter:
        return MainPresenter(
            view=view,
            renderer=self.renderer,
            files=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            base_title=self.config.window_title(),
            parent=view,
        )

    def build_main_window(self, *, start_path: Path | None = None) -> MainWindow:
        """
        Create the Qt MainWindow, attach its presenter and optionally open a first file.
        """
        window = MainWindow(
            app_title=self.config.window_title(),
            size=self.config.window_size(),
        )
        presenter = self.build_main_presenter(window)
        window.attach_presenter(presenter)

        if start_path is not None:
            presenter.open_path(start_path)

        return window
