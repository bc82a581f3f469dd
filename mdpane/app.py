from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from mdpane.di.container import Container
from mdpane.logging_setup import install_global_exception_hook, setup_logging
from mdpane.services.config.app_config import build_app_config
from mdpane.utils.constants import APP_NAME, APP_ORG

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, installs the fallback font, composes the
    application via the DI container and runs the event loop.
    """
    config = build_app_config()
    setup_logging(config.log_level())
    install_global_exception_hook()
    if config.loaded_from is not None:
        logger.info("Using configuration %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config)

    # Needs a QApplication; failure only degrades glyph coverage.
    container.font_service.install()

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path)
    win.show()

    return app.exec()
