from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mdpane"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the package logger. Safe to call more than once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    ch = logging.StreamHandler(sys.stderr or sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger


def install_global_exception_hook() -> None:
    log = logging.getLogger(LOGGER_NAME)

    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
