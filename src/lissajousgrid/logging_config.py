"""
Logging Configuration
Sets up the application logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

QT_LOGGER_NAME = "lissajousgrid.qt"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def forward_qt_message(msg_type: QtMsgType, context: Optional[QMessageLogContext], message: str) -> None:
    """Qt message handler: re-emit QPainter/QTimer/platform messages on the 'lissajousgrid.qt' logger."""
    level = _QT_LEVELS.get(msg_type, logging.WARNING)
    origin = f" ({context.file}:{context.line})" if context is not None and context.file else ""
    logging.getLogger(QT_LOGGER_NAME).log(level, f"{message}{origin}")


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configures the 'lissajousgrid' namespace logger from the command-line flags.

    Args:
        debug: Log clock start/cancel, resizes and buffer growth (DEBUG) instead of INFO.
        log_file: Optional path to also save logs to.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger("lissajousgrid")
    logger.setLevel(level)

    # Re-running setup (e.g. from tests) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    qInstallMessageHandler(forward_qt_message)
    logger.info(f"Logging initialized ({logging.getLevelName(level)}).")
