"""Logging infrastructure with Rich console output and rotating file logs."""

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from ..config.models import LoggingSettings

ROOT_LOGGER_NAME = "issueclassifier"

# Styles referenced from CLI markup; tier names double as style names
ISSUECLASSIFIER_THEME = Theme(
    {
        "error": "red bold",
        "success": "green bold",
        "easy": "green",
        "medium": "yellow",
        "difficult": "red",
        "unknown": "magenta",
    }
)

# Results go to stdout, log records to stderr so --json output stays clean
_console = Console(theme=ISSUECLASSIFIER_THEME)
_log_console = Console(theme=ISSUECLASSIFIER_THEME, stderr=True)
_configured = False


def setup_logging(settings: "LoggingSettings | None" = None) -> logging.Logger:
    """
    Configure the package logger from logging settings.

    Calling this again replaces the previous handlers.

    Args:
        settings: Logging settings; defaults apply when None

    Returns:
        The package root logger
    """
    global _configured
    if settings is None:
        from ..config.models import LoggingSettings

        settings = LoggingSettings()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(settings.level)
    logger.propagate = False

    if settings.console_enabled:
        handler = RichHandler(
            console=_log_console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setLevel(settings.level)
        logger.addHandler(handler)

    if settings.file_enabled:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_dir / "issueclassifier.log",
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.setLevel(settings.level)
        logger.addHandler(file_handler)

    _configured = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get the package logger or one of its children.

    Module names (``issueclassifier.providers.client``) map onto the package
    hierarchy directly. Default handlers are installed on first use.
    """
    if not _configured:
        setup_logging()
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def get_console() -> Console:
    """Get the themed console used for command output."""
    return _console
