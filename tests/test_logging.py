"""Tests for logging setup."""

import logging

import pytest
from rich.console import Console

from issueclassifier.config.models import LoggingSettings
from issueclassifier.utils.logging import (
    ISSUECLASSIFIER_THEME,
    get_console,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    yield
    for handler in logging.getLogger("issueclassifier").handlers:
        handler.close()
    setup_logging()


class TestLogging:
    """Tests for the logging helpers."""

    def test_file_logging(self, tmp_path, restore_logging):
        """Test records are written to the rotating log file."""
        settings = LoggingSettings(
            level="debug", log_dir=tmp_path / "logs", console_enabled=False, file_enabled=True
        )
        setup_logging(settings)

        get_logger("providers.client").debug("Calling Mosaia")
        for handler in logging.getLogger("issueclassifier").handlers:
            handler.flush()

        log_text = (tmp_path / "logs" / "issueclassifier.log").read_text(encoding="utf-8")
        assert "issueclassifier.providers.client" in log_text
        assert "Calling Mosaia" in log_text

    def test_setup_replaces_handlers(self, restore_logging):
        """Test calling setup again does not stack handlers."""
        setup_logging()
        logger = setup_logging(LoggingSettings(level="warning"))

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_logger_names(self):
        """Test module names map onto the package hierarchy."""
        assert get_logger().name == "issueclassifier"
        assert get_logger("issueclassifier.cli.main").name == "issueclassifier.cli.main"
        assert get_logger("sinks").name == "issueclassifier.sinks"

    def test_console_has_tier_styles(self):
        """Test every difficulty tier is a theme style."""
        assert isinstance(get_console(), Console)
        for style in ("easy", "medium", "difficult", "unknown", "error", "success"):
            assert style in ISSUECLASSIFIER_THEME.styles
