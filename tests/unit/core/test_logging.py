"""Tests for structured logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from pixel_farm.core.config import Settings
from pixel_farm.core.logging import (
    app_context,
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    plain_enum_values,
)
from pixel_farm.models.enums import ItemId, WeatherType


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    clear_context()
    structlog.reset_defaults()


def app_tags(processors: list) -> list[str]:
    """Run every processor in the chain that tags the app name."""
    tags = []
    for processor in processors:
        if getattr(processor, "__name__", "") == "add_app_context":
            tags.append(processor(None, "info", {"event": "x"})["app"])
    return tags


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_renderer(self) -> None:
        """Test JSON mode ends the chain with the JSON renderer."""
        configure_logging(level="DEBUG", json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert plain_enum_values in processors
        assert app_tags(processors) == ["pixel_farm"]

    def test_console_renderer(self) -> None:
        """Test console mode for development."""
        configure_logging(level="INFO")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_stdlib_level(self) -> None:
        """Test the standard library root logger follows the level."""
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_log_file(self, tmp_path: Path) -> None:
        """Test the optional log file handler is attached."""
        log_file = tmp_path / "farm.log"

        configure_logging(level="INFO", log_file=str(log_file))

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert any(Path(h.baseFilename) == log_file for h in handlers)
        for handler in handlers:
            logging.getLogger().removeHandler(handler)
            handler.close()


class TestConfigureFromSettings:
    """Tests for configure_logging_from_settings."""

    def test_reads_settings(self) -> None:
        """Test level, renderer and app name come from Settings."""
        settings = Settings(_env_file=None, log_level="WARNING", json_logs=True, app_name="Meadow")

        configure_logging_from_settings(settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert app_tags(processors) == ["Meadow"]
        assert logging.getLogger().level == logging.WARNING

    def test_debug_forces_debug_level(self) -> None:
        """Test debug mode logs at DEBUG whatever log_level says."""
        settings = Settings(_env_file=None, debug=True, log_level="WARNING")

        configure_logging_from_settings(settings)

        assert logging.getLogger().level == logging.DEBUG

    def test_log_file_setting(self, tmp_path: Path) -> None:
        """Test the log_file setting attaches a file handler."""
        log_file = tmp_path / "farm.log"
        settings = Settings(_env_file=None, log_file=log_file)

        configure_logging_from_settings(settings)

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert any(Path(h.baseFilename) == log_file for h in handlers)
        for handler in handlers:
            logging.getLogger().removeHandler(handler)
            handler.close()

    def test_defaults_to_global_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment settings apply when none are passed."""
        monkeypatch.setenv("PIXEL_FARM_LOG_LEVEL", "ERROR")

        configure_logging_from_settings()

        assert logging.getLogger().level == logging.ERROR


class TestProcessors:
    """Tests for the custom processors."""

    def test_app_context(self) -> None:
        """Test every record is tagged with the app name."""
        event = app_context("pixel_farm")(None, "info", {"event": "Crop planted"})
        assert event == {"event": "Crop planted", "app": "pixel_farm"}

    def test_app_context_keeps_explicit_value(self) -> None:
        """Test a caller-supplied app key wins."""
        event = app_context("pixel_farm")(None, "info", {"event": "x", "app": "tool"})
        assert event["app"] == "tool"

    def test_plain_enum_values(self) -> None:
        """Test ids are logged by value."""
        event = plain_enum_values(
            None,
            "info",
            {"event": "Crop planted", "item": ItemId.WHEAT, "weather": WeatherType.RAINY, "index": 118},
        )
        assert event == {"event": "Crop planted", "item": "WHEAT", "weather": "RAINY", "index": 118}
        assert type(event["item"]) is str


class TestContext:
    """Tests for context helpers."""

    def test_bind_and_clear(self) -> None:
        """Test context variables are bound and cleared."""
        bind_context(component="farm_loop")
        assert structlog.contextvars.get_contextvars()["component"] == "farm_loop"

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}

    def test_get_logger(self) -> None:
        """Test loggers expose the usual level methods."""
        logger = get_logger("pixel_farm.tests")
        assert callable(logger.info)
        assert callable(logger.debug)
