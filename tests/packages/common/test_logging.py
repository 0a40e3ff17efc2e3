"""Tests for JSON structured logging setup."""

import json
import logging
from collections.abc import Iterator

import pytest

from packages.common.logging import CustomJsonFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test logging configuration."""

    def test_installs_single_json_handler(self, restore_root_logger: None) -> None:
        """Test a single stdout handler with the JSON formatter is installed."""
        setup_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)

    def test_level_from_config(
        self, restore_root_logger: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the configured log level is used when none is passed."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING


class TestCustomJsonFormatter:
    """Test JSON record formatting."""

    def test_adds_standard_fields(self) -> None:
        """Test level, module and function fields are present."""
        formatter = CustomJsonFormatter("%(message)s")
        record = get_logger("packages.markdown.headings").makeRecord(
            "packages.markdown.headings",
            logging.DEBUG,
            "headings.py",
            42,
            "Grouped 3 headings",
            None,
            None,
            func="headings_and_content",
        )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Grouped 3 headings"
        assert payload["level"] == "DEBUG"
        assert payload["function"] == "headings_and_content"
        assert payload["line"] == 42
