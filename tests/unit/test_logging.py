"""
Tests for logging setup
"""

import logging
import sys
from typing import Any, Dict, List

import pytest

from binarydigit.infrastructure import get_logger, setup_logging
from binarydigit.infrastructure.logging import DEFAULT_LOG_FORMAT


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch):
    """Перехват logging.basicConfig, чтобы не трогать root-логгер"""
    calls: List[Dict[str, Any]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


class TestSetupLogging:
    """Тесты для setup_logging"""

    def test_defaults(self, basic_config_calls) -> None:
        setup_logging()
        assert len(basic_config_calls) == 1
        kwargs = basic_config_calls[0]
        assert kwargs["level"] == logging.INFO
        assert kwargs["format"] == DEFAULT_LOG_FORMAT

    def test_level_case_insensitive(self, basic_config_calls) -> None:
        setup_logging(level="debug")
        assert basic_config_calls[0]["level"] == logging.DEBUG

    def test_custom_format(self, basic_config_calls) -> None:
        setup_logging(format_string="%(message)s")
        assert basic_config_calls[0]["format"] == "%(message)s"

    def test_stdout_handler(self, basic_config_calls) -> None:
        setup_logging()
        (handler,) = basic_config_calls[0]["handlers"]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout

    def test_unknown_level_rejected(self, basic_config_calls) -> None:
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging(level="LOUD")
        assert basic_config_calls == []


class TestGetLogger:
    """Тесты для get_logger"""

    def test_named_logger(self) -> None:
        logger = get_logger("binarydigit.core.algebra.laws")
        assert logger.name == "binarydigit.core.algebra.laws"
        assert logger is logging.getLogger("binarydigit.core.algebra.laws")
