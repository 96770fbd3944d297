"""
Tests for the shared logger.
"""

import json
import logging

import pytest

from storefront.config.settings import Settings
from storefront.core.shared.logger import (
    ConsoleFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    get_repository_logger,
)


def _record(message: str, context=None, level=logging.INFO) -> logging.LogRecord:
    record = logging.LogRecord("repository.cart", level, __file__, 10, message, None, None)
    if context is not None:
        record.context = context
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    def test_formats_message_and_context(self):
        output = JSONFormatter().format(_record("Merged guest cart", {"cart_id": "c1"}))

        data = json.loads(output)
        assert data["level"] == "INFO"
        assert data["logger"] == "repository.cart"
        assert data["message"] == "Merged guest cart"
        assert data["context"] == {"cart_id": "c1"}

    def test_omits_context_when_absent(self):
        data = json.loads(JSONFormatter().format(_record("plain")))

        assert "context" not in data


class TestConsoleFormatter:
    def test_appends_context_pairs(self):
        line = ConsoleFormatter().format(_record("Cart created", {"cart_id": "c1", "user_id": "u1"}))

        assert line.endswith("| INFO | repository.cart | Cart created | cart_id=c1 user_id=u1")

    def test_color_wraps_the_line(self):
        line = ConsoleFormatter(use_color=True).format(_record("boom", level=logging.ERROR))

        assert line.startswith("\033[31m")
        assert line.endswith("\033[0m")


class TestConfigureLogging:
    def test_installs_handler_from_settings(self, restore_root_logger):
        handler = configure_logging(Settings(_env_file=None, LOG_LEVEL="warning", LOG_FORMAT="json"))

        assert handler in restore_root_logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert restore_root_logger.level == logging.WARNING

    def test_reconfiguring_replaces_only_its_own_handler(self, restore_root_logger):
        other = logging.NullHandler()
        restore_root_logger.addHandler(other)

        first = configure_logging(Settings(_env_file=None, LOG_FORMAT="plain"))
        second = configure_logging(Settings(_env_file=None, LOG_FORMAT="colored"))

        assert first not in restore_root_logger.handlers
        assert second in restore_root_logger.handlers
        assert other in restore_root_logger.handlers
        assert second.formatter.use_color


class TestContextLogger:
    def test_repository_logger_context(self):
        logger = get_repository_logger("cart")

        assert logger.name == "repository.cart"
        assert logger.context == {"component": "repository", "repository": "cart"}

    def test_bind_does_not_mutate_parent(self):
        parent = ContextLogger("test", {"a": 1})

        child = parent.bind(b=2)

        assert child.context == {"a": 1, "b": 2}
        assert parent.context == {"a": 1}

    def test_kwargs_are_attached_as_context(self, caplog):
        logger = ContextLogger("test.context", {"component": "repository"})

        with caplog.at_level(logging.INFO, logger="test.context"):
            logger.info("Cart created", cart_id="c1")

        record = caplog.records[-1]
        assert record.getMessage() == "Cart created"
        assert record.context == {"component": "repository", "cart_id": "c1"}
        assert record.funcName == "test_kwargs_are_attached_as_context"

    def test_exception_keeps_traceback(self, caplog):
        logger = ContextLogger("test.context")

        with caplog.at_level(logging.ERROR, logger="test.context"):
            try:
                raise ValueError("bad")
            except ValueError:
                logger.exception("Merge failed", cart_id="c1")

        record = caplog.records[-1]
        assert record.exc_info[0] is ValueError
        assert record.context == {"cart_id": "c1"}
