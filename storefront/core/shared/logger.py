"""
Shared Logger

Logging setup for the cart core. Modules log through the stdlib
``logging.getLogger(__name__)``; repositories use a ``ContextLogger`` so that
cart ids, user ids and session ids travel with each record as structured
context instead of being formatted into the message.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

CONTEXT_ATTR = "context"

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, CONTEXT_ATTR, None) or {}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, context under the ``context`` key."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        context = _record_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human readable line with ``key=value`` context, optionally colored by level."""

    def __init__(self, use_color: bool = False):
        super().__init__(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if context:
            line = f"{line} | " + " ".join(f"{key}={value}" for key, value in context.items())
        if self.use_color and record.levelname in _LEVEL_COLORS:
            line = f"{_LEVEL_COLORS[record.levelname]}{line}{_RESET}"
        return line


class _StorefrontHandler(logging.StreamHandler):
    """Marker type so reconfiguration only replaces handlers installed here."""


def build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JSONFormatter()
    return ConsoleFormatter(use_color=format_type == "colored")


def configure_logging(settings=None) -> logging.Handler:
    """
    Install the console handler on the root logger.

    Uses LOG_LEVEL and LOG_FORMAT ("colored", "json" or "plain") from settings.
    Calling it again swaps the previous handler; handlers added by other code
    (pytest's capture, for instance) are left alone.

    Returns:
        The installed handler
    """
    if settings is None:
        from storefront.config.settings import get_settings

        settings = get_settings()

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if isinstance(h, _StorefrontHandler)]:
        root_logger.removeHandler(handler)

    handler = _StorefrontHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(build_formatter(settings.LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler


class ContextLogger:
    """Wraps a stdlib logger; keyword arguments become record context."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def bind(self, **context: Any) -> "ContextLogger":
        """Child logger carrying extra context; the parent is unchanged."""
        return ContextLogger(self._logger.name, {**self._context, **context})

    def log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: {**self._context, **context}},
            stacklevel=3,
        )

    def debug(self, message: str, **context: Any) -> None:
        self.log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(logging.ERROR, message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self.log(logging.ERROR, message, exc_info=True, **context)


def get_logger(name: str, **context: Any) -> ContextLogger:
    return ContextLogger(name, context)


def get_repository_logger(repo_name: str) -> ContextLogger:
    """Logger named ``repository.<repo_name>`` tagged with the repository."""
    return get_logger(f"repository.{repo_name}", component="repository", repository=repo_name)
