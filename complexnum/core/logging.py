"""
Logging for the complexnum package.

Library modules log through ``get_context_logger(__name__, component=...)``,
which attaches the component name and per-call values (the dividend of a
zero division, a rejected token) as ``extra_data`` on each record. Nothing is
printed unless an application calls ``setup_logging()``, which installs one
handler on the ``complexnum`` logger that renders those fields as JSON or text.
"""

import sys
import json
import logging
from typing import Any, Dict, Optional, TextIO

from .config import get_settings

PACKAGE_LOGGER = "complexnum"

_handler: Optional[logging.Handler] = None


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    return dict(getattr(record, "extra_data", None) or {})


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: component, message and the logged values"""

    def format(self, record: logging.LogRecord) -> str:
        context = _record_context(record)
        log_data: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "component": context.pop("component", None),
            "message": record.getMessage(),
        }
        if context:
            log_data["data"] = context
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """``LEVEL [component] message key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        context = _record_context(record)
        component = context.pop("component", record.name)
        line = f"{record.levelname} [{component}] {record.getMessage()}"
        if context:
            line += " " + " ".join(f"{key}={value}" for key, value in context.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Send complexnum records to ``stream`` (default stderr).

    Level and format come from the LOG_LEVEL / LOG_FORMAT settings. Calling
    it again replaces the handler installed by the previous call; the root
    logger is left alone.
    """
    global _handler

    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter())

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
    logger.addHandler(handler)
    _handler = handler
    logger.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger that merges permanent context into ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    return LoggerAdapter(get_logger(name), context)
