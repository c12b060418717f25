"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    ComplexNumberError,
    UndefinedArgumentError,
    ComplexZeroDivisionError,
    ComplexParseError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "ComplexNumberError",
    "UndefinedArgumentError",
    "ComplexZeroDivisionError",
    "ComplexParseError",
]
