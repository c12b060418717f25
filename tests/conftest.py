"""
Shared pytest fixtures and utilities for testing complexnum.

This module provides:
- Fixtures for temporarily overriding library settings
- Helpers for asserting ComplexNumber components
- Model equality helper for pydantic-backed values
"""

import logging
import math

import pytest
from pydantic import BaseModel

from complexnum.core.config import get_settings


@pytest.fixture
def override_settings(monkeypatch):
    """Temporarily override fields of the cached Settings instance."""
    def _override(**values):
        settings = get_settings()
        for name, value in values.items():
            monkeypatch.setattr(settings, name, value)
        return settings
    return _override


@pytest.fixture
def assert_components():
    """Helper to assert the components of a ComplexNumber (NaN-aware, exact)."""
    def _assert(value, real: float, imaginary: float) -> None:
        for actual, expected, label in ((value.real, real, "real"), (value.imaginary, imaginary, "imaginary")):
            if math.isnan(expected):
                assert math.isnan(actual), f"{label}: expected nan, got {actual}"
            else:
                assert actual == expected, f"{label}: expected {expected}, got {actual}"
    return _assert


@pytest.fixture
def assert_model_equality():
    """Helper to assert that two Pydantic models are equal."""
    def _assert_equal(model1: BaseModel, model2: BaseModel, ignore_fields: set[str] | None = None) -> None:
        ignore_fields = ignore_fields or set()

        dict1 = model1.model_dump(exclude=ignore_fields)
        dict2 = model2.model_dump(exclude=ignore_fields)

        assert dict1 == dict2, f"Models not equal:\n{dict1}\n!=\n{dict2}"

    return _assert_equal


@pytest.fixture
def restore_package_logger(monkeypatch):
    """Undo the handler and level installed by setup_logging()."""
    import complexnum.core.logging as log_module

    logger = logging.getLogger(log_module.PACKAGE_LOGGER)
    handlers = logger.handlers[:]
    level = logger.level
    monkeypatch.setattr(log_module, "_handler", None)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
