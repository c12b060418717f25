"""
Base NumericValue class for complexnum value types.

This module provides the foundation shared by numeric value objects:
- Operator overloading contract (arithmetic, unary, conjugate)
- Fuzzy comparison with tolerances
- String output via to_string()
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol
    SIGFIGS = "sigfigs"  # Significant figures


class NumericValue(ABC):
    """
    Base class for numeric value objects.

    Subclasses must implement the abstract methods, and supply __str__ and
    __repr__ themselves: BaseModel precedes this class in the MRO.

    Note: Concrete subclasses should inherit from both BaseModel and
    NumericValue, e.g. ``class ComplexNumber(BaseModel, NumericValue):``.
    NumericValue itself does not inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def compare(self, other: Any, tolerance: float | None = None, mode: str | None = None) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison
            mode: Tolerance mode (relative, absolute, sigfigs)

        Returns:
            True if values are equal within tolerance
        """

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""

    # Operator overloading

    @abstractmethod
    def __add__(self, other: Any) -> NumericValue:
        """Addition: self + other"""

    @abstractmethod
    def __radd__(self, other: Any) -> NumericValue:
        """Right addition: other + self"""

    @abstractmethod
    def __sub__(self, other: Any) -> NumericValue:
        """Subtraction: self - other"""

    @abstractmethod
    def __rsub__(self, other: Any) -> NumericValue:
        """Right subtraction: other - self"""

    @abstractmethod
    def __mul__(self, other: Any) -> NumericValue:
        """Multiplication: self * other"""

    @abstractmethod
    def __rmul__(self, other: Any) -> NumericValue:
        """Right multiplication: other * self"""

    @abstractmethod
    def __truediv__(self, other: Any) -> NumericValue:
        """Division: self / other"""

    @abstractmethod
    def __rtruediv__(self, other: Any) -> NumericValue:
        """Right division: other / self"""

    @abstractmethod
    def __neg__(self) -> NumericValue:
        """Unary negation: -self"""

    @abstractmethod
    def __pos__(self) -> NumericValue:
        """Unary positive: +self"""

    @abstractmethod
    def __invert__(self) -> NumericValue:
        """Conjugate: ~self"""

    @abstractmethod
    def __abs__(self) -> float:
        """Magnitude: abs(self)"""

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Conversion helpers

    @classmethod
    def from_python(cls, value: Any) -> NumericValue:
        """
        Convert a Python value to a NumericValue.

        Args:
            value: int, float, complex or an existing NumericValue

        Returns:
            ComplexNumber instance (or the value itself if already numeric)
        """
        from .numeric import ComplexNumber

        if isinstance(value, NumericValue):
            return value
        if isinstance(value, complex):
            return ComplexNumber(value.real, value.imag)
        if isinstance(value, (int, float)):
            return ComplexNumber(float(value))
        raise TypeError(f"Cannot convert {type(value)} to NumericValue")

    def to_python(self) -> Any:
        """Convert to a Python native number."""
        raise NotImplementedError(f"{self.__class__.__name__}.to_python() not implemented")


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute, sigfigs)

    Returns:
        True if values are equal within tolerance
    """
    if a == b:
        return True

    EPSILON = 1e-12

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance + EPSILON

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return abs(a - b) <= tolerance + EPSILON
        return abs(a - b) / max_abs <= tolerance + EPSILON

    elif mode == ToleranceMode.SIGFIGS:
        diff = abs(a - b)
        avg = (abs(a) + abs(b)) / 2
        if avg == 0:
            return diff < 10 ** (-tolerance)
        ratio = diff / avg
        if not math.isfinite(ratio):
            return False
        return math.floor(math.log10(ratio)) < -tolerance

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")
