"""
Complex number value type.

ComplexNumber holds two float components and behaves like a builtin number:
it mixes freely with real scalars on either side of an operator, compares
exactly by component, and offers magnitude, argument, conjugate and square
root helpers.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .core.config import get_settings
from .core.errors import ComplexParseError, ComplexZeroDivisionError, UndefinedArgumentError
from .core.logging import get_context_logger
from .value import NumericValue, fuzzy_compare

logger = get_context_logger(__name__, component="numeric")

Parts = Tuple[float, float]


# Operand helpers


def _complex_parts(value: Any) -> Optional[Parts]:
    """(real, imaginary) of a complex-valued operand, None if it is not one."""
    if isinstance(value, ComplexNumber):
        return value.real, value.imaginary
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        value = complex(value)
        return value.real, value.imag
    return None


def _components(value: Any) -> Optional[Parts]:
    """(real, imaginary) of any supported operand; real scalars get imaginary 0."""
    if isinstance(value, numbers.Real):
        return float(value), 0.0
    return _complex_parts(value)


def _divide(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE-754 (inf/nan) for a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _check_divisor(dividend: Any, c: float, d: float = 0.0) -> None:
    if c != 0 or d != 0:
        return
    if get_settings().ZERO_DIVISION == "raise":
        raise ComplexZeroDivisionError(dividend)
    logger.debug("Division by zero, returning IEEE-754 result", extra_data={"dividend": str(dividend)})


def parse_component(token: str, text: str) -> float:
    """
    Parse one numeric token of ``text``, raising ComplexParseError on failure.

    Digit-group underscores (``1_000``) are not numbers here, although
    float() would accept them.
    """
    try:
        if "_" in token:
            raise ValueError(f"could not convert string to float: {token!r}")
        return float(token)
    except ValueError as exc:
        logger.debug("Rejected numeric token", extra_data={"token": token})
        raise ComplexParseError(text, f"invalid number {token!r}") from exc


# Binary kernels shared by the plain, in-place and reflected operators.
# Each returns the result components, or None for an unsupported operand.


def _add(z: ComplexNumber, other: Any) -> Optional[Parts]:
    if isinstance(other, numbers.Real):
        return z.real + other, z.imaginary
    parts = _complex_parts(other)
    if parts is None:
        return None
    return z.real + parts[0], z.imaginary + parts[1]


def _sub(z: ComplexNumber, other: Any) -> Optional[Parts]:
    if isinstance(other, numbers.Real):
        return z.real - other, z.imaginary
    parts = _complex_parts(other)
    if parts is None:
        return None
    return z.real - parts[0], z.imaginary - parts[1]


def _mul(z: ComplexNumber, other: Any) -> Optional[Parts]:
    if isinstance(other, numbers.Real):
        return z.real * other, z.imaginary * other
    parts = _complex_parts(other)
    if parts is None:
        return None
    # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    a, b = z.real, z.imaginary
    c, d = parts
    return a * c - b * d, a * d + b * c


def _div(z: ComplexNumber, other: Any) -> Optional[Parts]:
    if isinstance(other, numbers.Real):
        c = float(other)
        _check_divisor(z, c)
        return _divide(z.real, c), _divide(z.imaginary, c)
    parts = _complex_parts(other)
    if parts is None:
        return None
    return _quotient(z.real, z.imaginary, parts[0], parts[1], z)


def _quotient(a: float, b: float, c: float, d: float, dividend: Any) -> Parts:
    """
    (a + bi) / (c + di) = [(ac + bd) + (bc - ad)i] / (c^2 + d^2).

    A nonzero divisor is first scaled by max(|c|, |d|) so that c^2 + d^2
    cannot underflow to zero.
    """
    _check_divisor(dividend, c, d)
    if c == 0 and d == 0:
        return _divide(a * c + b * d, 0.0), _divide(b * c - a * d, 0.0)
    scale = max(abs(c), abs(d))
    c, d = c / scale, d / scale
    denominator = c * c + d * d
    return (a * c + b * d) / denominator / scale, (b * c - a * d) / denominator / scale


def _order_key(value: Any) -> Optional[Tuple[float, float, float]]:
    if isinstance(value, ComplexNumber):
        return value.sort_key()
    if isinstance(value, numbers.Real):
        return abs(value), value, 0.0
    parts = _complex_parts(value)
    if parts is None:
        return None
    return math.hypot(*parts), parts[0], parts[1]


def _magnitude(value: Any) -> float:
    if isinstance(value, numbers.Real):
        return abs(value)
    parts = _complex_parts(value)
    if parts is None:
        raise TypeError(f"Cannot take the magnitude of {type(value).__name__}")
    return math.hypot(*parts)


class ComplexNumber(BaseModel, NumericValue):
    """
    Complex number value ``real + imaginary*j``.

    Instances are mutable: ``real`` and ``imaginary`` can be assigned
    (validated as floats), compound operators update in place and
    ``conjugate()`` flips the sign of the imaginary part. Every other
    operation returns a new instance.

    Ordering uses one strict total order: magnitude first, then real part,
    then imaginary part. The magnitude-only comparisons are available as
    ``magnitude_le`` / ``magnitude_ge``.
    """

    model_config = ConfigDict(validate_assignment=True)

    real: float = Field(default=0.0, description="The real part")
    imaginary: float = Field(default=0.0, description="The imaginary part")

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, real: Any = 0.0, imaginary: Any = 0.0, **kwargs):
        """
        Initialize a ComplexNumber.

        Args:
            real: Real part, or a complex value (ComplexNumber or builtin
                complex) to copy
            imaginary: Imaginary part (default 0); must be left at 0 when
                copying a complex value
        """
        parts = _complex_parts(real)
        if parts is not None:
            if imaginary != 0:
                raise TypeError("ComplexNumber() takes no imaginary part when copying a complex value")
            real, imaginary = parts
        super().__init__(real=float(real), imaginary=float(imaginary), **kwargs)

    # Accessors

    def set_real(self, value: Any) -> None:
        """Set the real part."""
        self.real = float(value)

    def set_imaginary(self, value: Any) -> None:
        """Set the imaginary part."""
        self.imaginary = float(value)

    def assign(self, value: Any) -> ComplexNumber:
        """
        Overwrite this instance with another value.

        A real scalar ``c`` sets the number to (c, 0), discarding the current
        imaginary part; a complex value copies both components.

        Returns:
            self (for chaining)
        """
        parts = _components(value)
        if parts is None:
            raise TypeError(f"Cannot assign {type(value).__name__} to ComplexNumber")
        return self._update(parts)

    def _update(self, parts: Parts) -> ComplexNumber:
        self.real = float(parts[0])
        self.imaginary = float(parts[1])
        return self

    # Conversions

    @classmethod
    def parse(cls, text: str) -> ComplexNumber:
        """
        Parse ``"<real> <imaginary>"``: exactly two whitespace-separated numbers.

        This is not the format produced by str(); ``"3 -1"`` parses to the
        value that prints as ``3-j``.

        Raises:
            ComplexParseError: wrong token count or a token that is not a number
        """
        tokens = text.split()
        if len(tokens) != 2:
            logger.debug("Wrong token count", extra_data={"text": text, "tokens": len(tokens)})
            raise ComplexParseError(text, f"expected 2 numbers, found {len(tokens)}")
        return cls(parse_component(tokens[0], text), parse_component(tokens[1], text))

    def to_python(self) -> complex:
        """Convert to Python complex."""
        return complex(self.real, self.imaginary)

    def __complex__(self) -> complex:
        return self.to_python()

    def to_numpy(self) -> np.complex128:
        """Convert to a numpy complex128 scalar."""
        return np.complex128(self.to_python())

    def __bool__(self) -> bool:
        return self.real != 0 or self.imaginary != 0

    # Formatting

    def to_string(self, precision: Optional[int] = None) -> str:
        """
        Convert to string.

        Components are written with ``precision`` significant digits
        (default: FORMAT_PRECISION setting, 6), e.g. ``3-j``, ``2j``,
        ``1.5+2j``, ``-5``.
        """
        if precision is None:
            precision = get_settings().FORMAT_PRECISION
        return self._render(f".{precision}g")

    def _render(self, spec: str) -> str:
        re, im = self.real, self.imaginary
        if re == 0:
            if im == -1:
                return "-j"
            if im == 1:
                return "j"
            if im == 0:
                return "0"
            return f"{format(im, spec)}j"
        if im == 0:
            return format(re, spec)
        if im > 0:
            if im == 1:
                return f"{format(re, spec)}+j"
            return f"{format(re, spec)}+{format(im, spec)}j"
        if im == -1:
            return f"{format(re, spec)}-j"
        # the sign of im is the separator
        return f"{format(re, spec)}{format(im, spec)}j"

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.to_string()
        return self._render(spec)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()})"

    # Arithmetic operators

    def __add__(self, other: Any) -> ComplexNumber:
        parts = _add(self, other)
        return NotImplemented if parts is None else ComplexNumber(*parts)

    def __radd__(self, other: Any) -> ComplexNumber:
        return self.__add__(other)

    def __iadd__(self, other: Any) -> ComplexNumber:
        parts = _add(self, other)
        if parts is None:
            return NotImplemented
        return self._update(parts)

    def __sub__(self, other: Any) -> ComplexNumber:
        parts = _sub(self, other)
        return NotImplemented if parts is None else ComplexNumber(*parts)

    def __rsub__(self, other: Any) -> ComplexNumber:
        if isinstance(other, numbers.Real):
            return subtract_from_scalar(other, self)
        parts = _complex_parts(other)
        if parts is None:
            return NotImplemented
        return ComplexNumber(*parts) - self

    def __isub__(self, other: Any) -> ComplexNumber:
        parts = _sub(self, other)
        if parts is None:
            return NotImplemented
        return self._update(parts)

    def __mul__(self, other: Any) -> ComplexNumber:
        parts = _mul(self, other)
        return NotImplemented if parts is None else ComplexNumber(*parts)

    def __rmul__(self, other: Any) -> ComplexNumber:
        return self.__mul__(other)

    def __imul__(self, other: Any) -> ComplexNumber:
        parts = _mul(self, other)
        if parts is None:
            return NotImplemented
        return self._update(parts)

    def __truediv__(self, other: Any) -> ComplexNumber:
        parts = _div(self, other)
        return NotImplemented if parts is None else ComplexNumber(*parts)

    def __rtruediv__(self, other: Any) -> ComplexNumber:
        if isinstance(other, numbers.Real):
            return divide_scalar(other, self)
        parts = _complex_parts(other)
        if parts is None:
            return NotImplemented
        return ComplexNumber(*parts) / self

    def __itruediv__(self, other: Any) -> ComplexNumber:
        parts = _div(self, other)
        if parts is None:
            return NotImplemented
        return self._update(parts)

    def __neg__(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imaginary)

    def __pos__(self) -> ComplexNumber:
        return ComplexNumber(self.real, self.imaginary)

    def __invert__(self) -> ComplexNumber:
        """Conjugate without mutating: ~z == (real, -imaginary)."""
        return ComplexNumber(self.real, -self.imaginary)

    def __abs__(self) -> float:
        return self.magnitude()

    # Named forms of the operators

    def add(self, other: Any) -> ComplexNumber:
        return _checked(self.__add__(other), "add", other)

    def subtract(self, other: Any) -> ComplexNumber:
        return _checked(self.__sub__(other), "subtract", other)

    def multiply(self, other: Any) -> ComplexNumber:
        return _checked(self.__mul__(other), "multiply", other)

    def divide(self, other: Any) -> ComplexNumber:
        return _checked(self.__truediv__(other), "divide", other)

    def conjugate(self) -> None:
        """Conjugate in place (negate the imaginary part)."""
        self.imaginary = -self.imaginary

    # Comparison

    def __eq__(self, other: Any) -> bool:
        """Exact component-wise equality; a real scalar c compares as (c, 0)."""
        if isinstance(other, numbers.Real):
            return self.real == other and self.imaginary == 0
        parts = _complex_parts(other)
        if parts is None:
            return NotImplemented
        return self.real == parts[0] and self.imaginary == parts[1]

    __hash__ = None

    def sort_key(self) -> Tuple[float, float, float]:
        """Key of the total order: (magnitude, real, imaginary)."""
        return self.magnitude(), self.real, self.imaginary

    def __lt__(self, other: Any) -> bool:
        key = _order_key(other)
        return NotImplemented if key is None else self.sort_key() < key

    def __le__(self, other: Any) -> bool:
        key = _order_key(other)
        return NotImplemented if key is None else self.sort_key() <= key

    def __gt__(self, other: Any) -> bool:
        key = _order_key(other)
        return NotImplemented if key is None else self.sort_key() > key

    def __ge__(self, other: Any) -> bool:
        key = _order_key(other)
        return NotImplemented if key is None else self.sort_key() >= key

    def compare(self, other: Any, tolerance: Optional[float] = None, mode: Optional[str] = None) -> bool:
        """Fuzzy comparison of both components."""
        parts = _components(other)
        if parts is None:
            return False
        settings = get_settings()
        if tolerance is None:
            tolerance = settings.DEFAULT_TOLERANCE
        if mode is None:
            mode = settings.DEFAULT_TOLERANCE_MODE
        return fuzzy_compare(self.real, parts[0], tolerance, mode) and fuzzy_compare(
            self.imaginary, parts[1], tolerance, mode
        )

    # Derived quantities

    def magnitude(self) -> float:
        """Euclidean norm sqrt(real^2 + imaginary^2)."""
        return math.hypot(self.real, self.imaginary)

    def arg(self) -> float:
        """
        Principal argument in radians, in (-pi, pi].

        Uses the half-angle form 2*atan(im / (re + |z|)), and pi on the
        negative real axis.

        Raises:
            UndefinedArgumentError: for the zero complex number
        """
        re, im = self.real, self.imaginary
        if im != 0 or re > 0:
            return 2 * math.atan(_divide(im, re + self.magnitude()))
        if re < 0:
            return math.pi
        if re == 0:
            logger.debug("Argument requested for zero complex number")
            raise UndefinedArgumentError()
        # NaN real part
        return math.nan

    def sqrt(self) -> ComplexNumber:
        """Principal square root (non-negative real part)."""
        magnitude = self.magnitude()
        return ComplexNumber(
            math.sqrt((magnitude + self.real) / 2),
            math.copysign(math.sqrt((magnitude - self.real) / 2), self.imaginary),
        )


def _checked(result: Any, operation: str, other: Any) -> ComplexNumber:
    if result is NotImplemented:
        raise TypeError(f"Cannot {operation} ComplexNumber and {type(other).__name__}")
    return result


# Scalar-on-the-left operations


def subtract_from_scalar(c: Any, z: ComplexNumber) -> ComplexNumber:
    """c - z for a real scalar c: (c - real, -imaginary)."""
    return ComplexNumber(c - z.real, -z.imaginary)


def divide_scalar(c: Any, z: ComplexNumber) -> ComplexNumber:
    """c / z for a real scalar c: (c*real, -c*imaginary) / (real^2 + imaginary^2)."""
    return ComplexNumber(*_quotient(float(c), 0.0, z.real, z.imaginary, c))


# Magnitude-only comparators


def magnitude_le(a: Any, b: Any) -> bool:
    """|a| <= |b|, ignoring the tie-break of the total order."""
    return _magnitude(a) <= _magnitude(b)


def magnitude_ge(a: Any, b: Any) -> bool:
    """|a| >= |b|, ignoring the tie-break of the total order."""
    return _magnitude(a) >= _magnitude(b)
