"""
complexnum - a complex number value type

ComplexNumber mixes freely with real scalars in ordinary arithmetic:
- Exact component-wise equality and a magnitude-first total order
- Magnitude, argument, conjugate and principal square root
- Text formatting (``3-j``) and two-token parsing (``3 -1``)
"""

from .core import (
    ComplexNumberError,
    ComplexParseError,
    ComplexZeroDivisionError,
    Settings,
    UndefinedArgumentError,
    get_settings,
    setup_logging,
)
from .numeric import ComplexNumber, divide_scalar, magnitude_ge, magnitude_le, subtract_from_scalar
from .textio import iter_complex, read_complex, write_complex
from .value import NumericValue, ToleranceMode, fuzzy_compare

__all__ = [
    "NumericValue",
    "ToleranceMode",
    "fuzzy_compare",
    "ComplexNumber",
    "subtract_from_scalar",
    "divide_scalar",
    "magnitude_le",
    "magnitude_ge",
    "read_complex",
    "write_complex",
    "iter_complex",
    "Settings",
    "get_settings",
    "setup_logging",
    "ComplexNumberError",
    "UndefinedArgumentError",
    "ComplexZeroDivisionError",
    "ComplexParseError",
]
