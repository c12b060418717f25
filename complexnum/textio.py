"""
Stream I/O for ComplexNumber.

Output uses the same grammar as ``str()`` (``3-j``, ``2j``, ``1.5+2j``).
Input reads two whitespace-separated numbers, real part first (``3 -1``).
The two formats are not round-trip compatible.
"""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from .core.errors import ComplexParseError
from .core.logging import get_context_logger
from .numeric import ComplexNumber, parse_component

logger = get_context_logger(__name__, component="textio")


def write_complex(stream: TextIO, value: ComplexNumber, precision: Optional[int] = None) -> None:
    """Write the formatted value to any object with a ``write(str)`` method."""
    stream.write(value.to_string(precision))


def _read_token(stream: TextIO) -> str:
    """Skip leading whitespace and read one token; '' at end of input."""
    chars = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)
    return "".join(chars)


def _read_pair(stream: TextIO, real_token: str) -> ComplexNumber:
    imaginary_token = _read_token(stream)
    if not imaginary_token:
        logger.debug("Input ended after real part", extra_data={"token": real_token})
        raise ComplexParseError(real_token, "missing imaginary part")
    text = f"{real_token} {imaginary_token}"
    return ComplexNumber(parse_component(real_token, text), parse_component(imaginary_token, text))


def read_complex(stream: TextIO) -> ComplexNumber:
    """
    Read the next complex number from a text stream.

    Consumes two whitespace-separated tokens (real, then imaginary); the rest
    of the stream is left unread.

    Raises:
        ComplexParseError: end of input or a token that is not a number
    """
    real_token = _read_token(stream)
    if not real_token:
        raise ComplexParseError("", "unexpected end of input")
    return _read_pair(stream, real_token)


def iter_complex(stream: TextIO) -> Iterator[ComplexNumber]:
    """Yield complex numbers from ``stream`` until it is exhausted."""
    while True:
        real_token = _read_token(stream)
        if not real_token:
            return
        yield _read_pair(stream, real_token)
