"""
Library exceptions.

Every error raised by complexnum derives from ComplexNumberError and also from
the builtin exception a caller would naturally expect (ValueError,
ZeroDivisionError), so existing ``except`` clauses keep working.
"""

from typing import Any, Dict, Optional


class ComplexNumberError(Exception):
    """Base exception for complexnum errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UndefinedArgumentError(ComplexNumberError, ValueError):
    """Raised when the argument (angle) of the zero complex number is requested"""

    def __init__(self):
        super().__init__(
            message="argument of the zero complex number is undefined",
            details={"real": 0.0, "imaginary": 0.0}
        )


class ComplexZeroDivisionError(ComplexNumberError, ZeroDivisionError):
    """Raised on division by zero when ZERO_DIVISION is set to 'raise'"""

    def __init__(self, dividend: Any):
        super().__init__(
            message="complex division by zero",
            details={"dividend": str(dividend)}
        )


class ComplexParseError(ComplexNumberError, ValueError):
    """Raised when text cannot be read as a 'real imaginary' token pair"""

    def __init__(self, text: str, reason: str):
        super().__init__(
            message=f"Cannot parse complex number from {text!r}: {reason}",
            details={"text": text, "reason": reason}
        )
