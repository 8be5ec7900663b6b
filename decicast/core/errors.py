"""
Error types raised by the decimal core and the storage boundary.

Every failure is raised to the immediate caller. Boundary errors carry the
field name and the description of the received type so a failing cast can be
traced back to the model attribute that produced it.
"""

from typing import Optional


class DecimalError(Exception):
    """Base class for all decicast errors."""


class MalformedLiteral(DecimalError, ValueError):
    """Text does not match the decimal literal grammar."""

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed decimal literal {text!r}: {reason}")


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Divisor of a division or modulo is zero."""

    def __init__(self, dividend: Optional[str] = None):
        self.dividend = dividend
        if dividend is None:
            super().__init__("Division by zero")
        else:
            super().__init__(f"Division by zero (dividend {dividend})")


class ConversionError(DecimalError, ValueError):
    """A boundary conversion failed for a named field."""

    def __init__(self, field: str, type_name: str, message: str):
        self.field = field
        self.type_name = type_name
        super().__init__(message)


class UnsupportedInputType(ConversionError, TypeError):
    """The received value has a type the boundary does not convert."""

    def __init__(self, field: str, type_name: str, detail: Optional[str] = None):
        message = (
            f"The {field} attribute must be a Decimal, an integer, a float or a "
            f"numeric string. {type_name} given."
        )
        if detail:
            message = f"{message} {detail}"
        super().__init__(field, type_name, message)


class InvalidDecimalText(ConversionError):
    """Text received at the boundary is not a valid decimal literal."""

    def __init__(self, field: str, type_name: str, reason: str):
        self.reason = reason
        super().__init__(
            field,
            type_name,
            f"The {field} attribute must be a numeric string ({type_name} given): {reason}",
        )


class LossyConversionWarning(UserWarning):
    """Binary floating-point input may not hold the intended decimal value."""
