"""
Data models shared by the decimal type and the storage boundary.

This module defines the rounding policies, the comparison outcome, the closed
set of input shapes the boundary accepts, and the diagnostic records a
conversion can attach to its result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:
    from .number import Decimal


class RoundingMode(Enum):
    """Rounding policy applied when digits are dropped."""
    HALF_UP = "half_up"            # ties away from zero
    HALF_DOWN = "half_down"        # ties toward zero
    HALF_EVEN = "half_even"        # ties to the even neighbour
    TRUNCATE = "truncate"          # toward zero
    AWAY_FROM_ZERO = "away_from_zero"
    CEILING = "ceiling"            # toward +infinity
    FLOOR = "floor"                # toward -infinity

    @classmethod
    def from_name(cls, name: Union[str, "RoundingMode"]) -> "RoundingMode":
        """Look up a mode by value or member name, case-insensitively."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        for mode in cls:
            if mode.value == key:
                return mode
        raise ValueError(f"Unknown rounding mode: {name!r}")


class Comparison(Enum):
    """Outcome of a numeric comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


# ---------------------------------------------------------------------------
# Boundary input shapes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    """Textual decimal literal, usually read from a database column."""
    value: str


@dataclass(frozen=True)
class Integer:
    """Whole number; always converts losslessly."""
    value: int


@dataclass(frozen=True)
class FloatingPoint:
    """Binary float; converts with a lossy diagnostic."""
    value: float


@dataclass(frozen=True)
class AlreadyDecimal:
    """Value that is already a Decimal; passes through unchanged."""
    value: "Decimal"


@dataclass(frozen=True)
class Absent:
    """Null-like absence of a value."""


ConversionInput = Union[Text, Integer, FloatingPoint, AlreadyDecimal, Absent]


# ---------------------------------------------------------------------------
# Conversion results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LossyConversion:
    """Diagnostic attached to a float conversion."""
    field: str
    original: float
    rendered: str
    message: str


@dataclass(frozen=True)
class ConversionResult:
    """Converted value together with any non-fatal diagnostics."""
    value: Optional["Decimal"]
    diagnostics: Tuple[LossyConversion, ...] = field(default_factory=tuple)

    @property
    def lossy(self) -> bool:
        return bool(self.diagnostics)
