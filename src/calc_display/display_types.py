"""
=============================================================================
MODULE NAME: display_types.py
=============================================================================

INPUT FILES:
- None (value types only).

OUTPUT FILES:
- None written directly; states are serialised by the web adapter.

NOTES:
- State and every Action are frozen dataclasses, compared by value.
- Actions form a closed set: Digit, Dot, Clear, Delete, OperatorPress.
=============================================================================
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

DIGITS = "0123456789"

# JSON has no infinity literal; an operand too long for a float travels as this string.
INFINITY = "Infinity"

# Unsigned decimal numeral, optionally with a trailing point ("23.").
_NUMERAL = re.compile(r"[0-9]+(\.[0-9]*)?")


class Operator(enum.Enum):
    """Binary operators, valued by the symbol shown on the keypad."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def parse(cls, text: str) -> "Operator":
        if not isinstance(text, str):
            raise ValueError(f"Unknown operator: {text!r}")
        symbol = _OPERATOR_ALIASES.get(text, text)
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operator: {text!r}") from None


_OPERATOR_ALIASES: Dict[str, str] = {
    "-": "−",
    "*": "×",
    "x": "×",
    "X": "×",
    "/": "÷",
}


@dataclass(frozen=True, slots=True)
class State:
    """Snapshot of the calculator display and any pending operation."""

    display: str = "0"
    accumulator: Optional[float] = None
    operator: Optional[Operator] = None
    awaiting_next: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "display": self.display,
            "accumulator": _dump_accumulator(self.accumulator),
            "operator": self.operator.value if self.operator else None,
            "awaiting_next": self.awaiting_next,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "State":
        """
        Build a state from its serialised form, checking the invariants.

        Args:
            data: Mapping as produced by ``to_dict``

        Returns:
            The equivalent State

        Raises:
            ValueError: If a field is missing, mistyped or inconsistent
        """
        if not isinstance(data, dict):
            raise ValueError("state must be an object")

        display = data.get("display", "0")
        if not isinstance(display, str) or not display:
            raise ValueError("display must be a non-empty string")

        accumulator = _load_accumulator(data.get("accumulator"))

        raw_operator = data.get("operator")
        operator = Operator.parse(raw_operator) if raw_operator is not None else None

        awaiting_next = data.get("awaiting_next", False)
        if not isinstance(awaiting_next, bool):
            raise ValueError("awaiting_next must be a boolean")

        if (accumulator is None) != (operator is None):
            raise ValueError("accumulator and operator must be set together")
        if awaiting_next and operator is None:
            raise ValueError("awaiting_next requires a pending operator")

        # While awaiting the next operand the display holds the history form ("96 +").
        operand = display.split(" ", 1)[0] if awaiting_next else display
        if not _NUMERAL.fullmatch(operand):
            raise ValueError(f"display is not a decimal numeral: {display!r}")

        return cls(
            display=display,
            accumulator=accumulator,
            operator=operator,
            awaiting_next=awaiting_next,
        )


def _dump_accumulator(value: Optional[float]) -> Any:
    if value is not None and math.isinf(value):
        return INFINITY
    return value


def _load_accumulator(value: Any) -> Optional[float]:
    if value is None:
        return None
    if value == INFINITY:
        return math.inf
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("accumulator must be a number, \"Infinity\" or null")
    try:
        number = float(value)
    except OverflowError:
        raise ValueError("accumulator is out of range") from None
    if not math.isfinite(number):
        raise ValueError("accumulator must be finite")
    return number


@dataclass(frozen=True, slots=True)
class Digit:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1 or self.value not in DIGITS:
            raise ValueError(f"Digit expects a single character 0-9, got {self.value!r}")


@dataclass(frozen=True, slots=True)
class Dot:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class OperatorPress:
    operator: Operator


Action = Union[Digit, Dot, Clear, Delete, OperatorPress]


def is_numeral(text: str) -> bool:
    """True when ``text`` is an unsigned decimal numeral ("0", "23.", "23.5")."""
    return bool(_NUMERAL.fullmatch(text))


__all__ = [
    "Action",
    "Clear",
    "Delete",
    "Digit",
    "DIGITS",
    "Dot",
    "Operator",
    "OperatorPress",
    "State",
    "is_numeral",
]
