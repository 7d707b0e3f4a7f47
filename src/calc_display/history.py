"""Text shown on the secondary "history" line above the display."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Tuple

from .display_types import State


def format_number(num: float) -> str:
    """
    Render a number the way a browser's ``String(number)`` does.

    Uses the shortest digits that round-trip, in positional notation for
    decimal exponents between -7 and 21 and scientific notation otherwise
    ("10000000000.5", "0.000001", "1e-7", "1e+21", "Infinity").
    """
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"
    if num == 0:
        return "0"

    sign = "-" if num < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(num))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # Decimal point position: value is 0.<digits> * 10**n.
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{n - 1:+d}"
    return sign + text


def history_line(state: State) -> str:
    """
    Describe the pending operation, if any.

    Returns:
        "acc op" while awaiting the right operand, "acc op display" once it is
        being typed, or "" when no operator has been chosen
    """
    if state.accumulator is None or state.operator is None:
        return ""
    head = f"{format_number(state.accumulator)} {state.operator.value}"
    if state.awaiting_next:
        return head
    return f"{head} {state.display}"


def render_lines(state: State) -> Tuple[str, str]:
    """Return the (history, display) pair a view paints."""
    return history_line(state), state.display
