"""Calculator display entry: a pure state machine plus keypad adapters."""

from .controller import CalculatorController
from .display_types import Action, Clear, Delete, Digit, Dot, Operator, OperatorPress, State
from .history import history_line, render_lines
from .reducer import initial_state, parse_number, reduce

__all__ = [
    "Action",
    "CalculatorController",
    "Clear",
    "Delete",
    "Digit",
    "Dot",
    "Operator",
    "OperatorPress",
    "State",
    "history_line",
    "initial_state",
    "parse_number",
    "reduce",
    "render_lines",
]
