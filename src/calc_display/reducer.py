"""
Reducer for calculator display entry.

``reduce(state, action)`` is a pure function: it never mutates its inputs,
performs no I/O and returns the input state itself for anything it does not
recognise. The Operator press stores the left operand; nothing here ever
evaluates the pending operation.
"""

from __future__ import annotations

from dataclasses import replace

from .display_types import Action, Clear, Delete, Digit, Dot, OperatorPress, State, is_numeral


def initial_state() -> State:
    """Return the clean-slate state: display "0", nothing pending."""
    return State(display="0", accumulator=None, operator=None, awaiting_next=False)


def parse_number(display: str) -> float:
    """
    Parse an unsigned decimal numeral as shown on the display.

    A trailing point is accepted ("23." is 23).
    """
    assert is_numeral(display), f"display is not a numeral: {display!r}"
    return float(display)


def _press_digit(state: State, digit: str) -> State:
    if state.awaiting_next:
        # Start the right-hand operand fresh.
        return replace(state, display=digit, awaiting_next=False)
    if state.display == "0":
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


def _press_dot(state: State) -> State:
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def _press_delete(state: State) -> State:
    if len(state.display) > 1:
        return replace(state, display=state.display[:-1])
    return replace(state, display="0")


def _press_operator(state: State, action: OperatorPress) -> State:
    if state.awaiting_next:
        # Operator swap before the right operand was typed.
        return replace(state, operator=action.operator)
    return replace(
        state,
        accumulator=parse_number(state.display),
        operator=action.operator,
        awaiting_next=True,
        display=f"{state.display} {action.operator.value}",
    )


def reduce(state: State, action: Action) -> State:
    """
    Compute the state that follows ``action``.

    Args:
        state: Current state (left untouched)
        action: One of Digit, Dot, Clear, Delete, OperatorPress

    Returns:
        The next state; ``state`` itself for unrecognised actions
    """
    if isinstance(action, Digit):
        return _press_digit(state, action.value)
    if isinstance(action, Dot):
        return _press_dot(state)
    if isinstance(action, Clear):
        return initial_state()
    if isinstance(action, Delete):
        return _press_delete(state)
    if isinstance(action, OperatorPress):
        return _press_operator(state, action)
    return state
