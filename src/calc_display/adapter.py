"""
Input adapter: turns raw keypad input into actions.

Only recognised controls produce an Action; anything else yields ``None``
and must not reach the reducer.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .display_types import DIGITS, Action, Clear, Delete, Digit, Dot, Operator, OperatorPress

logger = logging.getLogger(__name__)

# Keypad button identifiers ("data-key" on the web keypad).
KEY_DIGIT = "digit"
KEY_DOT = "dot"
KEY_CLEAR = "ac"
KEY_DELETE = "del"
KEY_OPERATOR = "op"

CLEAR_TOKENS = {"AC", "C", "CLEAR"}
DELETE_TOKENS = {"DEL", "BS", "BACKSPACE"}


def _digit(value: Optional[str]) -> Optional[Action]:
    if isinstance(value, str) and len(value) == 1 and value in DIGITS:
        return Digit(value)
    return None


def _operator(value: Optional[str]) -> Optional[Action]:
    try:
        return OperatorPress(Operator.parse(value))
    except ValueError:
        return None


def action_from_key(key: Optional[str], value: Optional[str] = None) -> Optional[Action]:
    """
    Classify a keypad button press.

    Args:
        key: Button identifier: digit, dot, ac, del or op
        value: Payload for digit ("0"-"9") and op (operator symbol or alias)

    Returns:
        The matching action, or None when the control is not recognised
    """
    if not isinstance(key, str):
        logger.debug("Declined non-string key %r", key)
        return None

    key = key.strip().lower()
    if key == KEY_DIGIT:
        action = _digit(value)
    elif key == KEY_DOT:
        action = Dot()
    elif key == KEY_CLEAR:
        action = Clear()
    elif key == KEY_DELETE:
        action = Delete()
    elif key == KEY_OPERATOR:
        action = _operator(value)
    else:
        action = None

    if action is None:
        logger.debug("Declined key %r with value %r", key, value)
    return action


def action_from_token(token: str) -> Optional[Action]:
    """Classify a command-line token such as "7", ".", "AC", "DEL" or "+"."""
    token = token.strip()
    if not token:
        return None
    if token in DIGITS and len(token) == 1:
        return Digit(token)
    if token == ".":
        return Dot()
    if token.upper() in CLEAR_TOKENS:
        return Clear()
    if token.upper() in DELETE_TOKENS:
        return Delete()
    return _operator(token)


def actions_from_tokens(tokens: Iterable[str]) -> Tuple[List[Action], List[str]]:
    """
    Split tokens into recognised actions and rejected tokens, keeping order.

    A token made only of digits and points ("96", "2.5") is typed one
    character at a time. Blank tokens are skipped.
    """
    actions: List[Action] = []
    rejected: List[str] = []
    for token in tokens:
        if not token.strip():
            continue
        if len(token) > 1 and all(ch in DIGITS or ch == "." for ch in token):
            actions.extend(Dot() if ch == "." else Digit(ch) for ch in token)
            continue
        action = action_from_token(token)
        if action is None:
            rejected.append(token)
        else:
            actions.append(action)
    return actions, rejected
