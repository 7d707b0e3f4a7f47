"""
Controller owning the calculator state for one session.

Each input is processed to completion (classify, reduce, render) before the
next one is accepted. No other component writes the state.
"""

import logging
from typing import Callable, Optional

from .adapter import action_from_key
from .display_types import Action, Clear, State
from .reducer import initial_state, reduce

logger = logging.getLogger(__name__)

Renderer = Callable[[State], None]


class CalculatorController:
    """Sequences dispatch, reduce and render for a single calculator."""

    def __init__(self, renderer: Optional[Renderer] = None, state: Optional[State] = None):
        self._renderer = renderer
        self._state = state if state is not None else initial_state()

    @property
    def state(self) -> State:
        return self._state

    def dispatch(self, action: Action) -> State:
        """
        Apply an action and hand the new state to the renderer.

        Args:
            action: Action produced by the input adapter

        Returns:
            The new state
        """
        previous = self._state
        self._state = reduce(previous, action)
        logger.debug("%r: %r -> %r", action, previous.display, self._state.display)
        if self._renderer is not None:
            self._renderer(self._state)
        return self._state

    def press(self, key: Optional[str], value: Optional[str] = None) -> bool:
        """Classify a keypad press and dispatch it; False when the key was declined."""
        action = action_from_key(key, value)
        if action is None:
            return False
        self.dispatch(action)
        return True

    def reset(self) -> State:
        return self.dispatch(Clear())

    def render(self) -> None:
        """Paint the current state, e.g. on startup."""
        if self._renderer is not None:
            self._renderer(self._state)
