"""
Web front-end for calc-display.

Serves a keypad page and a JSON API that threads the calculator state
through each key press.
"""

from .server import app

__all__ = ["app"]
