"""
Flask server for the calculator keypad.

The browser holds the state: every request carries the current state and
one key press, and the response carries the next state. Nothing is kept on
the server between requests.
"""

import logging

from flask import Flask, jsonify, render_template, request

from .. import config
from ..adapter import action_from_key
from ..history import history_line
from ..reducer import initial_state, reduce
from ..display_types import State

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _state_payload(state: State, ignored: bool = False):
    return {
        "state": state.to_dict(),
        "display": state.display,
        "history": history_line(state),
        "ignored": ignored,
    }


@app.route("/")
def index():
    """Render the calculator keypad page."""
    return render_template("index.html")


@app.route("/api/press", methods=["POST"])
def press():
    """
    Apply one key press to the client's state.

    Expected JSON payload:
        {
            "state": {"display": "9", "accumulator": null,
                      "operator": null, "awaiting_next": false},  // optional
            "key": "digit|dot|ac|del|op",
            "value": "..."  // digit or operator symbol
        }

    Returns:
        JSON with the next state, its display and history lines. Keys that
        are not recognised leave the state unchanged and set "ignored".
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    raw_state = data.get("state")
    if raw_state is None:
        state = initial_state()
    else:
        try:
            state = State.from_dict(raw_state)
        except ValueError as e:
            return jsonify({"error": f"Invalid state: {e}"}), 400

    action = action_from_key(data.get("key"), data.get("value"))
    if action is None:
        logger.debug("Ignoring key %r", data.get("key"))
        return jsonify(_state_payload(state, ignored=True))

    return jsonify(_state_payload(reduce(state, action)))


@app.route("/api/reset", methods=["POST"])
def reset():
    """Return the initial calculator state."""
    return jsonify(_state_payload(initial_state()))


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the calculator keypad web server")
    parser.add_argument(
        "--host",
        default=config.HOST,
        help=f"Host to bind to (default: {config.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.PORT,
        help=f"Port to bind to (default: {config.PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )

    args = parser.parse_args()

    try:
        level = config.parse_log_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    config.setup_logging(level)

    logger.info("Serving calculator at http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
