import json
from typing import List, Sequence

import click

from .adapter import actions_from_tokens
from .config import LOG_LEVEL, parse_log_level, setup_logging
from .controller import CalculatorController
from .display_types import State
from .history import render_lines

QUIT_TOKENS = {"quit", "exit", "q"}


def format_state(state: State, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(state.to_dict(), ensure_ascii=False)
    history, display = render_lines(state)
    return f"{history}\n{display}" if history else display


def feed_tokens(controller: CalculatorController, tokens: Sequence[str], strict: bool) -> List[str]:
    """Dispatch the recognised tokens; returns the rejected ones."""
    actions, rejected = actions_from_tokens(tokens)
    if rejected and strict:
        raise click.UsageError(f"Unknown keys: {' '.join(rejected)}")
    for token in rejected:
        click.echo(f"ignoring unknown key: {token}", err=True)
    for action in actions:
        controller.dispatch(action)
    return rejected


def _interactive(controller: CalculatorController, as_json: bool, strict: bool) -> None:
    stdin = click.get_text_stream("stdin")
    for line in stdin:
        tokens = line.split()
        if any(t.lower() in QUIT_TOKENS for t in tokens):
            break
        try:
            feed_tokens(controller, tokens, strict)
        except click.UsageError as e:
            click.echo(f"error: {e.message}", err=True)
            continue
        click.echo(format_state(controller.state, as_json))


@click.command()
@click.argument("keys", nargs=-1)
@click.option("--interactive", "-i", is_flag=True, default=False, help="Read keys line by line from stdin")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the state as JSON")
@click.option("--strict", is_flag=True, default=False, help="Fail on unknown keys instead of skipping them")
@click.option("--log-level", default=LOG_LEVEL, show_default=True, help="Logging level")
def main(keys: Sequence[str], interactive: bool, as_json: bool, strict: bool, log_level: str) -> None:
    """Type KEYS on a calculator and print the resulting display.

    Keys are digits, ".", AC, DEL and the operators + - * / (or + − × ÷),
    e.g. ``calc-display 9 + 6``. Use ``--`` before keys that look like options.
    """
    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    controller = CalculatorController()
    feed_tokens(controller, keys, strict)
    if interactive:
        _interactive(controller, as_json, strict)
        return
    click.echo(format_state(controller.state, as_json))


if __name__ == "__main__":  # pragma: no cover
    main()
