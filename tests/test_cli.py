import json

from click.testing import CliRunner

from calc_display.cli import main


def test_keys_print_history_and_display():
    result = CliRunner().invoke(main, ["9", "+", "6"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["9 + 6", "6"]


def test_plain_display_without_operator():
    result = CliRunner().invoke(main, ["0", "0", "7", ".", ".", "5", "DEL"])
    assert result.exit_code == 0
    assert result.output.strip() == "7."


def test_json_output():
    result = CliRunner().invoke(main, ["--json", "12", "*"])
    assert result.exit_code == 0
    state = json.loads(result.output)
    assert state == {"display": "12 ×", "accumulator": 12.0, "operator": "×", "awaiting_next": True}


def test_unknown_keys_skipped_by_default():
    result = CliRunner().invoke(main, ["4", "=", "2"])
    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == "42"


def test_strict_rejects_unknown_keys():
    result = CliRunner().invoke(main, ["--strict", "4", "="])
    assert result.exit_code == 2
    assert "Unknown keys" in result.output


def test_bad_log_level():
    result = CliRunner().invoke(main, ["--log-level", "loud", "1"])
    assert result.exit_code == 2


def test_interactive_session():
    result = CliRunner().invoke(main, ["--interactive"], input="9 +\n6\nAC\nquit\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["9 +", "9 +", "9 + 6", "6", "0"]


def test_strict_accepts_blank_keys():
    result = CliRunner().invoke(main, ["--strict", "", "4", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "42"
