import json
import math

import pytest

from calc_display import Operator, State, initial_state


def test_operator_parse_symbols_and_aliases():
    assert Operator.parse("+") is Operator.ADD
    assert Operator.parse("−") is Operator.SUBTRACT
    assert Operator.parse("-") is Operator.SUBTRACT
    assert Operator.parse("*") is Operator.MULTIPLY
    assert Operator.parse("x") is Operator.MULTIPLY
    assert Operator.parse("/") is Operator.DIVIDE
    assert Operator.parse("÷") is Operator.DIVIDE


def test_operator_parse_rejects_unknown():
    for bad in ["=", "%", "", None, 3]:
        with pytest.raises(ValueError):
            Operator.parse(bad)


def test_state_is_immutable():
    s = initial_state()
    with pytest.raises(AttributeError):
        s.display = "5"


def test_state_dict_round_trip():
    s = State(display="9 ×", accumulator=9.0, operator=Operator.MULTIPLY, awaiting_next=True)
    data = s.to_dict()
    assert data == {"display": "9 ×", "accumulator": 9.0, "operator": "×", "awaiting_next": True}
    assert State.from_dict(data) == s


def test_from_dict_accepts_integer_accumulator():
    s = State.from_dict({"display": "6", "accumulator": 9, "operator": "+", "awaiting_next": False})
    assert s.accumulator == 9.0
    assert s.operator is Operator.ADD


def test_from_dict_defaults_to_initial_state():
    assert State.from_dict({}) == initial_state()


@pytest.mark.parametrize(
    "data",
    [
        {"display": ""},
        {"display": "1.2.3"},
        {"display": "abc"},
        {"display": 5},
        {"display": "9", "accumulator": 9},
        {"display": "9", "operator": "+"},
        {"display": "9", "awaiting_next": True},
        {"display": "9", "accumulator": "9", "operator": "+"},
        {"display": "9", "accumulator": 9, "operator": "%"},
        {"display": "9", "awaiting_next": "yes"},
        {"display": "9", "accumulator": 10**400, "operator": "+"},
        {"display": "9", "accumulator": float("inf"), "operator": "+"},
        {"display": "9", "accumulator": float("nan"), "operator": "+"},
        {"display": "9", "accumulator": "-Infinity", "operator": "+"},
    ],
)
def test_from_dict_rejects_invalid_states(data):
    with pytest.raises(ValueError):
        State.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        State.from_dict(["0"])


def test_infinite_accumulator_serialises_as_string():
    s = State(display="6", accumulator=math.inf, operator=Operator.ADD, awaiting_next=False)
    data = s.to_dict()
    assert data["accumulator"] == "Infinity"
    assert json.loads(json.dumps(data, allow_nan=False)) == data
    assert State.from_dict(data) == s
