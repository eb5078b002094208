"""Tests for the key alphabet, operations and keyboard translation."""

import math

import pytest

from calculator_keys import (
    CalculatorKey,
    Operation,
    key_from_keysym,
    parse_key,
    parse_sequence,
)


# --- Keys ---

def test_digit_keys_are_digits():
    digits = [key for key in CalculatorKey if key.is_digit]
    assert [key.value for key in digits] == list("0123456789")


def test_operator_keys():
    operators = {key for key in CalculatorKey if key.is_operator}
    assert operators == {
        CalculatorKey.ADD,
        CalculatorKey.SUBTRACT,
        CalculatorKey.MULTIPLY,
        CalculatorKey.DIVIDE,
    }


@pytest.mark.parametrize("text, expected", [
    ("7", CalculatorKey.SEVEN),
    (".", CalculatorKey.DOT),
    ("−", CalculatorKey.SUBTRACT),
    ("-", CalculatorKey.SUBTRACT),
    ("x", CalculatorKey.MULTIPLY),
    ("*", CalculatorKey.MULTIPLY),
    ("/", CalculatorKey.DIVIDE),
    ("÷", CalculatorKey.DIVIDE),
    ("±", CalculatorKey.TOGGLE_SIGN),
    ("~", CalculatorKey.TOGGLE_SIGN),
    ("AC", CalculatorKey.CLEAR),
    ("c", CalculatorKey.CLEAR),
    ("\r", CalculatorKey.EQUAL),
    ("q", CalculatorKey.UNDEFINED),
    ("", CalculatorKey.UNDEFINED),
])
def test_parse_key(text, expected):
    assert parse_key(text) is expected


def test_parse_sequence_treats_ac_as_one_key():
    keys = parse_sequence("12 + AC 3")
    assert keys == [
        CalculatorKey.ONE,
        CalculatorKey.TWO,
        CalculatorKey.ADD,
        CalculatorKey.CLEAR,
        CalculatorKey.THREE,
    ]


# --- Keyboard events ---

@pytest.mark.parametrize("keysym, char, expected", [
    ("Return", "\r", CalculatorKey.EQUAL),
    ("KP_Enter", "\r", CalculatorKey.EQUAL),
    ("Escape", "\x1b", CalculatorKey.CLEAR),
    ("KP_7", "7", CalculatorKey.SEVEN),
    ("KP_Divide", "/", CalculatorKey.DIVIDE),
    ("minus", "-", CalculatorKey.SUBTRACT),
    ("percent", "%", CalculatorKey.PERCENT),
    ("a", "a", CalculatorKey.UNDEFINED),
])
def test_key_from_keysym(keysym, char, expected):
    assert key_from_keysym(keysym, char) is expected


def test_modifier_events_are_ignored():
    assert key_from_keysym("Shift_L", "") is None


# --- Operations ---

def test_operation_from_key():
    assert Operation.from_key(CalculatorKey.MULTIPLY) is Operation.MULTIPLY
    assert Operation.MULTIPLY.symbol == "×"


def test_operation_from_non_operator_key():
    with pytest.raises(ValueError):
        Operation.from_key(CalculatorKey.EQUAL)


@pytest.mark.parametrize("operation, expected", [
    (Operation.ADD, 8.0),
    (Operation.SUBTRACT, 4.0),
    (Operation.MULTIPLY, 12.0),
    (Operation.DIVIDE, 3.0),
])
def test_operation_apply(operation, expected):
    assert operation.apply(6.0, 2.0) == expected


def test_divide_by_zero_follows_ieee():
    assert Operation.DIVIDE.apply(5.0, 0.0) == math.inf
    assert Operation.DIVIDE.apply(-5.0, 0.0) == -math.inf
    assert Operation.DIVIDE.apply(5.0, -0.0) == -math.inf
    assert math.isnan(Operation.DIVIDE.apply(0.0, 0.0))
