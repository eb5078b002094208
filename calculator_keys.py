"""
Alfabeto de teclas y operaciones binarias de la calculadora de teclado.

Las teclas son los glifos que muestra el teclado en pantalla. Este módulo
no depende de tkinter: la interfaz traduce sus eventos a `CalculatorKey`
con `parse_key` o `key_from_keysym` y el motor solo ve teclas.
"""

from __future__ import annotations

import math
import operator
import re
from enum import Enum


class CalculatorKey(Enum):
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DOT = "."
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"
    TOGGLE_SIGN = "±"
    PERCENT = "%"
    EQUAL = "="
    CLEAR = "AC"
    UNDEFINED = ""

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_KEYS


def _divide(lhs: float, rhs: float) -> float:
    """División IEEE-754: nunca lanza ZeroDivisionError."""
    if rhs != 0:
        return lhs / rhs
    if lhs == 0 or math.isnan(lhs):
        return math.nan
    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


class Operation(Enum):
    """Operación pendiente con su símbolo y su función binaria."""

    ADD = ("+", operator.add)
    SUBTRACT = ("−", operator.sub)
    MULTIPLY = ("×", operator.mul)
    DIVIDE = ("÷", _divide)

    def __init__(self, symbol, function):
        self.symbol = symbol
        self._function = function

    def apply(self, lhs: float, rhs: float) -> float:
        return self._function(lhs, rhs)

    @classmethod
    def from_key(cls, key: CalculatorKey) -> "Operation":
        try:
            return _OPERATOR_KEYS[key]
        except KeyError:
            raise ValueError(f"{key.name} no es un operador") from None


_OPERATOR_KEYS = {
    CalculatorKey.ADD: Operation.ADD,
    CalculatorKey.SUBTRACT: Operation.SUBTRACT,
    CalculatorKey.MULTIPLY: Operation.MULTIPLY,
    CalculatorKey.DIVIDE: Operation.DIVIDE,
}


# ── Traducción de texto a teclas ─────────────────────────────────

_ALIASES = {
    "-": CalculatorKey.SUBTRACT,
    "*": CalculatorKey.MULTIPLY,
    "x": CalculatorKey.MULTIPLY,
    "X": CalculatorKey.MULTIPLY,
    "/": CalculatorKey.DIVIDE,
    "~": CalculatorKey.TOGGLE_SIGN,
    "c": CalculatorKey.CLEAR,
    "C": CalculatorKey.CLEAR,
    "\n": CalculatorKey.EQUAL,
    "\r": CalculatorKey.EQUAL,
}

_GLYPHS = {key.value: key for key in CalculatorKey if key.value}

_TOKEN_RE = re.compile(r"AC|\S")

_KEYSYMS = {
    "Return": CalculatorKey.EQUAL,
    "KP_Enter": CalculatorKey.EQUAL,
    "Escape": CalculatorKey.CLEAR,
    "Delete": CalculatorKey.CLEAR,
    "KP_Add": CalculatorKey.ADD,
    "KP_Subtract": CalculatorKey.SUBTRACT,
    "KP_Multiply": CalculatorKey.MULTIPLY,
    "KP_Divide": CalculatorKey.DIVIDE,
    "KP_Decimal": CalculatorKey.DOT,
}


def parse_key(text: str) -> CalculatorKey:
    """Devuelve la tecla de un glifo o alias; UNDEFINED si no se reconoce."""
    if text in _GLYPHS:
        return _GLYPHS[text]
    return _ALIASES.get(text, CalculatorKey.UNDEFINED)


def parse_sequence(text: str) -> list[CalculatorKey]:
    """Convierte una cadena como "1.5+2.5=" en la lista de pulsaciones."""
    return [parse_key(token) for token in _TOKEN_RE.findall(text)]


def key_from_keysym(keysym: str, char: str) -> CalculatorKey | None:
    """Traduce un evento de teclado de tkinter.

    Devuelve None para eventos sin carácter (Shift, Control...), que no
    deben contar como tecla no reconocida.
    """
    if keysym in _KEYSYMS:
        return _KEYSYMS[keysym]
    if keysym.startswith("KP_") and keysym[3:].isdigit():
        return parse_key(keysym[3:])
    if not char:
        return None
    return parse_key(char)
