"""
Motor de la calculadora de cuatro operaciones controlada por teclado.

Este módulo provee la clase KeypadCalculatorEngine, una máquina de estados
que recibe una pulsación cada vez y devuelve el texto a mostrar. No sabe
nada de la interfaz: cualquier vista puede alimentarla con teclas.

Contrato de interfaz:
    - handle(key: CalculatorKey) -> str
    - display_text, pending_operation, state: propiedades de solo lectura
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from calculator_keys import CalculatorKey, Operation


logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Error recuperable de la máquina de estados."""


class NoOperationError(CalculatorError):
    """Se pulsó '=' sin operación pendiente."""


class OperandParseError(CalculatorError):
    """El texto de un operando no es un número."""


class EngineState(Enum):
    AWAITING_FIRST_OPERAND = "awaiting_first_operand"
    AWAITING_OPERATOR = "awaiting_operator"
    AWAITING_SECOND_OPERAND = "awaiting_second_operand"


@dataclass
class OperandBuffer:
    """Número en edición: dígitos y como mucho un punto decimal."""

    text: str = ""
    has_decimal: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.text

    def clear(self):
        self.text = ""
        self.has_decimal = False

    def value(self) -> float:
        try:
            return float(self.text)
        except ValueError:
            raise OperandParseError(f"Operando inválido: {self.text!r}") from None


@dataclass(frozen=True)
class CalculatorSnapshot:
    display_text: str
    first_operand: str
    second_operand: str
    pending_operation: Operation | None
    state: EngineState


class KeypadCalculatorEngine:
    """Convierte pulsaciones en una expresión de un solo operador."""

    def __init__(self, fraction_digits: int = 15):
        if fraction_digits < 0:
            raise ValueError("fraction_digits no puede ser negativo")
        self._scale = 10.0 ** fraction_digits
        self._first = OperandBuffer()
        self._second = OperandBuffer()
        self._pending: Operation | None = None
        self._display = "0"

    # ── Consultas ────────────────────────────────────────────────

    @property
    def display_text(self) -> str:
        return self._display

    @property
    def pending_operation(self) -> Operation | None:
        return self._pending

    @property
    def first_operand(self) -> str:
        return self._first.text

    @property
    def second_operand(self) -> str:
        return self._second.text

    @property
    def state(self) -> EngineState:
        if self._pending is not None:
            return EngineState.AWAITING_SECOND_OPERAND
        if self._first.is_empty:
            return EngineState.AWAITING_FIRST_OPERAND
        return EngineState.AWAITING_OPERATOR

    def snapshot(self) -> CalculatorSnapshot:
        return CalculatorSnapshot(
            display_text=self._display,
            first_operand=self._first.text,
            second_operand=self._second.text,
            pending_operation=self._pending,
            state=self.state,
        )

    @property
    def _active(self) -> OperandBuffer:
        return self._first if self._pending is None else self._second

    # ── Eventos ──────────────────────────────────────────────────

    def handle(self, key: CalculatorKey) -> str:
        """Procesa una tecla y devuelve el texto a mostrar.

        Las secuencias inválidas ('=' sin operador, '%' sin número) se
        ignoran: el estado y la pantalla quedan como estaban.
        """
        try:
            return self.press(key)
        except CalculatorError as exc:
            logger.warning("Tecla %s ignorada: %s", key.name, exc)
            return self._display

    def handle_sequence(self, keys) -> str:
        for key in keys:
            self.handle(key)
        return self._display

    def press(self, key: CalculatorKey) -> str:
        """Como handle(), pero propaga CalculatorError.

        Raises:
            NoOperationError: '=' sin operación pendiente.
            OperandParseError: un operando no se puede convertir a número.
        """
        logger.debug("Tecla %s en estado %s", key.name, self.state.name)

        if key.is_digit:
            self._append_digit(key.value)
        elif key is CalculatorKey.DOT:
            self._append_dot()
        elif key.is_operator:
            self._select_operation(Operation.from_key(key))
        elif key is CalculatorKey.TOGGLE_SIGN:
            self._toggle_sign()
        elif key is CalculatorKey.PERCENT:
            self._percent()
        elif key is CalculatorKey.EQUAL:
            self._equals()
        elif key is CalculatorKey.CLEAR:
            self.reset()
        else:
            self._display = "0"

        return self._display

    def reset(self):
        self._first.clear()
        self._second.clear()
        self._pending = None
        self._display = "0"
        logger.info("Calculadora reiniciada")

    # ── Entrada de operandos ─────────────────────────────────────

    def _append_digit(self, digit: str):
        buffer = self._active
        if buffer.is_empty:
            buffer.has_decimal = False
        buffer.text += digit
        self._display = buffer.text

    def _append_dot(self):
        buffer = self._active
        if buffer.has_decimal:
            return
        buffer.has_decimal = True
        if buffer.is_empty:
            buffer.text = "0"
        buffer.text += "."
        self._display = buffer.text

    def _select_operation(self, operation: Operation):
        # Sustituye la operación pendiente sin calcular la anterior.
        self._pending = operation
        if self._second.is_empty:
            self._second.has_decimal = False

    def _toggle_sign(self):
        if self._display == "0":
            return
        if self._display.startswith("-"):
            self._display = self._display[1:]
        else:
            self._display = "-" + self._display
        self._active.text = self._display

    # ── Cálculo ──────────────────────────────────────────────────

    def _percent(self):
        lhs = self._first.value()
        if self._pending is None:
            result = lhs / 100
        elif self._second.is_empty:
            result = lhs * lhs / 100
        else:
            result = lhs * self._second.value() / 100
        self._commit(result)

    def _equals(self):
        if self._pending is None:
            raise NoOperationError("No hay operación pendiente")
        lhs = self._first.value()
        rhs = lhs if self._second.is_empty else self._second.value()
        self._commit(self._pending.apply(lhs, rhs))

    def _commit(self, result: float):
        text = self._format_result(self._round(result))
        self._first.text = text
        self._first.has_decimal = "." in text
        self._second.clear()
        self._pending = None
        self._display = text

    def _round(self, value: float) -> float:
        """Redondeo a media alejada de cero en la escala configurada."""
        if not math.isfinite(value):
            return value
        scaled = value * self._scale
        # A partir de 2**52 el valor escalado ya es entero.
        if not math.isfinite(scaled) or abs(scaled) >= 2 ** 52:
            return value
        fraction, whole = math.modf(abs(scaled))
        if fraction >= 0.5:
            whole += 1
        rounded = math.copysign(whole, scaled) / self._scale
        return rounded if rounded != 0 else 0.0

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def _format_result(value: float) -> str:
        """Notación posicional: nunca '1e-06' ni '2e+16'."""
        text = repr(value)
        if math.isfinite(value) and "e" in text:
            text = format(Decimal(text), "f")
        if text.endswith(".0"):
            return text[:-2]
        return text
