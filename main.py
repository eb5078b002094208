"""Punto de entrada de la calculadora de teclado.

Uso:
    python main.py                       # ventana tkinter
    python main.py --keys "1.5+2.5="     # sin ventana, imprime cada pantalla
"""

import logging
import sys

from calculator_keys import parse_sequence
from keypad_engine import KeypadCalculatorEngine
from logging_config import setup_logging


FRACTION_DIGITS = 15
LOG_LEVEL = logging.WARNING


def run_keys(sequence: str) -> str:
    engine = KeypadCalculatorEngine(fraction_digits=FRACTION_DIGITS)
    for key in parse_sequence(sequence):
        print(f"{key.value or '?':>2}  {engine.handle(key)}")
    return engine.display_text


def main():
    setup_logging(level=LOG_LEVEL)

    if "--keys" in sys.argv:
        try:
            sequence = sys.argv[sys.argv.index("--keys") + 1]
        except IndexError:
            raise SystemExit("Falta la secuencia después de --keys")
        run_keys(sequence)
        return

    import tkinter as tk

    from calculator_ui import CalculatorApp

    root = tk.Tk()
    root.geometry("340x460")
    root.minsize(300, 420)
    CalculatorApp(root, engine=KeypadCalculatorEngine(fraction_digits=FRACTION_DIGITS))
    root.mainloop()


if __name__ == "__main__":
    main()
