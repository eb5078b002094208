"""
Interfaz gráfica de la calculadora de teclado.

Usa tkinter. Cada botón o tecla física se traduce a una CalculatorKey y
se entrega al motor; la pantalla muestra el texto que devuelve.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_keys import CalculatorKey, key_from_keysym
from keypad_engine import KeypadCalculatorEngine


logger = logging.getLogger(__name__)


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "result_fg":  "#A6E3A1",
    }

    # ── Teclado ──────────────────────────────────────────────────
    #  Cada fila es una lista de (tecla, columnas, tipo_color)

    KEYPAD = [
        [(CalculatorKey.CLEAR, 1, "special"), (CalculatorKey.TOGGLE_SIGN, 1, "special"),
         (CalculatorKey.PERCENT, 1, "special"), (CalculatorKey.DIVIDE, 1, "op")],

        [(CalculatorKey.SEVEN, 1, "num"), (CalculatorKey.EIGHT, 1, "num"),
         (CalculatorKey.NINE, 1, "num"), (CalculatorKey.MULTIPLY, 1, "op")],

        [(CalculatorKey.FOUR, 1, "num"), (CalculatorKey.FIVE, 1, "num"),
         (CalculatorKey.SIX, 1, "num"), (CalculatorKey.SUBTRACT, 1, "op")],

        [(CalculatorKey.ONE, 1, "num"), (CalculatorKey.TWO, 1, "num"),
         (CalculatorKey.THREE, 1, "num"), (CalculatorKey.ADD, 1, "op")],

        [(CalculatorKey.ZERO, 2, "num"), (CalculatorKey.DOT, 1, "num"),
         (CalculatorKey.EQUAL, 1, "equals")],
    ]

    COLUMNS = 4

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else KeypadCalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_result = tkfont.Font(family="Consolas", size=28, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.display_var = tk.StringVar(value=self.engine.display_text)
        tk.Label(
            frame, textvariable=self.display_var,
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"], anchor="e",
        ).pack(fill="x", pady=(8, 4))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        for c in range(self.COLUMNS):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            col_pos = 0
            for key, span, kind in row_def:
                btn = tk.Button(
                    frame, text=key.value, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda k=key: self._on_key(k),
                )
                btn.grid(row=r, column=col_pos, columnspan=span,
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += span
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        key = key_from_keysym(event.keysym, event.char)
        if key is None:
            return
        self._on_key(key)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, key: CalculatorKey):
        text = self.engine.handle(key)
        logger.debug("Pantalla: %s", text)
        self.display_var.set(text)
