"""Registro de la calculadora: un único manejador en stderr."""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Handler:
    """Envía el registro de todos los módulos a stderr con el nivel dado."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
    return handler
