# --------------------------------------------------------------
# File: logging_setup.py
# Description: Configuración única de logging para la app y las pruebas.
# --------------------------------------------------------------
"""Inicializa los loggers ``typewriter`` y ``api`` con un formato común."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Optional

from typewriter.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_ROOTS = ("typewriter", "api")
_configured = False
_lock = threading.Lock()


def setup_logging(level: Optional[str] = None) -> None:
    """Configura los loggers de la aplicación una sola vez por proceso.

    Args:
        level (Optional[str]): Nivel a aplicar; por defecto ``LOG_LEVEL``.

    """
    global _configured
    # Streamlit ejecuta cada sesión en su propio hilo.
    with _lock:
        if _configured:
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        resolved = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

        for name in _ROOTS:
            logger = logging.getLogger(name)
            logger.setLevel(resolved)
            logger.addHandler(handler)

        _configured = True
