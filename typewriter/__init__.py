# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del núcleo de enlaces cifrados.
# --------------------------------------------------------------
"""Inicializa el paquete `typewriter` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_sym",
    "envelope",
    "errors",
    "key_codec",
    "links",
    "logging_setup",
    "models",
    "typing_chain",
]
