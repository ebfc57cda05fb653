# --------------------------------------------------------------
# File: key_codec.py
# Description: Conversión de claves AES-256 a tokens aptos para URL y viceversa.
# --------------------------------------------------------------
"""Codificación Base64 URL-safe sin relleno de la clave simétrica."""

import base64
import binascii
import re

from typewriter.errors import InvalidKeyEncodingError
from typewriter.models import KEY_SIZE, SymmetricKey

_TOKEN_ALPHABET = re.compile(r"[A-Za-z0-9_-]+")
_MAX_PADDING = 2


def encode_key(key: SymmetricKey) -> str:
    """Codifica la clave en Base64 URL-safe eliminando el relleno ``=``.

    Args:
        key (SymmetricKey): Clave generada para el mensaje.

    Returns:
        str: Token de 43 caracteres sin ``+``, ``/`` ni ``=``.

    """

    return base64.urlsafe_b64encode(key.to_bytes()).decode("ascii").rstrip("=")


def decode_key(token: str) -> SymmetricKey:
    """Reconstruye la clave a partir del token embebido en el enlace.

    Args:
        token (str): Texto Base64 URL-safe; el relleno final ``=`` es opcional.

    Returns:
        SymmetricKey: Clave de exactamente 32 bytes.

    Raises:
        InvalidKeyEncodingError: Si hay caracteres fuera del alfabeto, el
        Base64 es inválido o la longitud decodificada no es de 32 bytes.

    """

    body = token.rstrip("=")
    if len(token) - len(body) > _MAX_PADDING:
        raise InvalidKeyEncodingError("el token de clave tiene demasiado relleno")
    if not body or not _TOKEN_ALPHABET.fullmatch(body):
        raise InvalidKeyEncodingError("el token de clave contiene caracteres no válidos")

    padded = body + "=" * (-len(body) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise InvalidKeyEncodingError("el token de clave no es Base64 válido") from exc

    if len(raw) != KEY_SIZE:
        raise InvalidKeyEncodingError(
            "longitud de clave inesperada",
            details={"expected": KEY_SIZE, "actual": len(raw)},
        )
    return SymmetricKey.from_bytes(raw)
