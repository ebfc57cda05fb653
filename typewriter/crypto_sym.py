# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrar y descifrar mensajes compartidos.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM con nonce aleatorio por mensaje.

Algoritmo, tamaño de clave y tamaño de nonce son constantes fijas: cambiar
cualquiera de ellos invalida los enlaces ya emitidos.
"""

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from typewriter import envelope
from typewriter.errors import AuthenticationError, RngUnavailableError
from typewriter.models import KEY_SIZE, SymmetricKey

logger = logging.getLogger(__name__)

ALGORITHM = "AES-256-GCM"
NONCE_SIZE = envelope.NONCE_SIZE
TAG_SIZE = envelope.TAG_SIZE


def _random_bytes(size: int) -> bytes:
    try:
        return os.urandom(size)
    except (NotImplementedError, OSError) as exc:
        raise RngUnavailableError("no hay fuente de aleatoriedad criptográfica") from exc


def generate_key() -> SymmetricKey:
    """Genera una clave AES-256 aleatoria para un único mensaje.

    Returns:
        SymmetricKey: Clave de 256 bits.

    Raises:
        RngUnavailableError: Si el sistema no ofrece aleatoriedad segura.

    """

    return SymmetricKey.from_bytes(_random_bytes(KEY_SIZE))


def encrypt(plaintext: bytes, key: SymmetricKey) -> bytes:
    """Cifra datos con AES-GCM usando un nonce nuevo en cada llamada.

    Args:
        plaintext (bytes): Datos en claro.
        key (SymmetricKey): Clave del mensaje.

    Returns:
        bytes: Sobre ``nonce || ciphertext || tag``.

    """

    nonce = _random_bytes(NONCE_SIZE)
    ct_full = AESGCM(key.to_bytes()).encrypt(nonce, plaintext, None)
    return envelope.pack(nonce, ct_full)


def decrypt(sealed: bytes, key: SymmetricKey) -> bytes:
    """Descifra un sobre AES-GCM de forma todo-o-nada.

    Args:
        sealed (bytes): Sobre producido por :func:`encrypt`.
        key (SymmetricKey): Clave extraída del enlace.

    Returns:
        bytes: Texto claro original.

    Raises:
        AuthenticationError: Si el sobre es más corto que nonce + tag o la
        etiqueta no verifica (clave errónea, datos truncados o manipulados).

    """

    if len(sealed) < envelope.MIN_ENVELOPE_SIZE:
        raise AuthenticationError(
            "sobre cifrado demasiado corto", details={"length": len(sealed)}
        )

    nonce, ct_full = envelope.unpack(sealed)
    try:
        return AESGCM(key.to_bytes()).decrypt(nonce, ct_full, None)
    except InvalidTag as exc:
        logger.debug("Etiqueta GCM no válida (%d bytes)", len(sealed))
        raise AuthenticationError("no se pudo autenticar el mensaje") from exc


def encrypt_text(text: str, key: SymmetricKey) -> bytes:
    """Cifra texto codificándolo primero en UTF-8."""

    return encrypt(text.encode("utf-8"), key)


def decrypt_text(sealed: bytes, key: SymmetricKey) -> str:
    """Descifra un sobre y decodifica el resultado como UTF-8.

    Las secuencias inválidas se sustituyen por U+FFFD en lugar de fallar.
    """

    return decrypt(sealed, key).decode("utf-8", errors="replace")
