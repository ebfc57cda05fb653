# --------------------------------------------------------------
# File: envelope.py
# Description: Formato binario del sobre cifrado: nonce || ciphertext || tag.
# --------------------------------------------------------------
"""Empaquetado del sobre que se almacena en el servicio de blobs.

Disposición de bytes (sin prefijos de longitud)::

    | nonce (12) | ciphertext (n) | tag GCM (16) |

La etiqueta va al final, tal como la añaden ``AESGCM.encrypt`` y WebCrypto.
"""

from typing import Tuple

from typewriter.errors import MalformedEnvelopeError

NONCE_SIZE = 12
TAG_SIZE = 16
MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE


def pack(nonce: bytes, ciphertext_with_tag: bytes) -> bytes:
    """Concatena el nonce y el ciphertext con su etiqueta."""

    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"el nonce debe tener {NONCE_SIZE} bytes, tiene {len(nonce)}")
    return bytes(nonce) + bytes(ciphertext_with_tag)


def unpack(buffer: bytes) -> Tuple[bytes, bytes]:
    """Separa el sobre en ``(nonce, ciphertext_with_tag)``.

    No valida la etiqueta; eso ocurre al descifrar.

    Raises:
        MalformedEnvelopeError: Si el buffer tiene menos de 12 bytes.

    """

    if len(buffer) < NONCE_SIZE:
        raise MalformedEnvelopeError("sobre cifrado demasiado corto", length=len(buffer))
    data = bytes(buffer)
    return data[:NONCE_SIZE], data[NONCE_SIZE:]
