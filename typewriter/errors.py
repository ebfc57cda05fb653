# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del protocolo de enlaces cifrados.
# --------------------------------------------------------------
"""Excepciones propias de Typewriter Messenger.

Cada categoría agrupa fallos que la interfaz muestra con el mismo mensaje, de
modo que un atacante que pruebe enlaces no pueda distinguir la causa exacta.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TypewriterError(Exception):
    """Excepción base de la aplicación.

    Attributes:
        message (str): Descripción legible del fallo (nunca incluye secretos).
        error_code (str): Código estable para trazas y diagnósticos.
        details (Dict[str, Any]): Contexto adicional no sensible.

    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class RngUnavailableError(TypewriterError):
    """No hay fuente de aleatoriedad criptográfica disponible (fatal)."""


class MessageUnreadableError(TypewriterError):
    """El sobre cifrado no puede convertirse en texto claro."""


class AuthenticationError(MessageUnreadableError):
    """La etiqueta AES-GCM no verifica: clave errónea, blob dañado o manipulado."""


class MalformedEnvelopeError(MessageUnreadableError):
    """El sobre es más corto que el nonce fijo de 12 bytes."""

    def __init__(self, message: str, length: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if length is not None:
            self.details["length"] = length


class InvalidLinkError(TypewriterError):
    """El enlace compartido no tiene la forma esperada."""


class InvalidKeyEncodingError(InvalidLinkError):
    """El token de clave no es Base64 URL-safe válido de 32 bytes."""


class NotAViewLinkError(InvalidLinkError):
    """El fragmento del enlace no empieza por ``#/view``."""


class InvalidBlobIdError(InvalidLinkError):
    """El identificador del blob contiene caracteres que alteran la URL."""


class MissingParameterError(InvalidLinkError):
    """Falta el parámetro ``id`` o ``key`` (o está vacío)."""

    def __init__(self, message: str, parameter: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if parameter:
            self.details["parameter"] = parameter


class EmptyMessageError(TypewriterError):
    """Se intentó crear un enlace para un mensaje en blanco."""


class BlobStoreError(TypewriterError):
    """Fallo de red o de protocolo al hablar con el almacén de blobs."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if status_code is not None:
            self.details["status_code"] = status_code


class UploadError(BlobStoreError):
    """No se pudo subir el sobre cifrado."""


class DownloadError(BlobStoreError):
    """No se pudo descargar el sobre cifrado (inexistente, caducado o red)."""
