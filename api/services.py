# --------------------------------------------------------------
# File: services.py
# Description: Flujos de creación y lectura de mensajes cifrados por enlace.
# --------------------------------------------------------------
"""Orquestación del núcleo criptográfico con el almacén de blobs.

*Crear*: clave nueva → cifrado → subida → enlace con ``id`` y ``key``.
*Ver*: análisis del enlace → descarga → descifrado local.
"""

import logging
from typing import Optional

from api.blobstore import BlobStoreClient, blob_id_from_url
from typewriter.config import APP_ORIGIN, APP_PATH
from typewriter.crypto_sym import decrypt_text, encrypt_text, generate_key
from typewriter.errors import (
    BlobStoreError,
    DownloadError,
    EmptyMessageError,
    InvalidLinkError,
    MessageUnreadableError,
    RngUnavailableError,
    UploadError,
)
from typewriter.key_codec import decode_key, encode_key
from typewriter.links import build_link, parse_link
from typewriter.models import SharedMessage

logger = logging.getLogger(__name__)

MSG_EMPTY = "El mensaje no puede estar vacío."
MSG_INVALID_LINK = "Enlace no válido: falta el identificador o la clave, o están mal formados."
MSG_UNREADABLE = "No se pudo cargar el mensaje. Puede que no sea válido o que haya caducado."
MSG_CREATE_FAILED = "No se pudo crear el enlace. Inténtalo de nuevo más tarde."
MSG_RNG = "Este entorno no dispone de un generador aleatorio seguro."
MSG_UNEXPECTED = "Se produjo un error inesperado."


def create_message(
    text: str,
    client: BlobStoreClient,
    origin: Optional[str] = None,
    path: Optional[str] = None,
) -> SharedMessage:
    """Cifra el texto, sube el sobre y devuelve el enlace para compartir.

    Args:
        text (str): Mensaje escrito por el remitente.
        client (BlobStoreClient): Cliente del almacén de blobs.
        origin (Optional[str]): Origen del enlace; por defecto ``APP_ORIGIN``.
        path (Optional[str]): Ruta del enlace; por defecto ``APP_PATH``.

    Returns:
        SharedMessage: Identificador, URL del recurso y enlace.

    Raises:
        EmptyMessageError: Si el texto está vacío o solo tiene espacios.
        UploadError: Si el almacén no acepta el sobre.

    """

    if not text.strip():
        raise EmptyMessageError("mensaje vacío")

    key = generate_key()
    sealed = encrypt_text(text, key)
    resource_url = client.upload(sealed)
    blob_id = blob_id_from_url(resource_url)

    link = build_link(
        APP_ORIGIN if origin is None else origin,
        APP_PATH if path is None else path,
        blob_id,
        encode_key(key),
    )
    logger.info("Mensaje creado: blob=%s sobre=%d bytes", blob_id, len(sealed))
    return SharedMessage(blob_id=blob_id, resource_url=resource_url, link=link)


def open_message(url: str, client: BlobStoreClient) -> str:
    """Recupera y descifra el mensaje referenciado por un enlace.

    La clave se valida antes de descargar nada, así un enlace mal formado no
    genera tráfico hacia el almacén.

    Raises:
        InvalidLinkError: Enlace sin ``#/view``, sin parámetros o con clave inválida.
        DownloadError: El blob no existe, caducó o hubo un error de red.
        MessageUnreadableError: El sobre no autentica con la clave del enlace.

    """

    view = parse_link(url)
    key = decode_key(view.key_token)
    sealed = client.download(view.blob_id)
    try:
        text = decrypt_text(sealed, key)
    except MessageUnreadableError:
        logger.warning("No se pudo descifrar el blob %s", view.blob_id)
        raise
    logger.info("Mensaje %s descifrado (%d caracteres)", view.blob_id, len(text))
    return text


def user_message(exc: BaseException) -> str:
    """Traduce una excepción a un único texto por categoría para la interfaz.

    Todos los fallos criptográficos comparten mensaje, sin revelar la causa.
    Cualquier otra excepción se registra y se muestra como error inesperado.
    """

    if isinstance(exc, EmptyMessageError):
        return MSG_EMPTY
    if isinstance(exc, InvalidLinkError):
        return MSG_INVALID_LINK
    if isinstance(exc, (MessageUnreadableError, DownloadError)):
        return MSG_UNREADABLE
    if isinstance(exc, UploadError):
        return MSG_CREATE_FAILED
    if isinstance(exc, RngUnavailableError):
        return MSG_RNG
    if isinstance(exc, BlobStoreError):
        return MSG_UNREADABLE
    logger.error("Error inesperado: %s", exc, exc_info=exc)
    return MSG_UNEXPECTED
