# --------------------------------------------------------------
# File: blobstore.py
# Description: Cliente HTTP del almacén de blobs opaco (subida y descarga).
# --------------------------------------------------------------
"""Frontera con el servicio externo de almacenamiento de blobs.

Contrato del servicio: ``POST {base}/blob/new`` con los bytes en el cuerpo
devuelve la URL del recurso (``.../<id>``); ``GET {base}/blob/<id>`` devuelve
exactamente esos bytes. El servicio nunca recibe claves ni texto claro.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from typewriter.config import BLOB_STORE_TIMEOUT, BLOB_STORE_URL
from typewriter.errors import DownloadError, InvalidBlobIdError, UploadError

logger = logging.getLogger(__name__)

CREATE_PATH = "/blob/new"
BLOB_PATH = "/blob/"
_UNSAFE_ID_CHARS = frozenset("/?#%")


def blob_id_from_url(resource_url: str) -> str:
    """Devuelve el último segmento de ruta de la URL del recurso."""

    return resource_url.strip().rsplit("/", 1)[-1]


class BlobStoreClient:
    """Cliente síncrono basado en ``requests.Session``.

    Args:
        base_url (Optional[str]): Raíz del servicio; por defecto ``BLOB_STORE_URL``.
        timeout (Optional[float]): Segundos por petición; por defecto ``BLOB_STORE_TIMEOUT``.
        session (Optional[requests.Session]): Sesión a reutilizar.

    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or BLOB_STORE_URL).rstrip("/")
        self.timeout = BLOB_STORE_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "BlobStoreClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def resource_url(self, blob_id: str) -> str:
        """Construye la URL del blob sin permitir que el id cambie la ruta.

        Raises:
            InvalidBlobIdError: Si el id está vacío o contiene ``/``, ``?``, ``#`` o ``%``.

        """

        if not blob_id or _UNSAFE_ID_CHARS & set(blob_id):
            raise InvalidBlobIdError("identificador de blob no válido")
        return f"{self.base_url}{BLOB_PATH}{blob_id}"

    def upload(self, data: bytes) -> str:
        """Sube un buffer opaco y devuelve la URL del recurso creado.

        Raises:
            UploadError: Error de red, estado HTTP no satisfactorio o respuesta
            sin identificador.

        """

        url = f"{self.base_url}{CREATE_PATH}"
        try:
            response = self.session.post(
                url,
                data=data,
                headers={"Content-Type": "application/octet-stream"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Subida rechazada por el almacén: HTTP %s", status)
            raise UploadError("el almacén rechazó la subida", status_code=status) from exc
        except requests.exceptions.RequestException as exc:
            logger.error("Fallo de red al subir el blob: %s", exc)
            raise UploadError("no se pudo contactar con el almacén") from exc

        resource_url = response.text.strip()
        if not blob_id_from_url(resource_url):
            raise UploadError("la respuesta del almacén no contiene un identificador")

        logger.info("Blob subido (%d bytes) -> %s", len(data), resource_url)
        return resource_url

    def download(self, blob_id: str) -> bytes:
        """Descarga los bytes de un blob previamente subido.

        Raises:
            InvalidBlobIdError: Si el id alteraría la ruta de la petición.
            DownloadError: Blob inexistente o caducado, o error de red.

        """

        url = self.resource_url(blob_id)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.warning("Descarga fallida para blob %s: HTTP %s", blob_id, status)
            raise DownloadError("el blob no está disponible", status_code=status) from exc
        except requests.exceptions.RequestException as exc:
            logger.error("Fallo de red al descargar el blob %s: %s", blob_id, exc)
            raise DownloadError("no se pudo contactar con el almacén") from exc

        logger.info("Blob %s descargado (%d bytes)", blob_id, len(response.content))
        return response.content
