# --------------------------------------------------------------
# File: links.py
# Description: Construcción y análisis de enlaces compartibles ``#/view``.
# --------------------------------------------------------------
"""Formato del enlace: ``<origin><path>#/view?id=<blobId>&key=<token>``.

El marcador ``#/view`` y los nombres ``id`` y ``key`` forman parte de la
superficie de compatibilidad y no deben cambiar.
"""

from urllib.parse import parse_qs

from typewriter.errors import MissingParameterError, NotAViewLinkError
from typewriter.models import ViewLink

VIEW_MARKER = "#/view"


def build_link(origin: str, path: str, blob_id: str, token: str) -> str:
    """Compone el enlace para compartir.

    ``blob_id`` y ``token`` ya deben ser seguros dentro de un fragmento de URL;
    no se aplica codificación porcentual.

    Args:
        origin (str): Esquema y host, p. ej. ``https://x``.
        path (str): Ruta de la aplicación, p. ej. ``/y``.
        blob_id (str): Identificador opaco del almacén.
        token (str): Clave codificada con :func:`typewriter.key_codec.encode_key`.

    Returns:
        str: Enlace completo.

    """

    return f"{origin}{path}{VIEW_MARKER}?id={blob_id}&key={token}"


def _fragment(url: str) -> str:
    _, sep, fragment = url.partition("#")
    return sep + fragment


def is_view_link(url: str) -> bool:
    """Indica si el fragmento del enlace empieza por ``#/view``."""

    return _fragment(url).startswith(VIEW_MARKER)


def parse_link(url: str) -> ViewLink:
    """Extrae el identificador del blob y el token de clave de un enlace.

    Acepta tanto la URL completa como solo el fragmento (``#/view?...``).

    Args:
        url (str): Enlace recibido por el destinatario.

    Returns:
        ViewLink: Parámetros ``id`` y ``key`` tal cual se construyeron.

    Raises:
        NotAViewLinkError: Si el fragmento no empieza por ``#/view``.
        MissingParameterError: Si falta ``id`` o ``key`` o están vacíos.

    """

    fragment = _fragment(url.strip())
    if not fragment.startswith(VIEW_MARKER):
        raise NotAViewLinkError("el enlace no apunta a la vista de mensajes")

    _, _, query = fragment.partition("?")
    params = parse_qs(query, keep_blank_values=True)

    values = {}
    for name in ("id", "key"):
        value = params.get(name, [""])[0]
        if not value:
            raise MissingParameterError(f"falta el parámetro '{name}'", parameter=name)
        values[name] = value

    return ViewLink(blob_id=values["id"], key_token=values["key"])
