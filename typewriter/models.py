# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes del protocolo de enlaces cifrados.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan claves, enlaces y mensajes compartidos."""

from pydantic import BaseModel, ConfigDict, SecretBytes, field_validator

KEY_SIZE = 32


class SymmetricKey(BaseModel):
    """Clave AES-256 opaca para el resto de la aplicación.

    Attributes:
        material (SecretBytes): 32 bytes de la clave; ``repr`` nunca los muestra.

    """

    model_config = ConfigDict(frozen=True)

    material: SecretBytes

    @field_validator("material")
    @classmethod
    def _check_size(cls, value: SecretBytes) -> SecretBytes:
        if len(value.get_secret_value()) != KEY_SIZE:
            raise ValueError(f"la clave debe tener {KEY_SIZE} bytes")
        return value

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SymmetricKey":
        """Construye la clave a partir de sus bytes en bruto."""

        return cls(material=SecretBytes(raw))

    def to_bytes(self) -> bytes:
        """Devuelve los bytes en bruto; solo para el cifrador y el codec."""

        return self.material.get_secret_value()


class ViewLink(BaseModel):
    """Parámetros extraídos de un enlace ``#/view``.

    Attributes:
        blob_id (str): Identificador opaco del blob en el almacén.
        key_token (str): Clave codificada en Base64 URL-safe sin relleno.

    """

    model_config = ConfigDict(frozen=True)

    blob_id: str
    key_token: str


class SharedMessage(BaseModel):
    """Resultado del flujo de creación de un mensaje.

    Attributes:
        blob_id (str): Identificador devuelto por el almacén.
        resource_url (str): URL completa del recurso subido.
        link (str): Enlace para compartir con el destinatario.

    """

    model_config = ConfigDict(frozen=True)

    blob_id: str
    resource_url: str
    link: str
