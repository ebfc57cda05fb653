# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para claves y el almacén de blobs simulado.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from api.blobstore import BlobStoreClient
from typewriter.crypto_sym import generate_key
from typewriter.models import SymmetricKey


@pytest.fixture
def key() -> SymmetricKey:
    """Genera una clave AES-256 nueva para cada prueba.

    Returns:
        SymmetricKey: Clave de 256 bits aleatoria.
    """
    return generate_key()


@pytest.fixture
def blob_base() -> str:
    """Raíz del almacén ficticio que se simula con requests-mock.

    Returns:
        str: URL base sin barra final.
    """
    return "https://blobs.test"


@pytest.fixture
def client(blob_base) -> Iterator[BlobStoreClient]:
    """Cliente apuntando al almacén ficticio.

    Args:
        blob_base (str): URL base proporcionada por el fixture homónimo.

    Returns:
        Iterator[BlobStoreClient]: Cliente con timeout corto; se cierra al final.
    """
    with BlobStoreClient(base_url=blob_base, timeout=1) as blob_client:
        yield blob_client
