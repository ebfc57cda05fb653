# --------------------------------------------------------------
# File: test_key_codec.py
# Description: Pruebas de la codificación URL-safe de la clave simétrica.
# --------------------------------------------------------------

import base64

import pytest

from typewriter.crypto_sym import generate_key
from typewriter.errors import InvalidKeyEncodingError
from typewriter.key_codec import decode_key, encode_key
from typewriter.models import SymmetricKey


def test_roundtrip_many_keys():
    """Comprueba que decodificar un token devuelva exactamente la clave original.

    Returns:
        None: Las aserciones comparan la clave y sus bytes tras el ciclo.
    """
    for _ in range(100):
        k = generate_key()
        assert decode_key(encode_key(k)) == k
        assert decode_key(encode_key(k)).to_bytes() == k.to_bytes()


def test_token_charset_and_length():
    """Verifica que el token no contenga ``+``, ``/`` ni ``=`` y mida 43 caracteres.

    Returns:
        None: Las aserciones revisan el alfabeto y la longitud del token.
    """
    # 0xfb/0xff fuerzan los caracteres sustituidos en Base64 estándar.
    k = SymmetricKey.from_bytes(b"\xfb\xff" * 16)
    assert set("+/") & set(base64.b64encode(k.to_bytes()).decode())
    token = encode_key(k)
    assert len(token) == 43
    assert not set(token) & {"+", "/", "="}


def test_known_vector():
    """Una clave de ceros se codifica como 43 letras ``A``."""
    assert encode_key(SymmetricKey.from_bytes(bytes(32))) == "A" * 43


def test_decode_accepts_padded_token():
    """Garantiza que un token con su relleno ``=`` final siga siendo válido.

    Returns:
        None: Las aserciones comparan la clave decodificada con la original.
    """
    raw = bytes(range(32))
    padded = base64.urlsafe_b64encode(raw).decode("ascii")
    assert padded.endswith("=")
    assert decode_key(padded).to_bytes() == raw
    assert decode_key(padded) == decode_key(padded.rstrip("="))


def test_decode_rejects_truncated_token(key):
    """Comprueba que quitar un carácter del token impida reconstruir la clave.

    Args:
        key (SymmetricKey): Clave aleatoria del fixture compartido.

    Returns:
        None: Se espera InvalidKeyEncodingError.
    """
    with pytest.raises(InvalidKeyEncodingError):
        decode_key(encode_key(key)[:-1])


def test_decode_rejects_extra_characters(key):
    """Un token con bytes de más no es una clave de 256 bits."""
    with pytest.raises(InvalidKeyEncodingError):
        decode_key(encode_key(key) + "AAAA")


@pytest.mark.parametrize(
    "token",
    [
        "",
        "===",
        "A" * 42 + "+",  # alfabeto estándar, no URL-safe
        "A" * 42 + "/",
        "A" * 43 + "===",  # más relleno del posible
        "A" * 20 + "=" + "A" * 22,  # relleno en medio
        "A" * 20 + " " + "A" * 22,
        "A" * 43 + "\n",
        "A" * 42 + "é",
    ],
)
def test_decode_rejects_bad_alphabet(token):
    """Verifica que los caracteres fuera de ``[A-Za-z0-9_-]`` se rechacen.

    Solo se tolera relleno ``=`` al final y como máximo dos caracteres.

    Args:
        token (str): Token mal formado proporcionado por la parametrización.

    Returns:
        None: Se espera InvalidKeyEncodingError.
    """
    with pytest.raises(InvalidKeyEncodingError):
        decode_key(token)


def test_decode_rejects_impossible_length():
    """Una longitud 4n+1 no es Base64 válido."""
    with pytest.raises(InvalidKeyEncodingError):
        decode_key("A" * 41)


def test_symmetric_key_requires_32_bytes():
    """Comprueba que el modelo de clave valide su longitud al construirse.

    Returns:
        None: Se espera un error de validación para 16 bytes.
    """
    with pytest.raises(ValueError):
        SymmetricKey.from_bytes(b"\x00" * 16)
