"""Conversion between Ed25519 JSON Web Keys and raw or multibase keys."""

import base64
import binascii
import re
from typing import Any

from ..core.constants import (
    JWK_CURVE,
    JWK_KEY_TYPE,
    MULTICODEC_PRIV_HEADER,
    MULTICODEC_PUB_HEADER,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
)
from ..core.errors import InvalidFormatError, InvalidKeySizeError
from ..core.models import KeyPair
from ..core.multibase import encode_multibase_key

_BASE64URL_UNPADDED = re.compile(r"[A-Za-z0-9_-]*")


def jwk_to_public_key_bytes(jwk: dict[str, Any]) -> bytes:
    """Extract the raw public key from a JWK's ``x`` parameter.

    Raises:
        InvalidFormatError: If ``kty``, ``crv`` or ``x`` is wrong
        InvalidKeySizeError: If ``x`` does not decode to 32 bytes
    """
    return _jwk_key_bytes(jwk, "x", PUBLIC_KEY_SIZE)


def jwk_to_secret_key_bytes(jwk: dict[str, Any]) -> bytes:
    """Extract the raw secret key from a JWK's ``d`` parameter.

    Raises:
        InvalidFormatError: If ``kty``, ``crv`` or ``d`` is wrong
        InvalidKeySizeError: If ``d`` does not decode to 32 bytes
    """
    return _jwk_key_bytes(jwk, "d", SECRET_KEY_SIZE)


def jwk_to_public_key_multibase(jwk: dict[str, Any]) -> str:
    """Convert a JWK's public key to ``publicKeyMultibase``."""
    return encode_multibase_key(MULTICODEC_PUB_HEADER, jwk_to_public_key_bytes(jwk))


def jwk_to_secret_key_multibase(jwk: dict[str, Any]) -> str:
    """Convert a JWK's secret key to ``secretKeyMultibase``."""
    return encode_multibase_key(MULTICODEC_PRIV_HEADER, jwk_to_secret_key_bytes(jwk))


def to_jwk(key_pair: KeyPair, secret_key: bool = False) -> dict[str, str]:
    """Convert a key pair to an Ed25519 JWK.

    ``d`` is only emitted when requested and the key pair holds a secret
    key; a public-only key pair silently yields a public JWK.

    Args:
        key_pair: Key pair to convert
        secret_key: Include the secret key as ``d``

    Returns:
        JWK dictionary
    """
    jwk = {
        "kty": JWK_KEY_TYPE,
        "crv": JWK_CURVE,
        "x": base64url_encode(key_pair.public_key),
    }
    if secret_key and key_pair.secret_key:
        jwk["d"] = base64url_encode(key_pair.secret_key)
    return jwk


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(value: str) -> bytes:
    """Decode unpadded base64url.

    Raises:
        binascii.Error: If the value is not valid base64url
    """
    if not _BASE64URL_UNPADDED.fullmatch(value):
        raise binascii.Error("Only unpadded base64url characters are allowed")
    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def _jwk_key_bytes(jwk: dict[str, Any], param: str, expected_size: int) -> bytes:
    if not isinstance(jwk, dict):
        raise InvalidFormatError('"jwk" must be an object.')
    if jwk.get("kty") != JWK_KEY_TYPE:
        raise InvalidFormatError(f'"jwk.kty" must be "{JWK_KEY_TYPE}".')
    if jwk.get("crv") != JWK_CURVE:
        raise InvalidFormatError(f'"jwk.crv" must be "{JWK_CURVE}".')
    value = jwk.get(param)
    if not isinstance(value, str):
        raise InvalidFormatError(f'"jwk.{param}" must be a string.')
    try:
        key = base64url_decode(value)
    except (binascii.Error, ValueError) as e:
        raise InvalidFormatError(f'"jwk.{param}" is not valid base64url: {e}') from e
    if len(key) != expected_size:
        raise InvalidKeySizeError(f"jwk.{param}", len(key), expected_size)
    return key
