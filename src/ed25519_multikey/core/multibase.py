"""Multibase base58-btc encoding of multicodec-prefixed Ed25519 keys.

A key is written as ``"z" + base58btc(multicodec header + key bytes)``.
"""

from typing import Optional

import base58 as b58

from .constants import (
    MULTIBASE_BASE58BTC_HEADER,
    MULTICODEC_PRIV_HEADER,
    MULTICODEC_PUB_HEADER,
)
from .errors import InvalidFormatError


def encode_multibase_key(header: bytes, key: bytes) -> str:
    """Encode key bytes behind a multicodec header as a multibase string.

    Args:
        header: Multicodec header bytes
        key: Raw key bytes

    Returns:
        Multibase base58-btc string
    """
    return MULTIBASE_BASE58BTC_HEADER + b58.b58encode(header + key).decode("ascii")


def decode_multibase_key(value: object, header: bytes, field: str) -> bytes:
    """Decode a multibase string and strip its multicodec header.

    Args:
        value: Multibase string to decode
        header: Multicodec header expected in front of the key
        field: Property name used in error messages

    Returns:
        Raw key bytes

    Raises:
        InvalidFormatError: If the value is not a multibase base58-btc string
            carrying the expected multicodec header
    """
    if not (
        isinstance(value, str)
        and value
        and value[0] == MULTIBASE_BASE58BTC_HEADER
    ):
        raise InvalidFormatError(
            f'"{field}" must be a multibase, base58-encoded string.'
        )
    try:
        decoded = b58.b58decode(value[len(MULTIBASE_BASE58BTC_HEADER) :])
    except ValueError as e:
        raise InvalidFormatError(f'"{field}" is not valid base58: {e}') from e
    if decoded[: len(header)] != header:
        raise InvalidFormatError(
            f'"{field}" has an invalid multicodec header: expected 0x{header.hex()}, '
            f"got 0x{decoded[: len(header)].hex()}."
        )
    return decoded[len(header) :]


def decode_key_pair(
    public_key_multibase: object, secret_key_multibase: Optional[object] = None
) -> tuple[bytes, Optional[bytes]]:
    """Decode multibase public and secret keys to raw bytes.

    The secret key is only decoded when given; ``None`` is returned for it
    otherwise.

    Returns:
        Tuple of (public_key, secret_key)
    """
    public_key = decode_multibase_key(
        public_key_multibase, MULTICODEC_PUB_HEADER, "publicKeyMultibase"
    )
    secret_key = None
    if secret_key_multibase is not None:
        secret_key = decode_multibase_key(
            secret_key_multibase, MULTICODEC_PRIV_HEADER, "secretKeyMultibase"
        )
    return public_key, secret_key


def encode_key_pair(
    public_key: Optional[bytes] = None, secret_key: Optional[bytes] = None
) -> dict[str, str]:
    """Encode whichever raw keys are present as multibase fields.

    Returns:
        Dictionary with ``publicKeyMultibase`` and/or ``secretKeyMultibase``
    """
    result = {}
    if public_key:
        result["publicKeyMultibase"] = encode_multibase_key(
            MULTICODEC_PUB_HEADER, public_key
        )
    if secret_key:
        result["secretKeyMultibase"] = encode_multibase_key(
            MULTICODEC_PRIV_HEADER, secret_key
        )
    return result
