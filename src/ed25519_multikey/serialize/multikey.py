"""Multikey document export and import."""

from typing import Any, Optional

from ..core.constants import (
    LEGACY_SECRET_KEY_SIZE,
    MULTICODEC_PRIV_HEADER,
    MULTICODEC_PUB_HEADER,
    MULTIKEY_CONTEXT_V1_URL,
    MULTIKEY_TYPE,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
)
from ..core.errors import InvalidArgumentError, InvalidKeySizeError, MissingFieldError
from ..core.models import KeyPair
from ..core.multibase import decode_key_pair, encode_multibase_key


def export_key_pair(
    key_pair: KeyPair,
    *,
    public_key: bool = True,
    secret_key: bool = False,
    include_context: bool = True,
    canonicalize: bool = False,
) -> dict[str, Any]:
    """Export a key pair as a Multikey document.

    Args:
        key_pair: Key pair to export
        public_key: Include ``publicKeyMultibase``
        secret_key: Include ``secretKeyMultibase``
        include_context: Include the Multikey ``@context``
        canonicalize: Truncate a legacy 64 byte secret key to 32 bytes

    Returns:
        Multikey document

    Raises:
        InvalidArgumentError: If neither public nor secret key is requested
    """
    if not (public_key or secret_key):
        raise InvalidArgumentError(
            'Export requires specifying either "publicKey" or "secretKey".'
        )

    exported: dict[str, Any] = {}
    if include_context:
        exported["@context"] = MULTIKEY_CONTEXT_V1_URL
    if key_pair.id:
        exported["id"] = key_pair.id
    if key_pair.controller:
        exported["controller"] = key_pair.controller
    exported["type"] = MULTIKEY_TYPE

    if public_key:
        exported["publicKeyMultibase"] = raw_to_public_key_multibase(
            key_pair.public_key
        )
    if secret_key and key_pair.secret_key:
        exported["secretKeyMultibase"] = raw_to_secret_key_multibase(
            key_pair.secret_key, canonicalize=canonicalize
        )

    if key_pair.revoked:
        exported["revoked"] = key_pair.revoked

    return exported


def import_key_pair(document: dict[str, Any]) -> KeyPair:
    """Import a key pair from a Multikey document.

    Args:
        document: Multikey document with at least ``publicKeyMultibase``

    Returns:
        KeyPair with raw and multibase key material

    Raises:
        MissingFieldError: If ``publicKeyMultibase`` is absent
        InvalidFormatError: If a multibase field is malformed
        InvalidKeySizeError: If decoded keys have the wrong length
    """
    public_key_multibase = document.get("publicKeyMultibase")
    if not public_key_multibase:
        raise MissingFieldError('The "publicKeyMultibase" property is required.')

    secret_key_multibase = document.get("secretKeyMultibase")
    public_key, secret_key = decode_key_pair(
        public_key_multibase, secret_key_multibase
    )

    return KeyPair(
        id=document.get("id"),
        controller=document.get("controller"),
        public_key=public_key,
        secret_key=secret_key,
        public_key_multibase=public_key_multibase,
        secret_key_multibase=secret_key_multibase,
        revoked=document.get("revoked"),
    )


def raw_to_public_key_multibase(public_key: bytes) -> str:
    """Encode raw public key bytes as ``publicKeyMultibase``.

    Raises:
        InvalidKeySizeError: If the key is not 32 bytes
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidKeySizeError("publicKey", len(public_key), PUBLIC_KEY_SIZE)
    return encode_multibase_key(MULTICODEC_PUB_HEADER, bytes(public_key))


def raw_to_secret_key_multibase(
    secret_key: bytes, canonicalize: bool = False
) -> str:
    """Encode raw secret key bytes as ``secretKeyMultibase``.

    A legacy 64 byte secret key keeps its length unless ``canonicalize`` is
    set, in which case only the leading 32 byte seed is encoded.

    Raises:
        InvalidKeySizeError: If the key is neither 32 nor 64 bytes
    """
    if len(secret_key) not in (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE):
        raise InvalidKeySizeError(
            "secretKey", len(secret_key), (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE)
        )
    return encode_multibase_key(
        MULTICODEC_PRIV_HEADER, canonical_secret_key(secret_key, canonicalize)
    )


def canonical_secret_key(secret_key: bytes, canonicalize: bool = True) -> bytes:
    """Return the secret key, truncated to its 32 byte seed if canonicalizing."""
    if canonicalize and len(secret_key) > SECRET_KEY_SIZE:
        return bytes(secret_key[:SECRET_KEY_SIZE])
    return bytes(secret_key)


def build_multikey_document(
    public_key_multibase: str,
    secret_key_multibase: Optional[str] = None,
    id: Optional[str] = None,
    controller: Optional[str] = None,
    revoked: Optional[str] = None,
    context: Any = MULTIKEY_CONTEXT_V1_URL,
) -> dict[str, Any]:
    """Build a fresh Multikey document, leaving out absent fields."""
    document: dict[str, Any] = {"@context": context}
    if id is not None:
        document["id"] = id
    document["type"] = MULTIKEY_TYPE
    if controller is not None:
        document["controller"] = controller
    document["publicKeyMultibase"] = public_key_multibase
    if secret_key_multibase is not None:
        document["secretKeyMultibase"] = secret_key_multibase
    if revoked is not None:
        document["revoked"] = revoked
    return document
