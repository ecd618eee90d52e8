"""Multikey and JWK serialization."""

from .jwk import (
    jwk_to_public_key_bytes,
    jwk_to_public_key_multibase,
    jwk_to_secret_key_bytes,
    jwk_to_secret_key_multibase,
    to_jwk,
)
from .multikey import (
    build_multikey_document,
    export_key_pair,
    import_key_pair,
    raw_to_public_key_multibase,
    raw_to_secret_key_multibase,
)

__all__ = [
    "build_multikey_document",
    "export_key_pair",
    "import_key_pair",
    "jwk_to_public_key_bytes",
    "jwk_to_public_key_multibase",
    "jwk_to_secret_key_bytes",
    "jwk_to_secret_key_multibase",
    "raw_to_public_key_multibase",
    "raw_to_secret_key_multibase",
    "to_jwk",
]
