"""Registry of translations from legacy verification keys to Multikey."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import base58 as b58

from ..core.constants import (
    ED25519_SIGNATURE_2018_V1_URL,
    ED25519_SIGNATURE_2020_V1_URL,
    ED25519_VERIFICATION_KEY_2018_TYPE,
    ED25519_VERIFICATION_KEY_2020_TYPE,
)
from ..core.errors import InvalidFormatError, MissingFieldError
from ..core.multibase import encode_key_pair
from ..serialize.multikey import build_multikey_document


Document = dict[str, Any]


@dataclass(frozen=True)
class KeyPairTranslation:
    """Expected context and translation function for a legacy key type."""

    context_url: str
    translate: Callable[[Document], Document]


def translate_ed25519_verification_key_2020(key_pair: Document) -> Document:
    """Relabel an Ed25519VerificationKey2020 document as a Multikey.

    The key material is already multibase encoded; only the secret key
    property is renamed from ``privateKeyMultibase``.
    """
    return build_multikey_document(
        public_key_multibase=key_pair.get("publicKeyMultibase"),
        secret_key_multibase=key_pair.get("privateKeyMultibase"),
        id=key_pair.get("id"),
        controller=key_pair.get("controller"),
        revoked=key_pair.get("revoked"),
    )


def translate_ed25519_verification_key_2018(key_pair: Document) -> Document:
    """Re-encode an Ed25519VerificationKey2018 document as a Multikey.

    2018 keys are plain base58 without a multicodec header, so they are
    decoded and encoded again with the Ed25519 multicodec headers.
    """
    if not key_pair.get("publicKeyBase58"):
        raise MissingFieldError('The "publicKeyBase58" property is required.')

    public_key = _decode_base58(key_pair["publicKeyBase58"], "publicKeyBase58")
    secret_key: Optional[bytes] = None
    if key_pair.get("privateKeyBase58"):
        secret_key = _decode_base58(key_pair["privateKeyBase58"], "privateKeyBase58")

    encoded = encode_key_pair(public_key=public_key, secret_key=secret_key)
    return build_multikey_document(
        public_key_multibase=encoded["publicKeyMultibase"],
        secret_key_multibase=encoded.get("secretKeyMultibase"),
        id=key_pair.get("id"),
        controller=key_pair.get("controller"),
        revoked=key_pair.get("revoked"),
    )


def _decode_base58(value: Any, field: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidFormatError(f'"{field}" must be a base58-encoded string.')
    try:
        return b58.b58decode(value)
    except ValueError as e:
        raise InvalidFormatError(f'"{field}" is not valid base58: {e}') from e


KEY_PAIR_TRANSLATIONS: dict[str, KeyPairTranslation] = {
    ED25519_VERIFICATION_KEY_2020_TYPE: KeyPairTranslation(
        context_url=ED25519_SIGNATURE_2020_V1_URL,
        translate=translate_ed25519_verification_key_2020,
    ),
    ED25519_VERIFICATION_KEY_2018_TYPE: KeyPairTranslation(
        context_url=ED25519_SIGNATURE_2018_V1_URL,
        translate=translate_ed25519_verification_key_2018,
    ),
}
