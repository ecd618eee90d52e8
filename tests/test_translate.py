"""Tests for legacy verification key translation."""

import base58
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ed25519_multikey.core.constants import (
    ED25519_SIGNATURE_2018_V1_URL,
    ED25519_SIGNATURE_2020_V1_URL,
    MULTIKEY_CONTEXT_V1_URL,
)
from ed25519_multikey.core.errors import (
    InvalidFormatError,
    MissingFieldError,
    UnsupportedContextError,
    UnsupportedKeyTypeError,
)
from ed25519_multikey.core.multibase import decode_key_pair, encode_key_pair
from ed25519_multikey.translate import KEY_PAIR_TRANSLATIONS, to_multikey

SEED = b"\x01" * 32
CONTROLLER = "did:example:1234"


def _public_key(seed: bytes) -> bytes:
    return (
        ed25519.Ed25519PrivateKey.from_private_bytes(seed)
        .public_key()
        .public_bytes(
            encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw
        )
    )


def _key_2018(**extra) -> dict:
    public_key = _public_key(SEED)
    return {
        "id": f"{CONTROLLER}#key-2018",
        "type": "Ed25519VerificationKey2018",
        "controller": CONTROLLER,
        "publicKeyBase58": base58.b58encode(public_key).decode(),
        "privateKeyBase58": base58.b58encode(SEED + public_key).decode(),
        **extra,
    }


def _key_2020(**extra) -> dict:
    public_key = _public_key(SEED)
    encoded = encode_key_pair(public_key=public_key, secret_key=SEED + public_key)
    return {
        "id": f"{CONTROLLER}#key-2020",
        "type": "Ed25519VerificationKey2020",
        "controller": CONTROLLER,
        "publicKeyMultibase": encoded["publicKeyMultibase"],
        "privateKeyMultibase": encoded["secretKeyMultibase"],
        **extra,
    }


def test_registry_has_both_legacy_types():
    """Test the registered legacy types and their contexts."""
    assert (
        KEY_PAIR_TRANSLATIONS["Ed25519VerificationKey2018"].context_url
        == ED25519_SIGNATURE_2018_V1_URL
    )
    assert (
        KEY_PAIR_TRANSLATIONS["Ed25519VerificationKey2020"].context_url
        == ED25519_SIGNATURE_2020_V1_URL
    )


def test_translate_2018_reencodes_key_material():
    """Test that raw base58 keys gain multicodec headers."""
    legacy = _key_2018(revoked="2020-12-17T00:00:00Z")

    multikey = to_multikey(legacy)

    assert multikey["type"] == "Multikey"
    assert multikey["@context"] == MULTIKEY_CONTEXT_V1_URL
    assert multikey["id"] == legacy["id"]
    assert multikey["controller"] == CONTROLLER
    assert multikey["revoked"] == "2020-12-17T00:00:00Z"
    public_key, secret_key = decode_key_pair(
        multikey["publicKeyMultibase"], multikey["secretKeyMultibase"]
    )
    assert public_key == _public_key(SEED)
    assert secret_key == SEED + public_key


def test_translate_2018_public_only():
    """Test that a 2018 key without privateKeyBase58 yields no secret."""
    legacy = _key_2018()
    del legacy["privateKeyBase58"]

    multikey = to_multikey(legacy)

    assert "secretKeyMultibase" not in multikey


def test_translate_2018_requires_public_key():
    """Test that publicKeyBase58 is required."""
    legacy = _key_2018()
    del legacy["publicKeyBase58"]

    with pytest.raises(MissingFieldError):
        to_multikey(legacy)


def test_translate_2018_invalid_base58():
    """Test that malformed base58 is rejected."""
    with pytest.raises(InvalidFormatError, match="publicKeyBase58"):
        to_multikey(_key_2018(publicKeyBase58="0OIl"))


def test_translate_2020_renames_private_key():
    """Test that privateKeyMultibase becomes secretKeyMultibase unchanged."""
    legacy = _key_2020()

    multikey = to_multikey(legacy)

    assert multikey == {
        "@context": MULTIKEY_CONTEXT_V1_URL,
        "id": legacy["id"],
        "type": "Multikey",
        "controller": CONTROLLER,
        "publicKeyMultibase": legacy["publicKeyMultibase"],
        "secretKeyMultibase": legacy["privateKeyMultibase"],
    }


def test_translation_does_not_modify_input():
    """Test that the legacy document is left untouched."""
    legacy = _key_2020()
    original = dict(legacy)

    to_multikey(legacy)

    assert legacy == original


def test_context_accepted_as_string_or_list():
    """Test explicit contexts matching the legacy type."""
    as_string = _key_2018(**{"@context": ED25519_SIGNATURE_2018_V1_URL})
    as_list = _key_2018(
        **{"@context": ["https://www.w3.org/ns/did/v1", ED25519_SIGNATURE_2018_V1_URL]}
    )

    assert to_multikey(as_string)["type"] == "Multikey"
    assert to_multikey(as_list)["type"] == "Multikey"


def test_mismatched_context_rejected():
    """Test that a 2020 context on a 2018 key is rejected."""
    legacy = _key_2018(**{"@context": ED25519_SIGNATURE_2020_V1_URL})

    with pytest.raises(UnsupportedContextError):
        to_multikey(legacy)


def test_empty_context_list_rejected():
    """Test that an empty context list is not replaced by the default."""
    legacy = _key_2018(**{"@context": []})

    with pytest.raises(UnsupportedContextError):
        to_multikey(legacy)


@pytest.mark.parametrize(
    "key_type", [["Ed25519VerificationKey2020"], {"name": "Ed25519VerificationKey2018"}, 2020]
)
def test_non_string_key_type(key_type):
    """Test that a type which is not a string is unsupported."""
    with pytest.raises(UnsupportedKeyTypeError):
        to_multikey(_key_2020(type=key_type))


def test_unsupported_key_type():
    """Test that unknown types name the type in the error."""
    with pytest.raises(UnsupportedKeyTypeError, match="X25519KeyAgreementKey2019"):
        to_multikey({"type": "X25519KeyAgreementKey2019"})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
