"""Tests for Multikey export and import."""

import json

import base58
import pytest

from ed25519_multikey import generate
from ed25519_multikey.core.constants import MULTIKEY_CONTEXT_V1_URL
from ed25519_multikey.core.errors import (
    InvalidArgumentError,
    InvalidFormatError,
    InvalidKeySizeError,
    MissingFieldError,
)
from ed25519_multikey.core.models import KeyPair
from ed25519_multikey.core.multibase import encode_key_pair
from ed25519_multikey.serialize import (
    export_key_pair,
    import_key_pair,
    raw_to_public_key_multibase,
    raw_to_secret_key_multibase,
)

SEED = b"\x01" * 32


def _legacy_key_pair() -> KeyPair:
    """Key pair holding a 64 byte seed + public key secret."""
    key_pair = generate(seed=SEED, controller="did:example:1234")
    return KeyPair(
        id=key_pair.id,
        controller=key_pair.controller,
        public_key=key_pair.public_key,
        secret_key=key_pair.secret_key + key_pair.public_key,
    )


def test_export_requires_public_or_secret_key():
    """Test that exporting nothing is rejected."""
    key_pair = generate(seed=SEED)

    with pytest.raises(InvalidArgumentError):
        export_key_pair(key_pair, public_key=False, secret_key=False)


def test_export_fields_and_order():
    """Test the exported Multikey document."""
    generated = generate(seed=SEED, controller="did:example:1234")
    key_pair = KeyPair(**{**generated.model_dump(), "revoked": "2020-12-17T00:00:00Z"})

    exported = export_key_pair(key_pair, public_key=True, secret_key=True)

    assert list(exported) == [
        "@context",
        "id",
        "controller",
        "type",
        "publicKeyMultibase",
        "secretKeyMultibase",
        "revoked",
    ]
    assert exported["@context"] == MULTIKEY_CONTEXT_V1_URL
    assert exported["type"] == "Multikey"
    assert exported["id"] == f"did:example:1234#{key_pair.public_key_multibase}"
    assert exported["publicKeyMultibase"] == key_pair.public_key_multibase
    assert exported["secretKeyMultibase"] == key_pair.secret_key_multibase
    assert exported["revoked"] == "2020-12-17T00:00:00Z"


def test_export_public_key_only_without_context():
    """Test that flags control which fields are emitted."""
    key_pair = generate(seed=SEED)

    exported = export_key_pair(key_pair, public_key=True, include_context=False)

    assert exported == {
        "type": "Multikey",
        "publicKeyMultibase": key_pair.public_key_multibase,
    }


def test_export_secret_key_only():
    """Test exporting the secret key without the public key."""
    key_pair = generate(seed=SEED)

    exported = export_key_pair(key_pair, public_key=False, secret_key=True)

    assert "publicKeyMultibase" not in exported
    assert exported["secretKeyMultibase"] == key_pair.secret_key_multibase


def test_import_requires_public_key_multibase():
    """Test the error raised when publicKeyMultibase is absent."""
    with pytest.raises(MissingFieldError) as exc_info:
        import_key_pair({})

    assert str(exc_info.value) == 'The "publicKeyMultibase" property is required.'


def test_import_derives_id_from_controller():
    """Test that id defaults to controller#publicKeyMultibase."""
    public_key_multibase = "z6MknCCLeeHBUaHu4aHSVLDCYQW9gjVJ7a63FpMvtuVMy53T"

    key_pair = import_key_pair(
        {"controller": "did:example:1234", "publicKeyMultibase": public_key_multibase}
    )

    assert key_pair.id == f"did:example:1234#{public_key_multibase}"
    assert key_pair.secret_key is None
    assert len(key_pair.public_key) == 32


def test_export_import_inverse():
    """Test that importing an export reproduces the raw keys and document."""
    key_pair = generate(controller="did:example:1234")
    exported = export_key_pair(
        key_pair, public_key=True, secret_key=True, canonicalize=True
    )

    imported = import_key_pair(exported)
    assert imported.public_key == key_pair.public_key
    assert imported.secret_key == key_pair.secret_key

    reexported = export_key_pair(
        imported, public_key=True, secret_key=True, canonicalize=True
    )
    assert json.dumps(reexported) == json.dumps(exported)


def test_canonicalize_truncates_legacy_secret_key():
    """Test that a 64 byte secret key canonicalizes to its seed."""
    key_pair = _legacy_key_pair()

    canonical = export_key_pair(key_pair, secret_key=True, canonicalize=True)
    legacy = export_key_pair(key_pair, secret_key=True, canonicalize=False)

    canonical_bytes = base58.b58decode(canonical["secretKeyMultibase"][1:])
    legacy_bytes = base58.b58decode(legacy["secretKeyMultibase"][1:])
    assert canonical_bytes == b"\x80\x26" + SEED
    assert legacy_bytes == b"\x80\x26" + key_pair.secret_key
    assert len(legacy_bytes) == 66


def test_legacy_secret_key_import_export_is_byte_identical():
    """Test that a 64 byte secret key re-exports unchanged without canonicalizing."""
    key_pair = _legacy_key_pair()
    exported = export_key_pair(key_pair, secret_key=True)

    imported = import_key_pair(exported)

    assert imported.secret_key == key_pair.secret_key
    assert export_key_pair(imported, secret_key=True) == exported


@pytest.mark.parametrize("size", [33, 63, 65])
def test_secret_key_invalid_sizes(size):
    """Test that secret keys must be 32 or 64 bytes."""
    with pytest.raises(InvalidKeySizeError) as exc_info:
        raw_to_secret_key_multibase(b"\x01" * size)

    assert exc_info.value.actual == size
    assert exc_info.value.expected == (32, 64)
    assert str(size) in str(exc_info.value)


@pytest.mark.parametrize(
    "field, value",
    [
        ("public_key", "a" * 32),
        ("public_key", [1] * 32),
        ("secret_key", "s" * 32),
    ],
)
def test_key_pair_rejects_non_bytes_keys(field, value):
    """Test that raw keys must be bytes rather than coercible values."""
    fields = {"public_key": b"\x02" * 32, field: value}

    with pytest.raises(InvalidFormatError, match="must be bytes"):
        KeyPair(**fields)


@pytest.mark.parametrize("size", [33, 63, 65])
def test_import_rejects_invalid_secret_key_size(size):
    """Test that importing a wrongly sized secret key fails."""
    encoded = encode_key_pair(public_key=b"\x02" * 32, secret_key=b"\x01" * size)

    with pytest.raises(InvalidKeySizeError):
        import_key_pair(encoded)


def test_import_rejects_invalid_public_key_size():
    """Test that importing a 31 byte public key fails."""
    encoded = encode_key_pair(public_key=b"\x02" * 31)

    with pytest.raises(InvalidKeySizeError) as exc_info:
        import_key_pair(encoded)

    assert exc_info.value.actual == 31
    assert exc_info.value.expected == (32,)


def test_raw_to_public_key_multibase():
    """Test the standalone public key conversion."""
    key_pair = generate(seed=SEED)

    assert raw_to_public_key_multibase(key_pair.public_key) == key_pair.public_key_multibase
    with pytest.raises(InvalidKeySizeError):
        raw_to_public_key_multibase(b"\x01" * 31)


def test_raw_to_secret_key_multibase_canonicalize():
    """Test the standalone secret key conversion."""
    key_pair = generate(seed=SEED)
    legacy_secret = key_pair.secret_key + key_pair.public_key

    assert (
        raw_to_secret_key_multibase(legacy_secret, canonicalize=True)
        == key_pair.secret_key_multibase
    )
    assert raw_to_secret_key_multibase(legacy_secret) != key_pair.secret_key_multibase


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
