"""Cryptographic operations using Ed25519."""

import hashlib
import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from .constants import LEGACY_SECRET_KEY_SIZE, PUBLIC_KEY_SIZE, SECRET_KEY_SIZE
from .errors import InvalidKeySizeError

logger = logging.getLogger(__name__)


def generate_key_pair() -> tuple[bytes, bytes]:
    """Generate a new Ed25519 keypair from a random seed.

    Returns:
        Tuple of (secret_key, public_key), both 32 bytes
    """
    private_key = ed25519.Ed25519PrivateKey.generate()
    logger.debug("Generated random Ed25519 key pair")
    return _private_key_to_bytes(private_key), _public_key_bytes(private_key)


def generate_key_pair_from_seed(seed: bytes) -> tuple[bytes, bytes]:
    """Derive an Ed25519 keypair from a 32 byte seed.

    Args:
        seed: Secret seed (32 bytes)

    Returns:
        Tuple of (secret_key, public_key), both 32 bytes

    Raises:
        InvalidKeySizeError: If the seed is not 32 bytes
    """
    if len(seed) != SECRET_KEY_SIZE:
        raise InvalidKeySizeError("seed", len(seed), SECRET_KEY_SIZE)
    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
    return bytes(seed), _public_key_bytes(private_key)


def sign(secret_key: bytes, data: bytes) -> bytes:
    """Sign data with an Ed25519 secret key.

    Args:
        secret_key: 32 byte seed, or the 64 byte seed + public key layout
        data: Message to sign

    Returns:
        Signature bytes (64 bytes)
    """
    if len(secret_key) not in (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE):
        raise InvalidKeySizeError(
            "secretKey", len(secret_key), (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE)
        )
    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(
        bytes(secret_key[:SECRET_KEY_SIZE])
    )
    return private_key.sign(data)


def verify(public_key: bytes, data: bytes, signature: bytes) -> bool:
    """Verify an Ed25519 signature.

    Args:
        public_key: Ed25519 public key (32 bytes)
        data: Original message
        signature: Signature to verify

    Returns:
        True if signature is valid, False otherwise
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidKeySizeError("publicKey", len(public_key), PUBLIC_KEY_SIZE)
    try:
        key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(public_key))
        key.verify(signature, data)
        return True
    except InvalidSignature:
        return False


def sha256_digest(data: bytes) -> bytes:
    """Return the SHA-256 digest of data."""
    return hashlib.sha256(data).digest()


def _private_key_to_bytes(private_key: ed25519.Ed25519PrivateKey) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _public_key_bytes(private_key: ed25519.Ed25519PrivateKey) -> bytes:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw
    )
