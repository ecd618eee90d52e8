"""Signer and verifier wrappers around a key pair's raw keys."""

from typing import Optional

from ..core import crypto
from ..core.constants import ALGORITHM
from ..core.errors import MissingKeyMaterialError


class Ed25519Signer:
    """Signs data with an Ed25519 secret key."""

    algorithm = ALGORITHM

    def __init__(self, secret_key: Optional[bytes], id: Optional[str] = None):
        """Initialize signer.

        Args:
            secret_key: Ed25519 secret key (32 or legacy 64 bytes)
            id: Key identifier

        Raises:
            MissingKeyMaterialError: If no secret key is given
        """
        if not secret_key:
            raise MissingKeyMaterialError("A secret key is not available for signing.")
        self.id = id
        self._secret_key = secret_key

    def sign(self, data: bytes) -> bytes:
        """Sign data and return the signature bytes."""
        return crypto.sign(self._secret_key, data)


class Ed25519Verifier:
    """Verifies Ed25519 signatures with a public key."""

    algorithm = ALGORITHM

    def __init__(self, public_key: Optional[bytes], id: Optional[str] = None):
        """Initialize verifier.

        Args:
            public_key: Ed25519 public key (32 bytes)
            id: Key identifier

        Raises:
            MissingKeyMaterialError: If no public key is given
        """
        if not public_key:
            raise MissingKeyMaterialError(
                "A public key is not available for verifying."
            )
        self.id = id
        self.public_key = public_key

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Check a signature over data."""
        return crypto.verify(self.public_key, data, signature)
