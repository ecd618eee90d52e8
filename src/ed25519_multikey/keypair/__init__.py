"""Key pair generation, loading and signing."""

from .factory import Ed25519Signer, Ed25519Verifier
from .multikey import MultikeyKeyPair, from_document, from_jwk, generate, to_jwk

__all__ = [
    "Ed25519Signer",
    "Ed25519Verifier",
    "MultikeyKeyPair",
    "from_document",
    "from_jwk",
    "generate",
    "to_jwk",
]
