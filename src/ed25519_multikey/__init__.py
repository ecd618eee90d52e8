"""Ed25519 Multikey - Ed25519 key pairs as Multikey, JWK and legacy verification keys."""

from .core import (
    ExportOptions,
    KeyPair,
    MultikeyError,
    generate_key_pair,
    generate_key_pair_from_seed,
)
from .keypair import (
    Ed25519Signer,
    Ed25519Verifier,
    MultikeyKeyPair,
    from_document,
    from_jwk,
    generate,
    to_jwk,
)
from .serialize import export_key_pair, import_key_pair
from .translate import to_multikey

__version__ = "0.1.0"

__all__ = [
    # Core
    "ExportOptions",
    "KeyPair",
    "MultikeyError",
    "generate_key_pair",
    "generate_key_pair_from_seed",
    # Key pairs
    "Ed25519Signer",
    "Ed25519Verifier",
    "MultikeyKeyPair",
    "from_document",
    "from_jwk",
    "generate",
    "to_jwk",
    # Serialization
    "export_key_pair",
    "import_key_pair",
    # Translation
    "to_multikey",
]
