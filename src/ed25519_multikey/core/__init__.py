"""Core functionality for ed25519-multikey."""

from .config import ExportOptions
from .crypto import (
    generate_key_pair,
    generate_key_pair_from_seed,
    sha256_digest,
    sign,
    verify,
)
from .errors import (
    MultikeyError,
    KeyMaterialError,
    InvalidFormatError,
    InvalidKeySizeError,
    MissingFieldError,
    MissingKeyMaterialError,
    TranslationError,
    UnsupportedKeyTypeError,
    UnsupportedContextError,
    UnrecognizedInputFormatError,
    ValidationError,
    InvalidMultikeyError,
    InvalidArgumentError,
    ConfigurationError,
)
from .models import KeyPair
from .multibase import decode_key_pair, encode_key_pair, encode_multibase_key

__all__ = [
    # Config
    "ExportOptions",
    # Crypto
    "generate_key_pair",
    "generate_key_pair_from_seed",
    "sha256_digest",
    "sign",
    "verify",
    # Errors
    "MultikeyError",
    "KeyMaterialError",
    "InvalidFormatError",
    "InvalidKeySizeError",
    "MissingFieldError",
    "MissingKeyMaterialError",
    "TranslationError",
    "UnsupportedKeyTypeError",
    "UnsupportedContextError",
    "UnrecognizedInputFormatError",
    "ValidationError",
    "InvalidMultikeyError",
    "InvalidArgumentError",
    "ConfigurationError",
    # Models
    "KeyPair",
    # Multibase
    "decode_key_pair",
    "encode_key_pair",
    "encode_multibase_key",
]
