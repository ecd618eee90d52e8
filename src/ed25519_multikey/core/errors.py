"""Exception hierarchy for ed25519-multikey."""

from typing import Iterable, Union


class MultikeyError(Exception):
    """Base exception for all ed25519-multikey errors."""

    pass


# Key material errors
class KeyMaterialError(MultikeyError):
    """Base exception for malformed or missing key material."""

    pass


class InvalidFormatError(KeyMaterialError):
    """A multibase, base58 or JWK field is malformed."""

    pass


class InvalidKeySizeError(KeyMaterialError):
    """Key bytes have a length outside the allowed set."""

    def __init__(self, name: str, actual: int, expected: Union[int, Iterable[int]]):
        if isinstance(expected, int):
            expected = (expected,)
        self.name = name
        self.actual = actual
        self.expected = tuple(expected)
        allowed = " or ".join(str(size) for size in self.expected)
        super().__init__(
            f'"{name}" must be {allowed} bytes in length; got {actual} bytes.'
        )


class MissingFieldError(KeyMaterialError):
    """A required document property is absent."""

    pass


class MissingKeyMaterialError(KeyMaterialError):
    """A signer or verifier was requested without the needed key."""

    pass


# Translation errors
class TranslationError(MultikeyError):
    """Base exception for format dispatch and legacy translation errors."""

    pass


class UnsupportedKeyTypeError(TranslationError):
    """No translation is registered for the document type."""

    pass


class UnsupportedContextError(TranslationError):
    """Document context does not match the one expected for its type."""

    pass


class UnrecognizedInputFormatError(TranslationError):
    """Input matches none of the supported key document shapes."""

    pass


# Validation errors
class ValidationError(MultikeyError):
    """Base exception for validation errors."""

    pass


class InvalidMultikeyError(ValidationError):
    """Document claims to be a Multikey but has the wrong type or context."""

    pass


class InvalidArgumentError(ValidationError):
    """Caller passed an unusable combination of options."""

    pass


# Configuration errors
class ConfigurationError(MultikeyError):
    """Configuration file could not be loaded or parsed."""

    pass
