"""Ed25519 Multikey key pairs: generation, loading and export."""

import logging
from typing import Any, Optional

from ..core import crypto
from ..core.config import ExportOptions
from ..core.constants import JSON_WEB_KEY_TYPES, MULTIKEY_CONTEXT_V1_URL, MULTIKEY_TYPE
from ..core.errors import (
    InvalidFormatError,
    InvalidMultikeyError,
    UnrecognizedInputFormatError,
)
from ..core.models import KeyPair
from ..core.multibase import encode_key_pair
from ..serialize import jwk as jwk_serializer
from ..serialize.multikey import (
    build_multikey_document,
    canonical_secret_key,
    export_key_pair,
    import_key_pair,
)
from ..translate.translator import includes_context, to_multikey
from .factory import Ed25519Signer, Ed25519Verifier

logger = logging.getLogger(__name__)


class MultikeyKeyPair(KeyPair):
    """Key pair with export, signing and verification capabilities."""

    def export(
        self,
        options: Optional[ExportOptions] = None,
        *,
        public_key: Optional[bool] = None,
        secret_key: Optional[bool] = None,
        include_context: Optional[bool] = None,
        raw: Optional[bool] = None,
        canonicalize: Optional[bool] = None,
    ) -> dict[str, Any]:
        """Export the key pair.

        Keyword arguments override the matching fields of ``options``, which
        defaults to ``ExportOptions()`` (public key only, with context).

        Returns:
            Multikey document, or ``{"public_key": ..., "secret_key": ...}``
            with raw bytes when ``raw`` is set
        """
        overrides = {
            "public_key": public_key,
            "secret_key": secret_key,
            "include_context": include_context,
            "raw": raw,
            "canonicalize": canonicalize,
        }
        options = (options or ExportOptions()).model_copy(
            update={k: v for k, v in overrides.items() if v is not None}
        )

        if options.raw:
            result: dict[str, Any] = {}
            if options.public_key:
                result["public_key"] = bytes(self.public_key)
            if options.secret_key and self.secret_key:
                result["secret_key"] = canonical_secret_key(
                    self.secret_key, options.canonicalize
                )
            return result

        return export_key_pair(
            self,
            public_key=options.public_key,
            secret_key=options.secret_key,
            include_context=options.include_context,
            canonicalize=options.canonicalize,
        )

    def signer(self) -> Ed25519Signer:
        """Create a signer for this key pair."""
        return Ed25519Signer(secret_key=self.secret_key, id=self.id)

    def verifier(self) -> Ed25519Verifier:
        """Create a verifier for this key pair."""
        return Ed25519Verifier(public_key=self.public_key, id=self.id)

    def to_jwk(self, secret_key: bool = False) -> dict[str, str]:
        """Convert this key pair to a JWK."""
        return jwk_serializer.to_jwk(self, secret_key=secret_key)


def generate(
    id: Optional[str] = None,
    controller: Optional[str] = None,
    seed: Optional[bytes] = None,
) -> MultikeyKeyPair:
    """Generate a new key pair, deterministically when a seed is given.

    Args:
        id: Key identifier; derived from ``controller`` when omitted
        controller: Identity that controls the key
        seed: 32 byte seed

    Returns:
        MultikeyKeyPair
    """
    if seed is not None:
        secret_key, public_key = crypto.generate_key_pair_from_seed(seed)
    else:
        secret_key, public_key = crypto.generate_key_pair()

    encoded = encode_key_pair(public_key=public_key, secret_key=secret_key)
    key_pair = MultikeyKeyPair(
        id=id,
        controller=controller,
        public_key=public_key,
        secret_key=secret_key,
        public_key_multibase=encoded["publicKeyMultibase"],
        secret_key_multibase=encoded["secretKeyMultibase"],
    )
    logger.debug("Generated key pair %s", key_pair.public_key_multibase)
    return key_pair


def from_document(document: Any) -> MultikeyKeyPair:
    """Load a key pair from a Multikey, JWK or legacy key document.

    Documents are classified in this order:

    1. ``type`` is ``"Multikey"``
    2. ``publicKeyJwk`` is present
    3. any other ``type`` is translated from its legacy format
    4. no ``type`` but ``publicKeyMultibase`` is present, treated as Multikey

    Raises:
        UnrecognizedInputFormatError: If the document matches none of these
        InvalidMultikeyError: If a Multikey has the wrong type or context
        UnsupportedKeyTypeError: If a legacy type has no translation
    """
    if not isinstance(document, dict):
        raise UnrecognizedInputFormatError(
            f"Key document must be an object, got {type(document).__name__}."
        )

    key_type = document.get("type")
    if key_type == MULTIKEY_TYPE:
        return _from_multikey(document)

    if document.get("publicKeyJwk"):
        logger.debug("Loading key pair from publicKeyJwk")
        id = controller = None
        if key_type in JSON_WEB_KEY_TYPES:
            id = document.get("id")
            controller = document.get("controller")
        return from_jwk(
            document["publicKeyJwk"], secret_key=False, id=id, controller=controller
        )

    if key_type:
        return _create_key_pair(to_multikey(document))

    if "publicKeyMultibase" in document:
        return _from_multikey({**document, "type": MULTIKEY_TYPE})

    raise UnrecognizedInputFormatError(
        'Key document has no "type", "publicKeyJwk" or "publicKeyMultibase".'
    )


def from_jwk(
    jwk: dict[str, Any],
    secret_key: bool = False,
    id: Optional[str] = None,
    controller: Optional[str] = None,
) -> MultikeyKeyPair:
    """Load a key pair from an Ed25519 JWK.

    Args:
        jwk: JWK with ``kty`` ``"OKP"`` and ``crv`` ``"Ed25519"``
        secret_key: Also import ``d`` when the JWK carries it
        id: Key identifier
        controller: Identity that controls the key

    Returns:
        MultikeyKeyPair

    Raises:
        InvalidFormatError: If the JWK is not an object or has malformed fields
    """
    if not isinstance(jwk, dict):
        raise InvalidFormatError('"jwk" must be an object.')
    secret_key_multibase = None
    if secret_key and jwk.get("d"):
        secret_key_multibase = jwk_serializer.jwk_to_secret_key_multibase(jwk)
    document = build_multikey_document(
        public_key_multibase=jwk_serializer.jwk_to_public_key_multibase(jwk),
        secret_key_multibase=secret_key_multibase,
        id=id if isinstance(id, str) else None,
        controller=controller if isinstance(controller, str) else None,
    )
    return from_document(document)


def to_jwk(key_pair: KeyPair, secret_key: bool = False) -> dict[str, str]:
    """Convert a key pair to an Ed25519 JWK."""
    return jwk_serializer.to_jwk(key_pair, secret_key=secret_key)


def _from_multikey(document: dict[str, Any]) -> MultikeyKeyPair:
    document = {**document}
    if document.get("@context") in (None, ""):
        document["@context"] = MULTIKEY_CONTEXT_V1_URL
    _assert_multikey(document)
    return _create_key_pair(document)


def _assert_multikey(document: dict[str, Any]) -> None:
    if document.get("type") != MULTIKEY_TYPE:
        raise InvalidMultikeyError('"key" must be a Multikey with type "Multikey".')
    if not includes_context(document.get("@context"), MULTIKEY_CONTEXT_V1_URL):
        raise InvalidMultikeyError(
            f'"key" must be a Multikey with context "{MULTIKEY_CONTEXT_V1_URL}".'
        )


def _create_key_pair(document: dict[str, Any]) -> MultikeyKeyPair:
    key_pair = import_key_pair(document)
    return MultikeyKeyPair(**key_pair.model_dump())
