"""Core data models for ed25519-multikey."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import LEGACY_SECRET_KEY_SIZE, PUBLIC_KEY_SIZE, SECRET_KEY_SIZE
from .errors import InvalidFormatError, InvalidKeySizeError


class KeyPair(BaseModel):
    """An Ed25519 key pair with its raw and multibase encodings."""

    # Identification
    id: Optional[str] = Field(default=None, description="Key identifier")
    controller: Optional[str] = Field(
        default=None, description="Identity that controls the key"
    )

    # Raw key material, fixed once the key pair is created
    public_key: bytes = Field(
        frozen=True, description="Ed25519 public key (32 bytes)"
    )
    secret_key: Optional[bytes] = Field(
        default=None,
        frozen=True,
        description="Ed25519 secret key (32 or legacy 64 bytes)",
    )

    # Multibase encodings
    public_key_multibase: Optional[str] = Field(
        default=None,
        frozen=True,
        description="Multibase, multicodec encoded public key",
    )
    secret_key_multibase: Optional[str] = Field(
        default=None,
        frozen=True,
        description="Multibase, multicodec encoded secret key",
    )

    revoked: Optional[str] = Field(default=None, description="Revocation timestamp")

    model_config = {"validate_assignment": True}

    @field_validator("public_key", mode="before")
    @classmethod
    def check_public_key_size(cls, v: Any) -> bytes:
        """Public keys are exactly 32 bytes."""
        if not isinstance(v, (bytes, bytearray)):
            raise InvalidFormatError(
                f'"publicKey" must be bytes, got {type(v).__name__}.'
            )
        if len(v) != PUBLIC_KEY_SIZE:
            raise InvalidKeySizeError("publicKey", len(v), PUBLIC_KEY_SIZE)
        return bytes(v)

    @field_validator("secret_key", mode="before")
    @classmethod
    def check_secret_key_size(cls, v: Any) -> Optional[bytes]:
        """Secret keys are 32 bytes, or 64 bytes in the legacy layout."""
        if v is None:
            return None
        if not isinstance(v, (bytes, bytearray)):
            raise InvalidFormatError(
                f'"secretKey" must be bytes, got {type(v).__name__}.'
            )
        if len(v) not in (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE):
            raise InvalidKeySizeError(
                "secretKey", len(v), (SECRET_KEY_SIZE, LEGACY_SECRET_KEY_SIZE)
            )
        return bytes(v)

    @model_validator(mode="before")
    @classmethod
    def derive_id(cls, data: Any) -> Any:
        """Derive ``id`` from the controller when it is not given."""
        if (
            isinstance(data, dict)
            and data.get("controller")
            and not data.get("id")
            and data.get("public_key_multibase")
        ):
            derived_id = f"{data['controller']}#{data['public_key_multibase']}"
            data = {**data, "id": derived_id}
        return data
