"""Export configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError


class ExportOptions(BaseModel):
    """Defaults for exporting a key pair."""

    public_key: bool = Field(default=True, description="Include the public key")
    secret_key: bool = Field(default=False, description="Include the secret key")
    include_context: bool = Field(
        default=True, description="Include the Multikey @context"
    )
    raw: bool = Field(default=False, description="Return raw key bytes")
    canonicalize: bool = Field(
        default=False, description="Truncate legacy 64 byte secret keys to 32 bytes"
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_config(cls, config_path: str | Path) -> "ExportOptions":
        """Load export options from a YAML configuration file.

        The options may sit at the top level or under an ``export`` key.

        Args:
            config_path: Path to YAML config file

        Returns:
            ExportOptions instance

        Raises:
            ConfigurationError: If config file cannot be loaded or parsed
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load export options: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Export options must be a mapping, got {type(data).__name__}"
            )
        if "export" in data:
            data = data["export"] or {}

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid export options: {e}") from e

    def save(self, config_path: str | Path) -> None:
        """Save export options to a YAML configuration file.

        Args:
            config_path: Path to save YAML config
        """
        with open(Path(config_path), "w") as f:
            yaml.dump(
                {"export": self.model_dump()},
                f,
                default_flow_style=False,
                sort_keys=False,
            )
