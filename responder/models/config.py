"""Configuration model for transformation defaults."""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from responder.core.exceptions import ConfigError


class ResponderConfig(BaseModel):
    """Configuration for building transformations."""

    serializer: str = Field(
        default="success", description="Registered name of the default serializer"
    )
    pagination_query: Dict[str, str] = Field(
        default_factory=dict,
        description="Query parameters appended to generated pagination URLs",
    )
    recursion_limit: int = Field(
        default=10, description="Maximum depth of nested includes", gt=0
    )
    log_level: str = Field(default="INFO", description="Log level for the responder logger")
    json_logs: bool = Field(default=False, description="Emit logs as JSON")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is a known level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        """Create config from a dictionary.

        Raises:
            ConfigError: If validation fails.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Config validation failed: {e}") from e

    @classmethod
    def from_yaml(cls, path: str) -> "ResponderConfig":
        """Load config from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigError: If file not found, invalid YAML or validation fails.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", context={"path": str(path)}) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                "Config file must contain a mapping",
                context={"path": str(path), "type": type(data).__name__},
            )

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(
                f"Config validation failed: {e}", context={"path": str(path)}
            ) from e
