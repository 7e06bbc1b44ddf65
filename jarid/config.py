"""Resolver configuration management."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from jarid.errors import InvalidConfiguration
from jarid.exposers.factory import DEFAULT_EXPOSERS, exposer_factory


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ResolverConfig(BaseModel):
    """Configuration of the identity resolver."""

    exposers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXPOSERS),
        description="Exposer names, in the order they run",
    )
    debug: bool = Field(default=False, description="Log every candidate contributed by an exposer")

    @field_validator("exposers")
    @classmethod
    def check_exposers(cls, v):
        unknown = [name for name in v if not exposer_factory.is_supported(name)]
        if unknown:
            raise ValueError(
                f"Unsupported exposer(s): {unknown}. Allowed: {exposer_factory.get_supported_names()}"
            )
        return [name.lower() for name in v]


class JaridConfig(BaseModel):
    """Complete configuration."""

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        if isinstance(v, str):
            try:
                return LogLevel(v.upper())
            except ValueError:
                raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "JaridConfig":
        """Create config from dictionary."""
        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def load_config(path: Union[str, Path]) -> JaridConfig:
    """Load config from a YAML or JSON file.

    Raises:
        InvalidConfiguration: On an unsupported file type or invalid content.
    """
    path = Path(path)

    if path.suffix.lower() == ".json":
        with open(path) as f:
            raw = json.load(f)
    elif path.suffix.lower() in [".yaml", ".yml"]:
        with open(path) as f:
            raw = yaml.safe_load(f)
    else:
        raise InvalidConfiguration(f"Unsupported config file format: {path.suffix}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Config file {path} must contain a mapping")
    return JaridConfig.from_dict(raw)
