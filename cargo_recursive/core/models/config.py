"""
Configuration models.

Provides Pydantic models for each section of the cargo-recursive
configuration file.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import RecursiveBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_DEPTH = 64
DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_BINARY = "cargo"


class ConfigBaseModel(RecursiveBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env var strings
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class TraversalConfig(ConfigBaseModel):
    """Traversal configuration section."""

    depth: Annotated[int, Field(ge=0)] = DEFAULT_DEPTH
    manifest: Annotated[str, Field(min_length=1)] = DEFAULT_MANIFEST

    @field_validator("manifest")
    @classmethod
    def validate_manifest(cls, v: str) -> str:
        """The marker must be a bare file name, not a path."""
        if "/" in v or "\\" in v:
            raise ValueError("manifest must be a file name, not a path")
        return v


class CommandConfig(ConfigBaseModel):
    """Command configuration section."""

    default_binary: Annotated[str, Field(min_length=1)] = DEFAULT_BINARY
    exit_on_error: bool = False


class OutputConfig(ConfigBaseModel):
    """Output configuration section."""

    suppress: bool = False
    color: bool = True


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept 'DEBUG', 'Info', ..."""
        return v.lower() if isinstance(v, str) else v
