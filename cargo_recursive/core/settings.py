"""
Settings for cargo-recursive.

Configuration comes from three layers, lowest priority first: model
defaults, a TOML file, and CARGO_RECURSIVE_<SECTION>__<FIELD> environment
variables. Command-line flags are applied on top by the CLI.

The TOML file is either a dedicated .cargo-recursive.toml or the
[workspace.metadata.recursive] / [package.metadata.recursive] table of a
Cargo.toml, whichever is found first walking up from the traversal root.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import CommandConfig, LoggingConfig, OutputConfig, TraversalConfig

CONFIG_FILE_NAME = ".cargo-recursive.toml"
CARGO_MANIFEST = "Cargo.toml"
METADATA_KEY = "recursive"


def _debug(message: str, *args: Any) -> None:
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    resolve_or_default(ILogger, NullLogger).debug(message, *args)  # type: ignore[type-abstract]


def _metadata_table(manifest: dict[str, Any]) -> dict[str, Any] | None:
    for section in ("workspace", "package"):
        table = manifest.get(section, {}).get("metadata", {}).get(METADATA_KEY)
        if isinstance(table, dict):
            return table
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _provides_config(directory: Path) -> Path | None:
    """Return the file in directory that carries configuration, if any."""
    dedicated = directory / CONFIG_FILE_NAME
    manifest = directory / CARGO_MANIFEST
    try:
        if dedicated.is_file():
            return dedicated
        if not manifest.is_file():
            return None
        return manifest if _metadata_table(_read_toml(manifest)) is not None else None
    except (OSError, tomllib.TOMLDecodeError) as e:
        # A broken manifest of some ancestor crate is not our config file
        _debug("Skipping %s while looking for configuration: %s", directory, e)
        return None


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find the nearest config file at or above start_dir (default: cwd).

    Returns:
        Path to a .cargo-recursive.toml or a Cargo.toml with a
        metadata.recursive table, or None.
    """
    start = Path(start_dir).resolve() if start_dir else Path.cwd()
    for directory in (start, *start.parents):
        found = _provides_config(directory)
        if found is not None:
            return found
    return None


def read_config_file(path: Path) -> tuple[dict[str, Any], str | None]:
    """
    Read configuration values from path.

    Returns:
        (values, error): values is empty and error set if the file could
        not be read or parsed.
    """
    try:
        data = _read_toml(path)
    except tomllib.TOMLDecodeError as e:
        return {}, f"Failed to parse config file {path}: {e}"
    except OSError as e:
        return {}, f"Failed to read config file {path}: {e}"

    if path.name == CARGO_MANIFEST:
        data = _metadata_table(data) or {}
    return {k: v for k, v in data.items() if not k.startswith("_")}, None


class RecursiveSettings(BaseSettings):
    """
    Merged cargo-recursive configuration.

    Values passed to the constructor are the config file contents; the
    environment takes precedence over them.
    """

    model_config = SettingsConfigDict(
        env_prefix="CARGO_RECURSIVE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    traversal: TraversalConfig = TraversalConfig()
    command: CommandConfig = CommandConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win: environment over file values
        return env_settings, init_settings

    @property
    def config_file(self) -> str | None:
        """Path of the config file that was applied, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why a discovered config file was ignored, if it was."""
        return self._config_error


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> RecursiveSettings:
    """
    Load settings for a traversal rooted at start_dir.

    Args:
        config_path: Explicit config file; disables discovery
        start_dir: Directory to search upwards from (default: cwd)

    Raises:
        ConfigFileError: If config_path does not exist or cannot be read
        ConfigValidationError: If a configured value is invalid
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigFileError("Config file not found", file_path=str(config_path))
        path: Path | None = config_path
    else:
        path = find_config_file(start_dir)

    values: dict[str, Any] = {}
    error = None
    if path is not None:
        values, error = read_config_file(path)
        if error is not None and config_path is not None:
            raise ConfigFileError(error, file_path=str(config_path))

    try:
        settings = RecursiveSettings(**values)
    except ValidationError as e:
        raise ConfigValidationError("Invalid configuration", cause=e) from e

    if path is not None and error is None:
        settings._config_file = str(path)
    settings._config_error = error
    return settings
