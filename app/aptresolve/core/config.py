"""Configuration for apt invocations.

Settings shared by every command: the default release pin, extra apt-get
options, the subprocess timeout and whether actions run through sudo.

Configuration is stored in ~/.config/aptresolve/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from aptresolve.core.paths import get_config_path

DEFAULT_TIMEOUT_SECONDS = 900


class AptConfig(BaseModel):
    """Settings applied to apt-cache and apt-get invocations.

    Attributes:
        default_release: Release passed as APT::Default-Release (None = no pin).
        options: Extra apt-get options appended to action commands.
        timeout_seconds: Timeout for every subprocess call.
        use_sudo: Prefix apt-get, debconf and dpkg actions with sudo.
    """

    model_config = ConfigDict(extra="forbid")

    default_release: Annotated[
        str | None,
        Field(description="Default release pin (e.g. 'bookworm-backports')"),
    ] = None
    options: Annotated[
        str | None,
        Field(description="Extra options passed to apt-get"),
    ] = None
    timeout_seconds: Annotated[
        int,
        Field(ge=1, le=7200, description="Subprocess timeout in seconds (1-7200)"),
    ] = DEFAULT_TIMEOUT_SECONDS
    use_sudo: Annotated[
        bool,
        Field(description="Run package actions through sudo"),
    ] = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> AptConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AptConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return AptConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> AptConfig:
    """Load configuration, falling back to defaults when no file exists.

    Parse and schema errors still propagate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return AptConfig()


def save_config(config: AptConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The AptConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null, so unset values are left out
    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
