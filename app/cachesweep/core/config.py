"""Sweep configuration and the optional defaults file.

A run is described by a frozen SweepConfig. Defaults for the target
directory name and the depth bound can be stored in
~/.config/cachesweep/config.toml:

    [sweep]
    dirname = "__pycache__"
    max_depth = 8

Command-line flags always take precedence over the file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cachesweep.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_DIRNAME = "__pycache__"


class SweepDefaults(BaseModel):
    """Values read from the ``[sweep]`` table of the defaults file."""

    model_config = ConfigDict(extra="forbid")

    dirname: str | None = None
    max_depth: int | None = None


class SweepConfig(BaseModel):
    """Configuration for a single sweep run.

    Attributes:
        root: Directory to start from. None means the process working directory.
        dirname: Directory name to remove (compared case-insensitively).
        max_depth: Inclusive depth bound for expansion. None means unbounded.
        dry_run: Report matches without deleting anything.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: Path | None = None
    dirname: Annotated[
        str,
        Field(min_length=1, description="Target directory name"),
    ] = DEFAULT_DIRNAME
    max_depth: int | None = None
    dry_run: bool = False

    @field_validator("dirname")
    @classmethod
    def validate_dirname(cls, v: str) -> str:
        """Reject names that could never equal a single path component."""
        if "/" in v or "\\" in v:
            msg = f"dirname must be a single directory name, got '{v}'"
            raise ValueError(msg)
        if v in (".", ".."):
            msg = f"dirname cannot be '{v}'"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is missing."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_defaults(path: Path | None = None) -> SweepDefaults:
    """Load sweep defaults from a TOML file.

    Args:
        path: Explicit config file. If None, the XDG default path is used
            and a missing file yields empty defaults.

    Returns:
        Validated SweepDefaults.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        return SweepDefaults()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    logger.debug("Loaded sweep defaults from %s", config_path)

    try:
        return SweepDefaults.model_validate(data.get("sweep", {}))
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def build_config(
    *,
    root: Path | None = None,
    dirname: str | None = None,
    max_depth: int | None = None,
    dry_run: bool = False,
    defaults: SweepDefaults | None = None,
) -> SweepConfig:
    """Merge command-line values over file defaults into a SweepConfig.

    Raises:
        ConfigError: If the merged values are invalid.
    """
    defaults = defaults or SweepDefaults()
    try:
        return SweepConfig(
            root=root,
            dirname=dirname if dirname is not None else (defaults.dirname or DEFAULT_DIRNAME),
            max_depth=max_depth if max_depth is not None else defaults.max_depth,
            dry_run=dry_run,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid sweep configuration: {e}") from e
