"""Configuration management for the mediamod CLI."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from cli.utils.options_io import load_yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MEDIAMOD_CONFIG"


class MediamodConfig(BaseModel):
    """mediamod CLI configuration."""

    default_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Options applied to every build unless the input overrides them",
    )
    verbose: bool = Field(default=False, description="Verbose output by default")

    class Config:
        """Pydantic config."""

        extra = "ignore"


def get_config_path() -> Path:
    """Get the path to the mediamod config file.

    Returns:
        Path from $MEDIAMOD_CONFIG, or ~/.mediamod/config.yaml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".mediamod" / "config.yaml"


def load_config(path: Optional[Path] = None) -> MediamodConfig:
    """Load configuration from file.

    Args:
        path: Config file to read, defaults to get_config_path()

    Returns:
        MediamodConfig instance with loaded or default values
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return MediamodConfig()

    try:
        with open(config_path, "r") as f:
            data = load_yaml(f) or {}
        return MediamodConfig(**data)
    except (OSError, TypeError, yaml.YAMLError, ValidationError) as e:
        logger.warning("Ignoring malformed config %s: %s", config_path, e)
        return MediamodConfig()


def apply_defaults(options: dict[str, Any], config: MediamodConfig) -> dict[str, Any]:
    """Merge configured default options under the caller's options.

    Keys supplied by the caller always win.
    """
    return {**config.default_options, **options}
