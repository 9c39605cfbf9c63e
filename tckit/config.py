"""
tckit.config - YAML config loading and validation.

A tckit.yaml file supplies defaults for the command-line interface, most
usefully the frame rate. The library functions never fall back to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from tckit.exceptions import ConfigError

CONFIG_FILENAME = "tckit.yaml"


class TckitConfig(BaseModel):
    """Resolved configuration for the tckit CLI."""

    frame_rate: float | None = Field(default=None, gt=0.0)
    drop_frame: bool | None = None
    verbose: bool = False


def find_config_file(start: Path | None = None) -> Path | None:
    """Find tckit.yaml in the start directory or any parent."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path) -> TckitConfig:
    """Load and validate configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is not a mapping or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}")

    with open(path) as f:
        try:
            raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")

    try:
        return TckitConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def create_default_config(frame_rate: float | None = None) -> dict[str, Any]:
    """Create a default config dict, optionally with a frame rate."""
    return {
        "frame_rate": frame_rate,
        "drop_frame": None,
        "verbose": False,
    }


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
