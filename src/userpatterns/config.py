"""Allow-list configuration file loading and validation."""

from __future__ import annotations

import os

import yaml
from pydantic import BaseModel, ValidationError

from userpatterns.errors import ConfigError, ConfigNotFoundError

__all__ = ["AllowListConfig", "load_config"]


class AllowListConfig(BaseModel):
    """Parsed contents of an allow-list YAML file."""

    version: str = "1.0"
    description: str = ""
    patterns: list[str]


def load_config(yaml_path: str) -> AllowListConfig:
    """Load and validate an allow-list YAML file.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the YAML is malformed or does not match the schema.
    """
    if not os.path.isfile(yaml_path):
        raise ConfigNotFoundError(config_path=yaml_path)

    with open(yaml_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Allow-list config must be a mapping, got {type(data).__name__}"
        )

    try:
        return AllowListConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid allow-list config in {yaml_path}: {e}", cause=e) from e
