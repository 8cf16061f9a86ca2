"""
Parser configuration

Settings the factory manager hands to every wrapper it builds.
Configuration can come from defaults, a JSON/YAML file or environment
variables prefixed with JSONAPI_CLIENT_.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..exceptions.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONAPI_CLIENT_"


def _to_bool(value: str) -> bool:
    return value.lower() in ["true", "1", "yes"]


class ParserConfig(BaseModel):
    """
    Parser settings

    - optional_item_id: resource objects may omit "id" (request bodies
      that create a new resource)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    optional_item_id: bool = False


def get_default_config() -> ParserConfig:
    """Get default parser configuration"""
    return ParserConfig()


def _config_from_dict(data: Dict[str, Any]) -> ParserConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Parser configuration has to be a mapping, got {type(data).__name__}"
        )
    try:
        return ParserConfig(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid parser configuration: {e}", {"values": data}) from e


def load_config_from_file(config_path: Union[str, Path]) -> ParserConfig:
    """
    Load configuration from a JSON or YAML file

    Args:
        config_path: Path to configuration file

    Returns:
        ParserConfig instance
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.suffix.lower() in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif config_path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    logger.debug("Loaded parser configuration from %s", config_path)
    return _config_from_dict(data or {})


def load_config_from_env() -> ParserConfig:
    """
    Load configuration from environment variables

    For example: JSONAPI_CLIENT_OPTIONAL_ITEM_ID=true
    """
    env_mappings = {
        f"{ENV_PREFIX}OPTIONAL_ITEM_ID": ("optional_item_id", _to_bool),
    }

    values: Dict[str, Any] = {}
    for env_var, (attr_name, converter) in env_mappings.items():
        value = os.getenv(env_var)
        if value is not None:
            values[attr_name] = converter(value)

    return _config_from_dict(values)


def merge_configs(base_config: ParserConfig, override_config: Dict[str, Any]) -> ParserConfig:
    """
    Merge override values into a configuration

    Returns:
        New ParserConfig instance, base_config is left untouched
    """
    merged = base_config.model_dump()
    merged.update(override_config)
    return _config_from_dict(merged)
