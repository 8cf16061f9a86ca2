"""Validation engine: storage, access, factory and configuration"""

from .container import DataContainer
from .access import Accessible, AccessKey
from .factory import FactoryManager, Constructor
from .config import (
    ParserConfig,
    get_default_config,
    load_config_from_file,
    load_config_from_env,
    merge_configs,
)

__all__ = [
    "DataContainer",
    "Accessible",
    "AccessKey",
    "FactoryManager",
    "Constructor",
    "ParserConfig",
    "get_default_config",
    "load_config_from_file",
    "load_config_from_env",
    "merge_configs",
]
