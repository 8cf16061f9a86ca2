"""
jsonapi_client - validate JSON:API documents into read-only typed objects

Usage:
    >>> from jsonapi_client import parse_response_body
    >>> document = parse_response_body('{"data": {"type": "people", "id": "9"}}')
    >>> document.get_path("data.id")
    '9'
"""

__version__ = "0.1.0"

from .exceptions import (
    JsonApiError,
    ValidationError,
    AccessError,
    ConfigurationError,
)
from .core import (
    DataContainer,
    Accessible,
    FactoryManager,
    ParserConfig,
    get_default_config,
    load_config_from_file,
    load_config_from_env,
    merge_configs,
)
from .objects import BUILTIN_TYPES, create_manager
from .helper import (
    parse,
    parse_response_body,
    parse_request_body,
    is_valid_response_body,
    is_valid_request_body,
)

__all__ = [
    "__version__",
    # Errors
    "JsonApiError",
    "ValidationError",
    "AccessError",
    "ConfigurationError",
    # Core
    "DataContainer",
    "Accessible",
    "FactoryManager",
    "ParserConfig",
    "get_default_config",
    "load_config_from_file",
    "load_config_from_env",
    "merge_configs",
    # Registry
    "BUILTIN_TYPES",
    "create_manager",
    # Helpers
    "parse",
    "parse_response_body",
    "parse_request_body",
    "is_valid_response_body",
    "is_valid_request_body",
]
