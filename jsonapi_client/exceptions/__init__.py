"""jsonapi_client exception module

Provides all exception classes
"""

from .errors import (
    JsonApiError,
    ValidationError,
    AccessError,
    ConfigurationError,
    kind_of,
)

__all__ = [
    "JsonApiError",
    "ValidationError",
    "AccessError",
    "ConfigurationError",
    "kind_of",
]
