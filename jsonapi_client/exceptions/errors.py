"""
jsonapi_client exception definitions

Three kinds of failure can happen while reading a JSON:API document:
ValidationError (the input does not conform at some node), AccessError
(a caller asked for a key a wrapper does not hold) and ConfigurationError
(the factory was asked for a type nobody registered).
"""

from typing import Any, Dict, Optional


def kind_of(value: Any) -> str:
    """Name the JSON kind of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class JsonApiError(Exception):
    """jsonapi_client base exception"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(JsonApiError):
    """
    Validation error

    Raised while a wrapper is being constructed when the raw node does not
    have the shape the JSON:API format requires at that position.
    """

    @classmethod
    def for_property(
        cls, name: str, expected: str, value: Any, owner: Optional[str] = None
    ) -> "ValidationError":
        actual = kind_of(value)
        return cls(
            f'property "{name}" has to be a {expected}, "{actual}" given.',
            {"type": owner, "key": name, "expected": expected, "actual": actual},
        )


class AccessError(JsonApiError, KeyError):
    """
    Access error

    Raised when reading a key that is not stored. Always recoverable,
    guard optional reads with has().
    """

    def __str__(self) -> str:
        return self.message


class ConfigurationError(JsonApiError):
    """
    Configuration error

    Raised for wiring mistakes such as an unregistered type name or an
    invalid parser setting. Not caused by bad input.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        type_name: Optional[str] = None,
    ):
        super().__init__(message, details)
        self.type_name = type_name
