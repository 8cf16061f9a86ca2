"""
Entry points for reading JSON:API bodies

- parse(): build a Document from already decoded data
- parse_response_body() / parse_request_body(): decode JSON text first
- is_valid_response_body() / is_valid_request_body(): yes/no checks
"""

import json
import logging
from typing import Any, Optional

from .core.config import merge_configs
from .core.factory import FactoryManager
from .exceptions.errors import ValidationError
from .objects import Document, create_manager

logger = logging.getLogger(__name__)


def parse(raw: Any, manager: Optional[FactoryManager] = None) -> Document:
    """
    Validate decoded data and wrap it as a Document

    Args:
        raw: Decoded JSON value, objects as dicts and arrays as lists
        manager: Factory manager to build with, built-in types by default

    Raises:
        ValidationError: The data is not a valid JSON:API document
    """
    manager = manager or create_manager()
    try:
        return manager.make("Document", raw)
    except ValidationError as e:
        logger.debug("Document rejected: %s", e.message)
        raise


def _decode(json_string: str) -> Any:
    try:
        return json.loads(json_string)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Unable to parse JSON data: {e}", {"expected": "JSON text"}
        ) from e


def parse_response_body(json_string: str, manager: Optional[FactoryManager] = None) -> Document:
    """Parse the JSON text of a server response"""
    return parse(_decode(json_string), manager)


def parse_request_body(json_string: str, manager: Optional[FactoryManager] = None) -> Document:
    """
    Parse the JSON text of a client request

    Resource objects may omit "id" here, the server assigns it.
    """
    manager = manager or create_manager()
    if not manager.config.optional_item_id:
        manager = manager.with_config(
            merge_configs(manager.config, {"optional_item_id": True})
        )
    return parse(_decode(json_string), manager)


def is_valid_response_body(json_string: str) -> bool:
    try:
        parse_response_body(json_string)
    except ValidationError:
        return False
    return True


def is_valid_request_body(json_string: str) -> bool:
    try:
        parse_request_body(json_string)
    except ValidationError:
        return False
    return True
