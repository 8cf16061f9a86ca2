"""Typed wrappers for JSON:API objects and the built-in type registry"""

from typing import Dict, Optional

from ..core.config import ParserConfig
from ..core.factory import Constructor, FactoryManager
from .base import JsonApiObject, is_identifier_shaped
from .document import Document
from .error import Error, ErrorCollection, ErrorSource
from .link import DocumentLink, ErrorLink, Link, ResourceItemLink
from .meta import Attributes, Jsonapi, Meta
from .relationship import Relationship, RelationshipCollection, RelationshipLink
from .resource import (
    ResourceCollection,
    ResourceIdentifier,
    ResourceIdentifierCollection,
    ResourceItem,
    ResourceNull,
)

BUILTIN_TYPES: Dict[str, Constructor] = {
    "Document": Document,
    "Jsonapi": Jsonapi,
    "Meta": Meta,
    "Attributes": Attributes,
    "ResourceNull": ResourceNull,
    "ResourceIdentifier": ResourceIdentifier,
    "ResourceIdentifierCollection": ResourceIdentifierCollection,
    "ResourceItem": ResourceItem,
    "ResourceCollection": ResourceCollection,
    "ResourceItemLink": ResourceItemLink,
    "RelationshipCollection": RelationshipCollection,
    "Relationship": Relationship,
    "RelationshipLink": RelationshipLink,
    "Link": Link,
    "DocumentLink": DocumentLink,
    "ErrorCollection": ErrorCollection,
    "Error": Error,
    "ErrorLink": ErrorLink,
    "ErrorSource": ErrorSource,
}


def create_manager(config: Optional[ParserConfig] = None) -> FactoryManager:
    """Factory manager with every built-in JSON:API type registered"""
    manager = FactoryManager(config=config)
    for type_name, constructor in BUILTIN_TYPES.items():
        manager.register(type_name, constructor)
    return manager


__all__ = [
    "BUILTIN_TYPES",
    "create_manager",
    "JsonApiObject",
    "is_identifier_shaped",
    "Document",
    "Jsonapi",
    "Meta",
    "Attributes",
    "ResourceNull",
    "ResourceIdentifier",
    "ResourceIdentifierCollection",
    "ResourceItem",
    "ResourceCollection",
    "ResourceItemLink",
    "RelationshipCollection",
    "Relationship",
    "RelationshipLink",
    "Link",
    "DocumentLink",
    "ErrorCollection",
    "Error",
    "ErrorLink",
    "ErrorSource",
]
