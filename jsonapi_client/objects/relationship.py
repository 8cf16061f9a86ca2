"""
Relationship objects

@see https://jsonapi.org/format/#document-resource-object-relationships

A relationship object carries at least one of "links", "data" and
"meta". Its links object holds at least a "self" or "related" link,
and a to-many relationship may add pagination links.
"""

import logging
from typing import Any

from ..exceptions.errors import ValidationError
from .base import JsonApiObject
from .resource import ResourceIdentifierCollection

logger = logging.getLogger(__name__)

PAGINATION_LINKS = ("first", "last", "prev", "next")


class RelationshipCollection(JsonApiObject):
    """The "relationships" member of a resource object"""

    RESERVED = ("type", "id")

    def _parse(self, raw: Any) -> None:
        relationships = self._require_object(raw)

        for name in self.RESERVED:
            if name in relationships:
                raise ValidationError(
                    f'These properties are not allowed in relationships: "type", "id"; "{name}" given.',
                    {"type": self.type_name, "key": name},
                )

        attributes = None
        if self._parent is not None and self._parent.has("attributes"):
            attributes = self._parent.get("attributes")

        for name, value in relationships.items():
            if attributes is not None and attributes.has(name):
                raise ValidationError(
                    f'"{name}" property cannot be set because it exists already in parents Resource object.',
                    {"type": self.type_name, "key": name},
                )
            self._set(name, self._make("Relationship", value))


class Relationship(JsonApiObject):
    """
    Relationship object

    "data" is parsed before "links": whether pagination links apply
    depends on the data being an identifier collection.
    """

    def _parse(self, raw: Any) -> None:
        relationship = self._require_object(raw)

        if not any(name in relationship for name in ("links", "data", "meta")):
            raise ValidationError(
                'A Relationship object MUST contain at least one of the following properties: "links", "data", "meta"',
                {"type": self.type_name},
            )

        if "data" in relationship:
            data = relationship["data"]
            if data is None:
                self._set("data", None)
            elif isinstance(data, list):
                self._set("data", self._make("ResourceIdentifierCollection", data))
            elif isinstance(data, dict):
                self._set("data", self._make("ResourceIdentifier", data))
            else:
                raise self._property_error("data", "object, array or null", data)

        if "meta" in relationship:
            self._set("meta", self._make("Meta", relationship["meta"]))

        if "links" in relationship:
            self._set("links", self._make("RelationshipLink", relationship["links"]))

    def is_to_many(self) -> bool:
        """True when data is a collection of resource identifiers"""
        return self.has("data") and isinstance(self.get("data"), ResourceIdentifierCollection)


class RelationshipLink(JsonApiObject):
    """
    Links object of a relationship

    - self: link for the relationship itself, string only
    - related: related resource link, string or link object
    - first/last/prev/next: pagination, only for to-many relationships
    - anything else: extension links, string or link object
    """

    def _parse(self, raw: Any) -> None:
        links = self._require_object(raw)
        if "self" not in links and "related" not in links:
            raise ValidationError(
                'RelationshipLink has to be at least a "self" or "related" link',
                {"type": self.type_name},
            )

        consumed = set()

        if "self" in links:
            self._set_string("self", links["self"])
            consumed.add("self")

        if "related" in links:
            self._set_link("related", links["related"])
            consumed.add("related")

        if self._paginated():
            for name in PAGINATION_LINKS:
                if name in links:
                    self._set_pagination_link(name, links[name])
                    consumed.add(name)

        for name in [name for name in links if name not in consumed]:
            logger.debug("Treating '%s' as an extension link", name)
            self._set_link(name, links[name])

    def _paginated(self) -> bool:
        return self._parent is not None and self._parent.is_to_many()
