"""
Resource objects

@see https://jsonapi.org/format/#document-resource-objects

Primary data is either null, a single resource (identifier or full
resource object) or an array of them.
"""

from typing import Any, Iterator, List

from ..exceptions.errors import ValidationError, kind_of
from .base import JsonApiObject, is_identifier_shaped


class ResourceNull(JsonApiObject):
    """Empty primary data, JSON null"""

    def _parse(self, raw: Any) -> None:
        if raw is not None:
            raise ValidationError(
                f'ResourceNull has to be null, "{kind_of(raw)}" given.',
                {"type": self.type_name, "expected": "null", "actual": kind_of(raw)},
            )

    def as_dict(self, full: bool = False) -> None:
        return None


class ResourceIdentifier(JsonApiObject):
    """
    Resource identifier object

    "type" and "id" are required strings, "meta" is optional.
    """

    def _parse(self, raw: Any) -> None:
        identifier = self._require_object(raw)

        for name in ("type", "id"):
            if name not in identifier:
                raise ValidationError(
                    f'A resource identifier object MUST contain a "{name}" member.',
                    {"type": self.type_name, "key": name},
                )

        self._set_string("type", identifier["type"])
        self._set_string("id", identifier["id"])

        if "meta" in identifier:
            self._set("meta", self._make("Meta", identifier["meta"]))


class ResourceItem(JsonApiObject):
    """
    Resource object

    "id" may be left out when the manager's config sets optional_item_id,
    as in a request body that creates a resource. Attributes are parsed
    before relationships so field names can be checked for clashes.
    """

    def _parse(self, raw: Any) -> None:
        resource = self._require_object(raw)

        if "type" not in resource:
            raise ValidationError(
                'A resource object MUST contain a "type" member.',
                {"type": self.type_name, "key": "type"},
            )
        self._set_string("type", resource["type"])

        if "id" in resource:
            self._set_string("id", resource["id"])
        elif not self._manager.config.optional_item_id:
            raise ValidationError(
                'A resource object MUST contain an "id" member.',
                {"type": self.type_name, "key": "id"},
            )

        if "meta" in resource:
            self._set("meta", self._make("Meta", resource["meta"]))

        if "attributes" in resource:
            self._set("attributes", self._make("Attributes", resource["attributes"]))

        if "relationships" in resource:
            self._set(
                "relationships",
                self._make("RelationshipCollection", resource["relationships"]),
            )

        if "links" in resource:
            self._set("links", self._make("ResourceItemLink", resource["links"]))


class _Collection(JsonApiObject):
    """Array-backed wrapper, keys are the element positions"""

    def __len__(self) -> int:
        return len(self.get_keys())

    def __iter__(self) -> Iterator[Any]:
        for key in self.get_keys():
            yield self.get(key)

    def as_dict(self, full: bool = False) -> List[Any]:
        return [
            value.as_dict(full=True) if full else value
            for value in self
        ]


class ResourceIdentifierCollection(_Collection):
    """Array of resource identifier objects, the data of a to-many relationship"""

    def _parse(self, raw: Any) -> None:
        identifiers = self._require_array(raw)

        for index, identifier in enumerate(identifiers):
            self._set(index, self._make("ResourceIdentifier", identifier))


class ResourceCollection(_Collection):
    """
    Array of resources

    Elements holding only type, id and meta become identifiers, all
    others resource objects.
    """

    def _parse(self, raw: Any) -> None:
        resources = self._require_array(raw)

        for index, resource in enumerate(resources):
            if not isinstance(resource, dict):
                raise ValidationError(
                    f'Resources inside a collection have to be objects, "{kind_of(resource)}" given.',
                    {"type": self.type_name, "key": index, "actual": kind_of(resource)},
                )
            if is_identifier_shaped(resource):
                self._set(index, self._make("ResourceIdentifier", resource))
            else:
                self._set(index, self._make("ResourceItem", resource))
