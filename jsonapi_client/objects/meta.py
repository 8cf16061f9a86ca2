"""
Meta, jsonapi and attributes objects

These hold free-form members. Values are stored as deep copies of the
raw input, so the wrapper never shares state with the caller's data.
"""

import copy
from typing import Any

from ..exceptions.errors import ValidationError
from .base import JsonApiObject


class Meta(JsonApiObject):
    """Non-standard meta-information, any members allowed"""

    def _parse(self, raw: Any) -> None:
        meta = self._require_object(raw)

        for name, value in meta.items():
            self._set(name, copy.deepcopy(value))


class Jsonapi(JsonApiObject):
    """
    Information about the server's implementation

    @see https://jsonapi.org/format/#document-jsonapi-object
    """

    def _parse(self, raw: Any) -> None:
        jsonapi = self._require_object(raw)

        if "version" in jsonapi:
            self._set_string("version", jsonapi["version"])

        if "meta" in jsonapi:
            self._set("meta", self._make("Meta", jsonapi["meta"]))


class Attributes(JsonApiObject):
    """
    Attributes of a resource object

    @see https://jsonapi.org/format/#document-resource-object-attributes
    """

    FORBIDDEN = ("type", "id", "relationships", "links")

    def _parse(self, raw: Any) -> None:
        attributes = self._require_object(raw)

        for name in self.FORBIDDEN:
            if name in attributes:
                raise ValidationError(
                    'These properties are not allowed in attributes: "type", "id", '
                    f'"relationships", "links"; "{name}" given.',
                    {"type": self.type_name, "key": name},
                )

        for name, value in attributes.items():
            self._set(name, copy.deepcopy(value))
