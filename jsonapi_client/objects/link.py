"""
Link objects

@see https://jsonapi.org/format/#document-links

A link is either a URL string or a link object with "href" and an
optional "meta". Links objects appear at the top level, inside
resources, relationships and errors.
"""

from typing import Any

from ..exceptions.errors import ValidationError
from .base import JsonApiObject
from .relationship import PAGINATION_LINKS


class Link(JsonApiObject):
    """Link object: href plus optional meta, extra members are links too"""

    def _parse(self, raw: Any) -> None:
        link = self._require_object(raw)

        if "href" not in link:
            raise ValidationError(
                'Link must have a "href" attribute.',
                {"type": self.type_name, "key": "href"},
            )

        for name, value in link.items():
            if name == "href":
                self._set_string("href", value)
            elif name == "meta":
                self._set("meta", self._make("Meta", value))
            else:
                self._set_link(name, value)


class DocumentLink(JsonApiObject):
    """
    Top-level links object

    Pagination links are recognized when the document has primary data.
    """

    def _parse(self, raw: Any) -> None:
        links = self._require_object(raw)

        paginated = self._parent is not None and self._parent.has("data")

        for name, value in links.items():
            if paginated and name in PAGINATION_LINKS:
                self._set_pagination_link(name, value)
            else:
                self._set_link(name, value)


class ResourceItemLink(JsonApiObject):
    """Links object of a resource, every member is a link"""

    def _parse(self, raw: Any) -> None:
        links = self._require_object(raw)

        for name, value in links.items():
            self._set_link(name, value)


class ErrorLink(JsonApiObject):
    """Links object of an error, "about" is required"""

    def _parse(self, raw: Any) -> None:
        links = self._require_object(raw)

        if "about" not in links:
            raise ValidationError(
                'ErrorLink MUST contain these properties: "about"',
                {"type": self.type_name, "key": "about"},
            )

        for name, value in links.items():
            self._set_link(name, value)
