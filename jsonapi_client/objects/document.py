"""
Top-level document

@see https://jsonapi.org/format/#document-top-level

A document MUST contain at least one of "data", "errors" and "meta",
and "data" and "errors" MUST NOT coexist.
"""

import logging
from typing import Any

from ..exceptions.errors import ValidationError
from .base import JsonApiObject, is_identifier_shaped

logger = logging.getLogger(__name__)


class Document(JsonApiObject):
    """JSON:API document, the root of every response or request body"""

    def _parse(self, raw: Any) -> None:
        document = self._require_object(raw)

        if not any(name in document for name in ("data", "errors", "meta")):
            raise ValidationError(
                'Document MUST contain at least one of the following properties: "data", "errors", "meta"',
                {"type": self.type_name},
            )

        if "data" in document and "errors" in document:
            raise ValidationError(
                'The properties "data" and "errors" MUST NOT coexist in Document.',
                {"type": self.type_name},
            )

        if "included" in document and "data" not in document:
            raise ValidationError(
                'If Document does not contain a "data" property, the "included" property MUST NOT be present either.',
                {"type": self.type_name, "key": "included"},
            )

        if "data" in document:
            self._set("data", self._parse_data(document["data"]))

        if "meta" in document:
            self._set("meta", self._make("Meta", document["meta"]))

        if "errors" in document:
            self._set("errors", self._make("ErrorCollection", document["errors"]))

        if "included" in document:
            self._set("included", self._make("ResourceCollection", document["included"]))

        if "jsonapi" in document:
            self._set("jsonapi", self._make("Jsonapi", document["jsonapi"]))

        if "links" in document:
            self._set("links", self._make("DocumentLink", document["links"]))

        logger.debug("Parsed document with members %s", self.get_keys())

    def _parse_data(self, data: Any) -> Any:
        """Pick the primary data type from its shape"""
        if data is None:
            return self._make("ResourceNull", data)

        if isinstance(data, list):
            if data and all(is_identifier_shaped(item) for item in data):
                return self._make("ResourceIdentifierCollection", data)
            return self._make("ResourceCollection", data)

        if isinstance(data, dict):
            if is_identifier_shaped(data):
                return self._make("ResourceIdentifier", data)
            return self._make("ResourceItem", data)

        raise self._property_error("data", "object, array or null", data)
