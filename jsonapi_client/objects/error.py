"""
Error objects

@see https://jsonapi.org/format/#error-objects
"""

from typing import Any

from ..exceptions.errors import ValidationError
from .base import JsonApiObject
from .resource import _Collection


class ErrorCollection(_Collection):
    """The top-level "errors" array, never empty"""

    def _parse(self, raw: Any) -> None:
        errors = self._require_array(raw)

        if not errors:
            raise ValidationError(
                "Errors array cannot be empty and MUST have at least one object",
                {"type": self.type_name},
            )

        for index, error in enumerate(errors):
            self._set(index, self._make("Error", error))


class Error(JsonApiObject):
    """Error object, every member is optional"""

    STRING_MEMBERS = ("id", "status", "code", "title", "detail")

    def _parse(self, raw: Any) -> None:
        error = self._require_object(raw)

        for name in self.STRING_MEMBERS:
            if name in error:
                self._set_string(name, error[name])

        if "links" in error:
            self._set("links", self._make("ErrorLink", error["links"]))

        if "source" in error:
            self._set("source", self._make("ErrorSource", error["source"]))

        if "meta" in error:
            self._set("meta", self._make("Meta", error["meta"]))


class ErrorSource(JsonApiObject):
    """References to the source of an error"""

    def _parse(self, raw: Any) -> None:
        source = self._require_object(raw)

        for name in ("pointer", "parameter"):
            if name in source:
                self._set_string(name, source[name])
