"""
Typed wrapper base class

A wrapper's constructor is its validator: it checks the raw node,
stores validated fields in a private DataContainer and asks the factory
manager for nested objects. Construction either succeeds completely or
raises, and the wrapper is read-only afterwards.
"""

from typing import Any, Optional

from ..core.access import Accessible
from ..core.container import DataContainer, Key
from ..core.factory import FactoryManager
from ..exceptions.errors import ValidationError, kind_of

IDENTIFIER_KEYS = frozenset(["type", "id", "meta"])


def is_identifier_shaped(raw: Any) -> bool:
    """An object holding nothing but type, id and meta"""
    return isinstance(raw, dict) and "id" in raw and set(raw) <= IDENTIFIER_KEYS


class JsonApiObject(Accessible):
    """Base for all typed wrappers"""

    def __init__(self, raw: Any, manager: FactoryManager, parent: Optional[Any] = None):
        self._manager = manager
        self._parent = parent
        self._container = DataContainer()
        self._parse(raw)
        self._frozen = True

    def _parse(self, raw: Any) -> None:
        raise NotImplementedError

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.type_name} is read-only")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"{self.type_name}(keys={self.get_keys()!r})"

    # Validation helpers

    def _require_object(self, raw: Any) -> dict:
        if not isinstance(raw, dict):
            actual = kind_of(raw)
            raise ValidationError(
                f'{self.type_name} has to be an object, "{actual}" given.',
                {"type": self.type_name, "expected": "object", "actual": actual},
            )
        return raw

    def _require_array(self, raw: Any) -> list:
        if not isinstance(raw, list):
            actual = kind_of(raw)
            raise ValidationError(
                f'{self.type_name} has to be an array, "{actual}" given.',
                {"type": self.type_name, "expected": "array", "actual": actual},
            )
        return raw

    def _property_error(self, name: str, expected: str, value: Any) -> ValidationError:
        return ValidationError.for_property(name, expected, value, owner=self.type_name)

    def _set(self, key: Key, value: Any) -> None:
        if self._container.has(key):
            raise RuntimeError(f"{self.type_name} field {key!r} is already set")
        self._container.set(key, value)

    def _set_string(self, name: str, value: Any) -> None:
        if not isinstance(value, str):
            raise self._property_error(name, "string", value)
        self._set(name, value)

    def _set_link(self, name: str, value: Any) -> None:
        """A link given either as a URL string or as a link object"""
        if isinstance(value, str):
            self._set(name, value)
        elif isinstance(value, dict):
            self._set(name, self._make("Link", value))
        else:
            raise self._property_error(name, "string or object", value)

    def _set_pagination_link(self, name: str, value: Any) -> None:
        """Pagination links may be null; null is accepted but not stored"""
        if value is not None and not isinstance(value, str):
            raise self._property_error(name, "string or null", value)
        if value is not None:
            self._set(name, value)

    def _make(self, type_name: str, raw: Any) -> Any:
        return self._manager.make(type_name, raw, self)
