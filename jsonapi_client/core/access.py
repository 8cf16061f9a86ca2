"""
Accessible capability

The read surface shared by every typed wrapper: has(), get(), get_keys()
and as_dict() delegate to the wrapper's private DataContainer.

get_path() and has_path() take dotted paths:
- "self"                         -> a stored field
- "data.attributes.title"        -> walk nested wrappers
- "data.0.id"                    -> numeric segments index collections
- "meta.page.total"              -> continue into raw meta mappings
"""

from typing import Any, List, Union

from ..exceptions.errors import AccessError
from .container import DataContainer, Key

_MISSING = object()


class AccessKey:
    """Parsed access key"""

    def __init__(self, raw: Key, segments: List[str]):
        self.raw = raw
        self.segments = segments

    @classmethod
    def parse(cls, key: Any) -> "AccessKey":
        """
        Split a key into path segments

        Raises:
            AccessError: Key is neither a string nor an int
        """
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise AccessError(
                f"Access key has to be a string or int, {type(key).__name__!r} given.",
                {"key": key},
            )
        if isinstance(key, int):
            return cls(key, [str(key)])
        return cls(key, key.split("."))

    def __repr__(self) -> str:
        return f"AccessKey({self.raw!r})"


def _is_key(key: Any) -> bool:
    return isinstance(key, (str, int)) and not isinstance(key, bool)


def _step(current: Any, segment: str) -> Any:
    """Resolve one segment against a wrapper or a raw value"""
    if isinstance(current, Accessible):
        container = current._container
        if container.has(segment):
            return container.get(segment)
        if segment.isdigit() and container.has(int(segment)):
            return container.get(int(segment))
        return _MISSING

    if isinstance(current, dict):
        return current.get(segment, _MISSING)

    if isinstance(current, list) and segment.isdigit():
        index = int(segment)
        if index < len(current):
            return current[index]

    return _MISSING


class Accessible:
    """
    Read-only access to validated fields

    Subclasses provide ``_container``. has() and get() look up exactly
    the keys listed by get_keys(); has_path() and get_path() walk dotted
    paths through nested wrappers. Missing keys raise an AccessError
    naming the wrapper type and the key.
    """

    _container: DataContainer

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def get_keys(self) -> List[Key]:
        return self._container.get_keys()

    def has(self, key: Any) -> bool:
        if not _is_key(key):
            return False
        return self._container.has(key)

    def get(self, key: Any) -> Any:
        """
        Read the value stored under a key

        Raises:
            AccessError: Nothing is stored under the key
        """
        if not _is_key(key):
            raise self._missing(key)
        try:
            return self._container.get(key)
        except AccessError as exc:
            raise self._missing(key) from exc

    def has_path(self, path: Any) -> bool:
        try:
            self.get_path(path)
        except AccessError:
            return False
        return True

    def get_path(self, path: Any) -> Any:
        """
        Read a value by dotted path

        Raises:
            AccessError: Some segment of the path is not stored
        """
        access_key = AccessKey.parse(path)
        if self._container.has(access_key.raw):
            return self._container.get(access_key.raw)

        current: Any = self
        for segment in access_key.segments:
            current = _step(current, segment)
            if current is _MISSING:
                raise self._missing(access_key.raw)
        return current

    def as_dict(self, full: bool = False) -> Union[dict, list]:
        """
        Stored values as plain Python data

        With full=True nested wrappers are converted too.
        """
        result = {}
        for key, value in self._container.items():
            if full and isinstance(value, Accessible):
                value = value.as_dict(full=True)
            result[key] = value
        return result

    def _missing(self, key: Key) -> AccessError:
        return AccessError(
            f'"{key}" doesn\'t exist in {self.type_name}.',
            {"type": self.type_name, "key": key},
        )
