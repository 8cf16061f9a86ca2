"""
Data container

Ordered key -> value store every typed wrapper keeps its validated
fields in. Overwrites are allowed here; wrappers set each field once.
"""

from typing import Any, Dict, Iterator, List, Union

from ..exceptions.errors import AccessError

Key = Union[str, int]


class DataContainer:
    """Key/value storage with existence-checked reads"""

    def __init__(self) -> None:
        self._data: Dict[Key, Any] = {}

    def set(self, key: Key, value: Any) -> None:
        self._data[key] = value

    def get(self, key: Key) -> Any:
        """
        Read a stored value

        Raises:
            AccessError: The key was never set
        """
        if key not in self._data:
            raise AccessError(f'"{key}" doesn\'t exist in this container.', {"key": key})
        return self._data[key]

    def has(self, key: Key) -> bool:
        return key in self._data

    def get_keys(self) -> List[Key]:
        """Stored keys in insertion order"""
        return list(self._data)

    def items(self) -> Iterator:
        return iter(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"DataContainer(keys={self.get_keys()!r})"
