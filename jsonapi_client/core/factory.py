"""
Factory manager

Maps a JSON:API object type name to the constructor that validates and
wraps raw input of that type. Pure dispatch: shape checks live in the
constructors, which call back into the manager for nested objects.

Registration is expected to happen once during setup; lookups are then
safe from several threads at the same time.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..exceptions.errors import ConfigurationError
from .config import ParserConfig, get_default_config

logger = logging.getLogger(__name__)

Constructor = Callable[..., Any]


class FactoryManager:
    """
    Registry of type name -> constructor

    Constructors are called as ``constructor(raw, manager, *context)``.

    Example:
        >>> manager = create_manager()
        >>> document = manager.make("Document", {"meta": {"ok": True}})
        >>> document.get_path("meta.ok")
        True
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        registry: Optional[Dict[str, Constructor]] = None,
    ):
        self.config = config or get_default_config()
        self._registry: Dict[str, Constructor] = dict(registry or {})

    def register(self, type_name: str, constructor: Constructor) -> "FactoryManager":
        """
        Register a constructor, replacing any earlier one for the name

        Returns:
            self, supports method chaining
        """
        if type_name in self._registry:
            logger.debug("Replacing constructor for type '%s'", type_name)
        else:
            logger.debug("Registering constructor for type '%s'", type_name)
        self._registry[type_name] = constructor
        return self

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._registry

    def registered_types(self) -> List[str]:
        return sorted(self._registry)

    def make(self, type_name: str, raw: Any, *context: Any) -> Any:
        """
        Build the typed wrapper for a raw value

        Raises:
            ConfigurationError: type_name was never registered
            ValidationError: raised by the constructor for bad input
        """
        try:
            constructor = self._registry[type_name]
        except KeyError:
            raise ConfigurationError(
                f'No constructor registered for type "{type_name}".',
                {"registered": self.registered_types()},
                type_name=type_name,
            ) from None

        logger.debug("Building %s", type_name)
        return constructor(raw, self, *context)

    def with_config(self, config: ParserConfig) -> "FactoryManager":
        """Copy of this manager sharing the registrations but not the config"""
        return FactoryManager(config=config, registry=self._registry)
