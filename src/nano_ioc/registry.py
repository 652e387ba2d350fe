"""Bean definitions and the name-to-definition registry.

This module defines :class:`BeanDefinition` (the immutable descriptor for a
registered bean) and :class:`BeanDefinitionRegistry` (the name-keyed map the
container populates while scanning).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from .analysis import TypeDescriptor
from .constants import LOGGER


@dataclass(frozen=True)
class BeanDefinition:
    """Immutable descriptor for a registered bean.

    Attributes:
        name: The registry key (class name with the first letter lower-cased
            for scanned classes).
        type_descriptor: Introspection handle over the bean's class.
    """
    name: str
    type_descriptor: TypeDescriptor

    @property
    def bean_class(self) -> type:
        return self.type_descriptor.cls


class BeanDefinitionRegistry:
    """Simple name-to-definition map.

    Registration is unconditional: registering a name twice keeps the last
    definition. Overwriting a definition for a different class is logged.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._definitions: Dict[str, BeanDefinition] = {}
        self._logger = logger or LOGGER

    def register(self, name: str, descriptor: TypeDescriptor) -> BeanDefinition:
        """Bind *descriptor* to *name*, replacing any previous definition.

        Args:
            name: The registry key.
            descriptor: The class to build for this name.

        Returns:
            The stored :class:`BeanDefinition`.
        """
        previous = self._definitions.get(name)
        if previous is not None and previous.bean_class is not descriptor.cls:
            self._logger.warning(
                "Bean name '%s' already registered for %s; overwriting with %s",
                name, previous.type_descriptor.qualified_name, descriptor.qualified_name,
            )
        definition = BeanDefinition(name=name, type_descriptor=descriptor)
        self._definitions[name] = definition
        return definition

    def lookup(self, name: str) -> Optional[BeanDefinition]:
        return self._definitions.get(name)

    def update(self, other: "BeanDefinitionRegistry") -> None:
        for definition in other:
            self.register(definition.name, definition.type_descriptor)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[BeanDefinition]:
        return iter(list(self._definitions.values()))
