# -*- coding: utf-8 -*-
"""
Ordered collection of the named definitions making up a schema.
"""

import logging
from typing import Dict, Iterator, List, TypeVar

from .exc import (
    ConfigurationError,
    DuplicateDefinitionError,
    UnknownDefinition,
)
from .typedefs.definitions import (
    EnumDefinition,
    InterfaceDefinition,
    NamedDefinition,
    TypeDefinition,
)

logger = logging.getLogger(__name__)

TDefinition = TypeVar("TDefinition", bound=NamedDefinition)


class Registry:
    """
    Holds definitions in registration order.

    Names are unique across all kinds of definitions. A registry is reset
    with :meth:`clear` which is always safe to call.
    """

    __slots__ = ("_definitions",)

    def __init__(self):
        self._definitions = {}  # type: Dict[str, NamedDefinition]

    def _register(self, definition: TDefinition, cls: type) -> TDefinition:
        if not isinstance(definition, cls):
            raise ConfigurationError(
                "Expected %s, got %r" % (cls.__name__, definition)
            )

        if definition.name in self._definitions:
            raise DuplicateDefinitionError(
                'Duplicate definition "%s"' % definition.name
            )

        self._definitions[definition.name] = definition
        logger.debug(
            "Registered %s %s", definition.__class__.__name__, definition.name
        )
        return definition

    def register_type(self, definition: TypeDefinition) -> TypeDefinition:
        return self._register(definition, TypeDefinition)

    def register_interface(
        self, definition: InterfaceDefinition
    ) -> InterfaceDefinition:
        return self._register(definition, InterfaceDefinition)

    def register_enum(self, definition: EnumDefinition) -> EnumDefinition:
        return self._register(definition, EnumDefinition)

    def get(self, name: str) -> NamedDefinition:
        """
        Raises:
            UnknownDefinition: if nothing is registered under ``name``
        """
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownDefinition("Unknown definition %s" % name)

    def definitions(self) -> List[NamedDefinition]:
        """ All registered definitions, in registration order. """
        return list(self._definitions.values())

    def clear(self) -> None:
        """ Discard all registered definitions. """
        logger.debug("Clearing %d definition(s)", len(self._definitions))
        self._definitions = {}

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[NamedDefinition]:
        return iter(self.definitions())
