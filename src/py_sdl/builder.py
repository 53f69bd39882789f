# -*- coding: utf-8 -*-
"""
Fluent entry point used to declare a schema.

>>> g = SchemaBuilder()
>>> produce = g.interface("Produce", {"name": g.string()})
>>> fruit = g.type("Fruit", {"isSeedless": g.boolean().optional()})
>>> print(fruit.implements(produce))
type Fruit implements Produce {
  name: String!
  isSeedless: Boolean
}
"""

import enum
from typing import Iterable, List, Mapping, Optional, Type, Union

from .exc import ConfigurationError
from .printer import print_schema
from .registry import Registry
from .typedefs.definitions import (
    EnumDefinition,
    InterfaceDefinition,
    NamedDefinition,
    TypeDefinition,
)
from .typedefs.fields import FieldDefinition, ScalarDefinition
from .typedefs.shapes import ObjectRef, ScalarKind


class SchemaBuilder:
    """
    Build and collect schema definitions.

    Each builder owns its own :class:`~py_sdl.registry.Registry`, there is no
    shared global state; use :meth:`clear` to start over.

    Args:
        registry: Registry to collect definitions into, a new one is created
            when omitted

    Attributes:
        registry (Registry): Collected definitions
    """

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry if registry is not None else Registry()

    # Scalars

    def id(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.ID)

    def string(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.String)

    def int(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Int)

    def float(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Float)

    def boolean(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Boolean)

    def date(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Date)

    def datetime(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.DateTime)

    def email(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Email)

    def ip_address(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.IPAddress)

    def timestamp(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Timestamp)

    def url(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.URL)

    def json(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.JSON)

    def phone_number(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.PhoneNumber)

    def decimal(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.Decimal)

    def bigint(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarKind.BigInt)

    # References

    def enum_ref(self, enum_: Union[EnumDefinition, str]) -> ScalarDefinition:
        """
        Field holding a value of an enum.

        Args:
            enum_: Enum definition or name of a registered enum; values of
                known enums are used to check default values
        """
        if isinstance(enum_, str):
            enum_ = self._get(enum_, EnumDefinition)
        if not isinstance(enum_, EnumDefinition):
            raise ConfigurationError("Expected an enum, got %r" % (enum_,))
        return ScalarDefinition(enum_.ref())

    def ref(
        self, type_: Union[TypeDefinition, InterfaceDefinition, str]
    ) -> ScalarDefinition:
        """
        Field referencing an object type or an interface.

        Args:
            type_: Definition or name; names do not need to be registered
                yet
        """
        if isinstance(type_, str):
            return ScalarDefinition(ObjectRef(type_))
        if not isinstance(type_, (TypeDefinition, InterfaceDefinition)):
            raise ConfigurationError(
                "Expected a type or interface, got %r" % (type_,)
            )
        return ScalarDefinition(type_.ref())

    # Definitions

    def interface(
        self, name: str, fields: Mapping[str, FieldDefinition]
    ) -> InterfaceDefinition:
        """ Create and register an interface. """
        return self.registry.register_interface(
            InterfaceDefinition(name, fields)
        )

    def type(
        self, name: str, fields: Mapping[str, FieldDefinition]
    ) -> TypeDefinition:
        """ Create and register an object type. """
        return self.registry.register_type(TypeDefinition(name, fields))

    def enum(
        self, name: str, values: Union[Iterable[str], Type[enum.Enum]]
    ) -> EnumDefinition:
        """
        Create and register an enum.

        Args:
            name: Enum name
            values: Value names or a Python enum class whose member names
                are used
        """
        if isinstance(values, type) and issubclass(values, enum.Enum):
            values = [member.name for member in values]
        return self.registry.register_enum(EnumDefinition(name, values))

    def _get(
        self, name: str, cls: Type[NamedDefinition]
    ) -> NamedDefinition:
        definition = self.registry.get(name)
        if not isinstance(definition, cls):
            raise ConfigurationError(
                "%s is a %s, expected %s"
                % (name, definition.__class__.__name__, cls.__name__)
            )
        return definition

    # Registry

    def definitions(self) -> List[NamedDefinition]:
        return self.registry.definitions()

    def clear(self) -> None:
        """ Discard every definition registered so far. """
        self.registry.clear()

    def to_string(self, indent=2) -> str:
        return print_schema(self.definitions(), indent=indent)

    def __str__(self) -> str:
        return self.to_string()
