# -*- coding: utf-8 -*-
"""
Named definitions: interfaces, object types and enums.
"""

import enum
from typing import (
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    Type,
    Union,
)

from .._string_utils import is_name
from ..exc import ConfigurationError, FieldConflictError
from .cache import MutationInvalidation, TypeCache
from .fields import FieldDefinition
from .shapes import EnumRef, ObjectRef

FieldMap = Mapping[str, FieldDefinition]


def _check_name(name: str, what: str) -> None:
    if not is_name(name):
        raise ConfigurationError('Invalid %s name "%s"' % (what, name))


def _field_map(
    owner: str, fields: Optional[FieldMap]
) -> Dict[str, FieldDefinition]:
    if fields is None:
        return {}

    if not isinstance(fields, Mapping):
        raise ConfigurationError(
            "Fields of %s must be a mapping, got %r" % (owner, fields)
        )

    result = {}  # type: Dict[str, FieldDefinition]
    for name, field in fields.items():
        _check_name(name, "field")
        if not isinstance(field, FieldDefinition):
            raise ConfigurationError(
                "Field %s.%s must be a field definition, got %r"
                % (owner, name, field)
            )
        result[name] = field
    return result


class NamedDefinition:
    """
    Base class for registrable definitions.

    Attributes:
        name (str): Definition name
    """

    name = NotImplemented  # type: str

    def __str__(self) -> str:
        from ..printer import print_definition

        return print_definition(self)

    def __repr__(self) -> str:
        return "%s(%s at %d)" % (self.__class__.__name__, self.name, id(self))


class InterfaceDefinition(NamedDefinition):
    """
    Interface Definition

    Args:
        name: Interface name
        fields: Fields in declaration order

    Attributes:
        name (str): Interface name
        fields (Dict[str, FieldDefinition]): Fields in declaration order
    """

    def __init__(self, name: str, fields: Optional[FieldMap] = None):
        _check_name(name, "interface")
        self.name = name
        self.fields = _field_map(name, fields)
        if not self.fields:
            raise ConfigurationError("Interface %s has no fields" % name)

    def ref(self) -> ObjectRef:
        return ObjectRef(self.name)


class TypeDefinition(NamedDefinition):
    """
    Object Type Definition

    Fields contributed by implemented interfaces are rendered first, see
    :func:`merge_fields`.

    Args:
        name: Type name
        fields: Own fields in declaration order

    Attributes:
        name (str): Type name
        fields (Dict[str, FieldDefinition]): Own fields in declaration order
        interfaces (List[InterfaceDefinition]): Implemented interfaces in the
            order :meth:`implements` was called
        cache_params (Optional[TypeCache]): Type level cache directive
    """

    def __init__(self, name: str, fields: Optional[FieldMap] = None):
        _check_name(name, "type")
        self.name = name
        self.fields = _field_map(name, fields)
        self.interfaces = []  # type: List[InterfaceDefinition]
        self.cache_params = None  # type: Optional[TypeCache]

    def implements(self, interface: InterfaceDefinition) -> "TypeDefinition":
        """
        Add an interface to this type. Mutates the type and returns it.

        Raises:
            ConfigurationError: if ``interface`` is not an interface or is
                already implemented
            FieldConflictError: if a field of ``interface`` is already
                declared with a different type
        """
        if not isinstance(interface, InterfaceDefinition):
            raise ConfigurationError(
                "Type %s can only implement interfaces, got %r"
                % (self.name, interface)
            )

        if any(i.name == interface.name for i in self.interfaces):
            raise ConfigurationError(
                "Type %s already implements %s" % (self.name, interface.name)
            )

        _check_conflicts(self.name, self.interfaces + [interface], self.fields)
        self.interfaces.append(interface)
        return self

    def cache(
        self,
        max_age: int,
        stale_while_revalidate: Optional[int] = None,
        mutation_invalidation: Optional[
            Union[MutationInvalidation, str]
        ] = None,
    ) -> "TypeDefinition":
        """
        Set the type level cache directive. Mutates the type and returns it.
        """
        self.cache_params = TypeCache(
            max_age, stale_while_revalidate, mutation_invalidation
        )
        return self

    def ref(self) -> ObjectRef:
        return ObjectRef(self.name)


class EnumDefinition(NamedDefinition):
    """
    Enum Definition

    Args:
        name: Enum name
        values: Value names, in order

    Attributes:
        name (str): Enum name
        values (Tuple[str, ...]): Value names
    """

    @classmethod
    def from_python_enum(cls, enum_: Type[enum.Enum]) -> "EnumDefinition":
        return cls(enum_.__name__, [member.name for member in enum_])

    def __init__(self, name: str, values: Iterable[str]):
        _check_name(name, "enum")
        if isinstance(values, str):
            raise ConfigurationError(
                "Enum values must be a list of names, got %r" % values
            )

        seen = []  # type: List[str]
        for value in values:
            _check_name(value, "enum value")
            if value in ("true", "false", "null"):
                raise ConfigurationError(
                    'Enum value "%s" is reserved' % value
                )
            if value in seen:
                raise ConfigurationError("Duplicate enum value %s" % value)
            seen.append(value)

        if not seen:
            raise ConfigurationError("Enum %s has no values" % name)

        self.name = name
        self.values = tuple(seen)

    def ref(self) -> EnumRef:
        return EnumRef(self.name, self.values)


Definition = Union[InterfaceDefinition, TypeDefinition, EnumDefinition]


def _check_conflicts(
    name: str,
    interfaces: Sequence[InterfaceDefinition],
    fields: Mapping[str, FieldDefinition],
) -> None:
    known = {}  # type: Dict[str, Tuple[str, str]]
    sources = [(i.name, i.fields) for i in interfaces] + [(name, fields)]
    for owner, source in sources:
        for field_name, field in source.items():
            shape = str(field.shape)
            if field_name not in known:
                known[field_name] = (owner, shape)
                continue
            other_owner, other = known[field_name]
            if other != shape:
                raise FieldConflictError(
                    'Field "%s" of %s has type %s but %s.%s is %s'
                    % (
                        field_name,
                        owner,
                        shape,
                        other_owner,
                        field_name,
                        other,
                    ),
                    field_name,
                    (other, shape),
                )


def check_fields(definition: TypeDefinition) -> None:
    """
    Validate the merged fields of an object type.

    :meth:`TypeDefinition.implements` already rejects conflicting fields but
    shapes can still change afterwards (e.g. calling ``optional()`` on a field
    shared with an interface) so this runs again before printing.

    Raises:
        ConfigurationError: if the type ends up without any field
        FieldConflictError: if a field is declared with different types
    """
    _check_conflicts(definition.name, definition.interfaces, definition.fields)
    if not definition.fields and not definition.interfaces:
        raise ConfigurationError("Type %s has no fields" % definition.name)


def merge_fields(
    definition: Union[InterfaceDefinition, TypeDefinition]
) -> List[Tuple[str, FieldDefinition]]:
    """
    Compute the final fields of a definition, in render order.

    Fields of implemented interfaces come first, interface by interface in
    the order they were added, each in its declaration order. The type's own
    fields follow. A name is only emitted once: the first interface declaring
    it wins and own fields never replace an interface field.

    Args:
        definition: Interface or type definition

    Returns:
        ``(name, field)`` pairs
    """
    emitted = set()  # type: Set[str]
    result = []  # type: List[Tuple[str, FieldDefinition]]

    sources = [
        i.fields for i in getattr(definition, "interfaces", ())
    ]  # type: List[Mapping[str, FieldDefinition]]
    sources.append(definition.fields)

    for fields in sources:
        for name, field in fields.items():
            if name in emitted:
                continue
            emitted.add(name)
            result.append((name, field))

    return result


def interface_names(definition: TypeDefinition) -> Sequence[str]:
    return [i.name for i in definition.interfaces]
