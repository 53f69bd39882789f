# -*- coding: utf-8 -*-
"""
Field shapes: the named type a field produces plus its list and nullability
wrapping.
"""

import enum
from typing import Union

from .._string_utils import is_name
from ..exc import ConfigurationError


class ScalarKind(enum.Enum):
    """ Scalars known to the schema builder. """

    ID = "ID"
    String = "String"
    Int = "Int"
    Float = "Float"
    Boolean = "Boolean"
    Date = "Date"
    DateTime = "DateTime"
    Email = "Email"
    IPAddress = "IPAddress"
    Timestamp = "Timestamp"
    URL = "URL"
    JSON = "JSON"
    PhoneNumber = "PhoneNumber"
    Decimal = "Decimal"
    BigInt = "BigInt"

    @property
    def is_string(self) -> bool:
        """ Whether values of this scalar are written as string literals. """
        return self in STRING_SCALARS


STRING_SCALARS = frozenset(
    (
        ScalarKind.ID,
        ScalarKind.String,
        ScalarKind.Email,
        ScalarKind.URL,
        ScalarKind.IPAddress,
        ScalarKind.PhoneNumber,
    )
)


class _NamedRef:

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not is_name(name):
            raise ConfigurationError('Invalid type name "%s"' % name)
        self.name = name

    def __eq__(self, rhs):
        return self.__class__ is rhs.__class__ and self.name == rhs.name

    def __hash__(self):
        return hash((self.__class__, self.name))

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.name)


class EnumRef(_NamedRef):
    """
    Reference to an enum by name.

    Attributes:
        name (str): Enum name
        values (Optional[Tuple[str, ...]]): Known enum values, used to check
            default values when available
    """

    __slots__ = ("name", "values")

    def __init__(self, name: str, values=None):
        super().__init__(name)
        self.values = tuple(values) if values is not None else None


class ObjectRef(_NamedRef):
    """ Reference to an object type or interface by name. """


BaseType = Union[ScalarKind, EnumRef, ObjectRef]


class FieldShape:
    """
    Describe the type of a field, including its list and nullability markers.

    Args:
        base: Named type the field produces
        nullable: Whether the field (or the list when ``is_list``) can be null
        is_list: Whether the field is a list of ``base``
        item_nullable: Whether list items can be null, only meaningful for
            lists

    Attributes:
        base (Union[ScalarKind, EnumRef, ObjectRef]): Named type the field
            produces
        nullable (bool): Outer nullability
        is_list (bool): List wrapping
        item_nullable (bool): Item nullability
    """

    __slots__ = ("base", "nullable", "is_list", "item_nullable")

    def __init__(
        self,
        base: BaseType,
        nullable: bool = False,
        is_list: bool = False,
        item_nullable: bool = False,
    ):
        if not isinstance(base, (ScalarKind, EnumRef, ObjectRef)):
            raise ConfigurationError("Invalid field base type %r" % (base,))
        self.base = base
        self.nullable = nullable
        self.is_list = is_list
        self.item_nullable = item_nullable

    @property
    def type_name(self) -> str:
        if isinstance(self.base, ScalarKind):
            return self.base.value
        return self.base.name

    @property
    def is_object(self) -> bool:
        return isinstance(self.base, ObjectRef)

    @property
    def is_enum(self) -> bool:
        return isinstance(self.base, EnumRef)

    @property
    def is_string(self) -> bool:
        return isinstance(self.base, ScalarKind) and self.base.is_string

    def __str__(self) -> str:
        if not self.is_list:
            return "%s%s" % (self.type_name, "" if self.nullable else "!")
        return "[%s%s]%s" % (
            self.type_name,
            "" if self.item_nullable else "!",
            "" if self.nullable else "!",
        )

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self)
