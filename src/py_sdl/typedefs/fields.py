# -*- coding: utf-8 -*-
"""
Field definitions as decorator chains.

A field starts as a :class:`ScalarDefinition` describing its type. Every
directive method (:meth:`~FieldDefinition.length`,
:meth:`~FieldDefinition.unique`, :meth:`~FieldDefinition.cache`, ...) returns
a new node wrapping the receiver so the chain renders directives in call
order, the outermost call being rendered last:

>>> from py_sdl.typedefs.shapes import ScalarKind
>>> field = ScalarDefinition(ScalarKind.String).length(min=3).unique()
>>> field.render()
'String! @length(min: 3) @unique'

:meth:`~FieldDefinition.optional` and :meth:`ScalarDefinition.list` do not
wrap, they mutate the underlying shape in place and return the receiver.

Which node may wrap which is described by :data:`WRAPPABLE` and enforced when
a node is created; violations raise :class:`~py_sdl.exc.ConfigurationError`.
"""

import enum
from typing import Any, Callable, FrozenSet, Iterator, List, Optional, Union

from .._string_utils import is_name, quoted_list
from ..exc import ConfigurationError
from .auth import AuthRules
from .cache import FieldCache
from .shapes import BaseType, FieldShape
from .values import check_default_value, print_value


class DecoratorKind(enum.Enum):
    Scalar = "scalar"
    LengthLimit = "length"
    Unique = "unique"
    Default = "default"
    Search = "search"
    Auth = "auth"
    Cache = "cache"


_K = DecoratorKind

# Kinds a field level ``@cache`` can wrap.
CACHEABLE = frozenset(
    (_K.Scalar, _K.LengthLimit, _K.Unique, _K.Default, _K.Search, _K.Auth)
)  # type: FrozenSet[DecoratorKind]

# Outer kind -> kinds of the node it may directly wrap.
WRAPPABLE = {
    _K.LengthLimit: frozenset((_K.Scalar,)),
    _K.Unique: frozenset((_K.Scalar, _K.LengthLimit)),
    _K.Default: frozenset((_K.Scalar, _K.LengthLimit, _K.Unique)),
    _K.Search: frozenset((_K.Scalar, _K.LengthLimit, _K.Unique, _K.Default)),
    _K.Auth: frozenset(
        (
            _K.Scalar,
            _K.LengthLimit,
            _K.Unique,
            _K.Default,
            _K.Search,
            _K.Cache,
        )
    ),
    _K.Cache: CACHEABLE,
}

# Directives which only make sense on leaf values, not object references.
LEAF_ONLY = frozenset((_K.LengthLimit, _K.Unique, _K.Default, _K.Search))


class FieldDefinition:
    """
    Base class for all nodes of a field's decorator chain.

    Attributes:
        kind (DecoratorKind): Node kind
        shape (FieldShape): Shape of the underlying scalar, shared by every
            node of the chain
    """

    __slots__ = ()

    kind = NotImplemented  # type: DecoratorKind

    @property
    def leaf(self) -> "ScalarDefinition":
        raise NotImplementedError()

    @property
    def shape(self) -> FieldShape:
        return self.leaf.shape

    def kinds(self) -> Iterator[DecoratorKind]:
        """ Iterate over the kinds of this chain from outermost to leaf. """
        node = self  # type: Optional[FieldDefinition]
        while node is not None:
            yield node.kind
            node = getattr(node, "inner", None)

    def optional(self) -> "FieldDefinition":
        """ Make the field nullable. Mutates the chain and returns it. """
        self.shape.nullable = True
        return self

    def list(self) -> "FieldDefinition":
        raise ConfigurationError(
            "Only undecorated scalar fields can be turned into lists, "
            "call list() before adding directives"
        )

    def length(
        self, min: Optional[int] = None, max: Optional[int] = None
    ) -> "LengthLimitDefinition":
        """ Limit the length of a string field. """
        return LengthLimitDefinition(self, min=min, max=max)

    def unique(self, scope: Optional[List[str]] = None) -> "UniqueDefinition":
        """
        Make the field unique.

        Args:
            scope: Additional fields to be added to the constraint
        """
        return UniqueDefinition(self, scope)

    def default(self, value: Any) -> "DefaultDefinition":
        """ Set the value written when none is provided. """
        return DefaultDefinition(self, value)

    def search(self) -> "SearchDefinition":
        """ Make the field searchable. """
        return SearchDefinition(self)

    def auth(
        self, rules: Union[Callable[[AuthRules], Any], AuthRules]
    ) -> "AuthDefinition":
        """
        Set the field level auth directive.

        Args:
            rules: Callback building the rules from an
                :class:`~py_sdl.typedefs.auth.AuthRules` instance, or an
                already built collection
        """
        return AuthDefinition(self, rules)

    def cache(
        self, max_age: int, stale_while_revalidate: Optional[int] = None
    ) -> "CacheDefinition":
        """ Set the field level cache directive. """
        return CacheDefinition(self, max_age, stale_while_revalidate)

    def render(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return "<%s %s>" % (self.__class__.__name__, self.render())


class ScalarDefinition(FieldDefinition):
    """
    Leaf of a decorator chain.

    Args:
        base: Named type the field produces
        nullable: Whether the field is nullable
    """

    __slots__ = ("shape",)

    kind = DecoratorKind.Scalar

    def __init__(self, base: BaseType, nullable: bool = False):
        self.shape = FieldShape(base, nullable=nullable)

    @property
    def leaf(self) -> "ScalarDefinition":
        return self

    def list(self) -> "ScalarDefinition":
        """
        Turn the field into a list of its current type. The current
        nullability applies to the items and the list itself is required
        until :meth:`optional` is called.
        """
        shape = self.shape
        if shape.is_list:
            raise ConfigurationError("Nested lists are not supported")
        shape.is_list = True
        shape.item_nullable = shape.nullable
        shape.nullable = False
        return self

    def render(self) -> str:
        return str(self.shape)


class WrappingDefinition(FieldDefinition):
    """
    A directive node owning the previous node of the chain.

    Raises:
        ConfigurationError: if ``inner`` cannot be wrapped by this kind
    """

    __slots__ = ("inner",)

    def __init__(self, inner: FieldDefinition):
        _check_wrap(self.kind, inner)
        self.inner = inner

    @property
    def leaf(self) -> ScalarDefinition:
        return self.inner.leaf

    def directive(self) -> str:
        raise NotImplementedError()

    def render(self) -> str:
        return "%s %s" % (self.inner.render(), self.directive())


def _check_wrap(kind: DecoratorKind, inner: Any) -> None:
    if not isinstance(inner, FieldDefinition):
        raise ConfigurationError(
            "@%s must wrap a field definition, got %r" % (kind.value, inner)
        )

    if inner.kind not in WRAPPABLE[kind]:
        raise ConfigurationError(
            "@%s cannot be applied to a %s field"
            % (kind.value, inner.kind.name)
        )

    if kind in inner.kinds():
        raise ConfigurationError(
            "@%s is already applied to this field" % kind.value
        )

    if kind in LEAF_ONLY and inner.shape.is_object:
        raise ConfigurationError(
            "@%s cannot be applied to reference field %s"
            % (kind.value, inner.shape)
        )


def _check_bound(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "Length %s must be an integer, got %r" % (name, value)
        )
    if value < 0:
        raise ConfigurationError(
            "Length %s must be positive, got %d" % (name, value)
        )


class LengthLimitDefinition(WrappingDefinition):
    """ ``@length`` on a string field, at least one bound is required. """

    __slots__ = ("min", "max")

    kind = DecoratorKind.LengthLimit

    def __init__(
        self,
        inner: FieldDefinition,
        min: Optional[int] = None,
        max: Optional[int] = None,
    ):
        super().__init__(inner)

        shape = inner.shape
        if not shape.is_string or shape.is_list:
            raise ConfigurationError(
                "@length can only be applied to string fields, got %s" % shape
            )

        if min is None and max is None:
            raise ConfigurationError("@length requires at least min or max")
        _check_bound("min", min)
        _check_bound("max", max)
        if min is not None and max is not None and min > max:
            raise ConfigurationError(
                "Length min (%d) cannot be greater than max (%d)" % (min, max)
            )

        self.min = min
        self.max = max

    def directive(self) -> str:
        if self.min is not None and self.max is not None:
            return "@length(min: %d, max: %d)" % (self.min, self.max)
        elif self.min is not None:
            return "@length(min: %d)" % self.min
        return "@length(max: %d)" % self.max


class UniqueDefinition(WrappingDefinition):
    """ ``@unique``, optionally scoped by other fields of the type. """

    __slots__ = ("scope",)

    kind = DecoratorKind.Unique

    def __init__(
        self, inner: FieldDefinition, scope: Optional[List[str]] = None
    ):
        super().__init__(inner)

        if scope is None:
            scope = []
        elif isinstance(scope, str):
            raise ConfigurationError(
                "Unique scope must be a list of field names, got %r" % scope
            )

        for name in scope:
            if not is_name(name):
                raise ConfigurationError(
                    "Invalid field name %r in unique scope" % (name,)
                )

        self.scope = list(scope)

    def directive(self) -> str:
        if not self.scope:
            return "@unique"
        return "@unique(fields: %s)" % quoted_list(self.scope)


class DefaultDefinition(WrappingDefinition):

    __slots__ = ("value",)

    kind = DecoratorKind.Default

    def __init__(self, inner: FieldDefinition, value: Any):
        super().__init__(inner)
        check_default_value(inner.shape, value)
        self.value = value

    def directive(self) -> str:
        return "@default(value: %s)" % print_value(
            self.value, enum=self.shape.is_enum
        )


class SearchDefinition(WrappingDefinition):

    __slots__ = ()

    kind = DecoratorKind.Search

    def directive(self) -> str:
        return "@search"


class AuthDefinition(WrappingDefinition):

    __slots__ = ("rules",)

    kind = DecoratorKind.Auth

    def __init__(
        self,
        inner: FieldDefinition,
        rules: Union[Callable[[AuthRules], Any], AuthRules],
    ):
        super().__init__(inner)
        if isinstance(rules, AuthRules):
            if not rules.rules:
                raise ConfigurationError("At least one auth rule is required")
            self.rules = rules
        else:
            self.rules = AuthRules.build(rules)

    def directive(self) -> str:
        return "@auth(rules: %s)" % self.rules


class CacheDefinition(WrappingDefinition):

    __slots__ = ("params",)

    kind = DecoratorKind.Cache

    def __init__(
        self,
        inner: FieldDefinition,
        max_age: int,
        stale_while_revalidate: Optional[int] = None,
    ):
        super().__init__(inner)
        self.params = FieldCache(max_age, stale_while_revalidate)

    def directive(self) -> str:
        return str(self.params)
