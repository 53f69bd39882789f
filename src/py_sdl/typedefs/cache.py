# -*- coding: utf-8 -*-
""" Parameters and text forms of the ``@cache`` directive. """

from typing import Optional, Union

from .._string_utils import is_name, quote
from ..exc import ConfigurationError

MUTATION_INVALIDATION_POLICIES = ("entity", "type", "list")


class MutationInvalidation:
    """
    Which cached entries a mutation on the type invalidates.

    Use one of the module level policies ``ENTITY``, ``TYPE``, ``LIST`` or
    :meth:`field` to invalidate entities keyed by a specific field.

    >>> str(MutationInvalidation.field("email"))
    '{ field: "email" }'
    """

    __slots__ = ("policy", "field_name")

    def __init__(self, policy: str, field_name: Optional[str] = None):
        if policy == "field":
            if not is_name(field_name):
                raise ConfigurationError(
                    "Invalid mutation invalidation field %r" % (field_name,)
                )
        elif policy not in MUTATION_INVALIDATION_POLICIES:
            raise ConfigurationError(
                "Unknown mutation invalidation policy %r, expected one of %s"
                % (policy, ", ".join(MUTATION_INVALIDATION_POLICIES))
            )
        self.policy = policy
        self.field_name = field_name

    @classmethod
    def field(cls, name: str) -> "MutationInvalidation":
        return cls("field", name)

    @classmethod
    def coerce(
        cls, value: Union["MutationInvalidation", str]
    ) -> "MutationInvalidation":
        if isinstance(value, cls):
            return value
        return cls(value)

    def __eq__(self, rhs):
        return (
            isinstance(rhs, MutationInvalidation)
            and self.policy == rhs.policy
            and self.field_name == rhs.field_name
        )

    def __hash__(self):
        return hash((self.policy, self.field_name))

    def __str__(self) -> str:
        if self.policy == "field":
            return "{ field: %s }" % quote(self.field_name)
        return self.policy


ENTITY = MutationInvalidation("entity")
TYPE = MutationInvalidation("type")
LIST = MutationInvalidation("list")


def _check_seconds(name: str, value: Optional[int], required: bool = False):
    if value is None and not required:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "%s must be an integer number of seconds, got %r" % (name, value)
        )
    if value < 0:
        raise ConfigurationError("%s must be positive, got %d" % (name, value))


class FieldCache:
    """
    Field level cache parameters.

    Args:
        max_age: Number of seconds a cached value is fresh
        stale_while_revalidate: Number of seconds a stale value can still be
            served while it is being refreshed
    """

    __slots__ = ("max_age", "stale_while_revalidate")

    def __init__(
        self, max_age: int, stale_while_revalidate: Optional[int] = None
    ):
        _check_seconds("maxAge", max_age, required=True)
        _check_seconds("staleWhileRevalidate", stale_while_revalidate)
        self.max_age = max_age
        self.stale_while_revalidate = stale_while_revalidate

    def arguments(self):
        args = ["maxAge: %d" % self.max_age]
        # Zero is the server default and is left out.
        if self.stale_while_revalidate:
            args.append(
                "staleWhileRevalidate: %d" % self.stale_while_revalidate
            )
        return args

    def __str__(self) -> str:
        return "@cache(%s)" % ", ".join(self.arguments())


class TypeCache(FieldCache):
    """
    Type level cache parameters.

    Args:
        max_age: Number of seconds a cached value is fresh
        stale_while_revalidate: Number of seconds a stale value can still be
            served while it is being refreshed
        mutation_invalidation: Invalidation policy applied when the type is
            mutated, either a :class:`MutationInvalidation` or one of
            ``"entity"``, ``"type"`` and ``"list"``

    >>> str(TypeCache(60, 10, "entity"))
    '@cache(maxAge: 60, staleWhileRevalidate: 10, mutationInvalidation: entity)'
    """

    __slots__ = ("mutation_invalidation",)

    def __init__(
        self,
        max_age: int,
        stale_while_revalidate: Optional[int] = None,
        mutation_invalidation: Optional[
            Union[MutationInvalidation, str]
        ] = None,
    ):
        super().__init__(max_age, stale_while_revalidate)
        self.mutation_invalidation = (
            MutationInvalidation.coerce(mutation_invalidation)
            if mutation_invalidation is not None
            else None
        )

    def arguments(self):
        args = super().arguments()
        if self.mutation_invalidation is not None:
            args.append("mutationInvalidation: %s" % self.mutation_invalidation)
        return args
