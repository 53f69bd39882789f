# -*- coding: utf-8 -*-
"""
Authorization rules rendered as the ``rules`` argument of ``@auth``.

Rules are built through a callback receiving an :class:`AuthRules` instance:

>>> rules = AuthRules.build(lambda r: r.groups(["admin"]).create().delete())
>>> str(rules)
'[{ allow: groups, groups: ["admin"], operations: [create, delete] }]'
"""

from typing import Callable, List, Optional, Sequence

from .._string_utils import quoted_list
from ..exc import ConfigurationError


class AuthRule:
    """
    A single ``{ allow: ... }`` entry.

    Operation methods restrict the rule to the given operations, they mutate
    the rule and return it so calls can be chained.
    """

    __slots__ = ("allow", "groups", "operations")

    def __init__(self, allow: str, groups: Optional[Sequence[str]] = None):
        self.allow = allow
        self.groups = list(groups) if groups is not None else None
        self.operations = []  # type: List[str]

    def _add(self, operation: str) -> "AuthRule":
        if operation not in self.operations:
            self.operations.append(operation)
        return self

    def create(self) -> "AuthRule":
        return self._add("create")

    def read(self) -> "AuthRule":
        return self._add("read")

    def get(self) -> "AuthRule":
        return self._add("get")

    def list(self) -> "AuthRule":
        return self._add("list")

    def update(self) -> "AuthRule":
        return self._add("update")

    def delete(self) -> "AuthRule":
        return self._add("delete")

    def __str__(self) -> str:
        parts = ["allow: %s" % self.allow]
        if self.groups is not None:
            parts.append("groups: %s" % quoted_list(self.groups))
        if self.operations:
            parts.append("operations: [%s]" % ", ".join(self.operations))
        return "{ %s }" % ", ".join(parts)


class AuthRules:
    """ Ordered collection of :class:`AuthRule`. """

    __slots__ = ("rules",)

    def __init__(self):
        self.rules = []  # type: List[AuthRule]

    @classmethod
    def build(cls, fn: Callable[["AuthRules"], object]) -> "AuthRules":
        """
        Run a rule building callback against a fresh collection.

        Raises:
            ConfigurationError: if the callback did not add any rule
        """
        if not callable(fn):
            raise ConfigurationError(
                "Expected a callable building auth rules, got %r" % (fn,)
            )
        rules = cls()
        fn(rules)
        if not rules.rules:
            raise ConfigurationError("At least one auth rule is required")
        return rules

    def _add(self, rule: AuthRule) -> AuthRule:
        self.rules.append(rule)
        return rule

    def private(self) -> AuthRule:
        """ Allow any signed in user. """
        return self._add(AuthRule("private"))

    def public(self) -> AuthRule:
        return self._add(AuthRule("public"))

    def owner(self) -> AuthRule:
        """ Allow the user owning the entity. """
        return self._add(AuthRule("owner"))

    def groups(self, groups: Sequence[str]) -> AuthRule:
        """ Allow members of any of the given groups. """
        if isinstance(groups, str) or not groups:
            raise ConfigurationError(
                "Expected a non empty list of group names, got %r" % (groups,)
            )
        for group in groups:
            if not isinstance(group, str) or not group:
                raise ConfigurationError("Invalid group name %r" % (group,))
        return self._add(AuthRule("groups", groups))

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __str__(self) -> str:
        return "[%s]" % ", ".join(str(rule) for rule in self.rules)
