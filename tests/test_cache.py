# -*- coding: utf-8 -*-

import pytest

from py_sdl.exc import ConfigurationError
from py_sdl.typedefs import (
    ENTITY,
    LIST,
    TYPE,
    FieldCache,
    MutationInvalidation,
    TypeCache,
)


def test_field_cache_max_age_only():
    assert str(FieldCache(60)) == "@cache(maxAge: 60)"


def test_field_cache_stale_while_revalidate():
    assert str(FieldCache(60, 10)) == (
        "@cache(maxAge: 60, staleWhileRevalidate: 10)"
    )


def test_zero_stale_while_revalidate_is_left_out():
    assert str(FieldCache(60, 0)) == "@cache(maxAge: 60)"


def test_zero_max_age_is_rendered():
    assert str(FieldCache(0)) == "@cache(maxAge: 0)"


@pytest.mark.parametrize(
    "args", [(None,), (-1,), ("60",), (True,), (60, -5), (60, 1.5)]
)
def test_invalid_durations(args):
    with pytest.raises(ConfigurationError):
        FieldCache(*args)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((60,), "@cache(maxAge: 60)"),
        ((60, 30), "@cache(maxAge: 60, staleWhileRevalidate: 30)"),
        ((60, None, "type"), "@cache(maxAge: 60, mutationInvalidation: type)"),
        (
            (60, 30, ENTITY),
            "@cache(maxAge: 60, staleWhileRevalidate: 30, "
            "mutationInvalidation: entity)",
        ),
        (
            (60, None, MutationInvalidation.field("email")),
            '@cache(maxAge: 60, mutationInvalidation: { field: "email" })',
        ),
    ],
)
def test_type_cache(args, expected):
    assert str(TypeCache(*args)) == expected


@pytest.mark.parametrize(
    "policy, expected", [(ENTITY, "entity"), (TYPE, "type"), (LIST, "list")]
)
def test_policies(policy, expected):
    assert str(policy) == expected
    assert MutationInvalidation.coerce(expected) == policy


@pytest.mark.parametrize("value", ["everything", "", "field"])
def test_unknown_policy(value):
    with pytest.raises(ConfigurationError):
        TypeCache(60, mutation_invalidation=value)


def test_field_policy_requires_valid_name():
    with pytest.raises(ConfigurationError):
        MutationInvalidation.field("not a field")
