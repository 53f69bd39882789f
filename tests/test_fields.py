# -*- coding: utf-8 -*-
"""
Test decorator chains.
"""

import datetime
import decimal

import pytest

from py_sdl.exc import ConfigurationError
from py_sdl.typedefs import (
    CACHEABLE,
    WRAPPABLE,
    AuthRules,
    DecoratorKind,
    EnumRef,
    ObjectRef,
    ScalarDefinition,
    ScalarKind,
)


def string():
    return ScalarDefinition(ScalarKind.String)


def test_length_min_and_max():
    assert string().length(min=3, max=10).render() == (
        "String! @length(min: 3, max: 10)"
    )


def test_length_max_only():
    assert string().length(max=10).render() == "String! @length(max: 10)"


def test_length_min_only():
    assert string().length(min=1).render() == "String! @length(min: 1)"


def test_length_zero_bound_is_rendered():
    assert string().length(min=0).render() == "String! @length(min: 0)"


def test_length_without_bounds_is_rejected():
    with pytest.raises(ConfigurationError):
        string().length()


@pytest.mark.parametrize(
    "kwargs",
    [{"min": -1}, {"max": "10"}, {"min": 1.5}, {"min": True}, {"min": 5, "max": 2}],
)
def test_length_invalid_bounds(kwargs):
    with pytest.raises(ConfigurationError):
        string().length(**kwargs)


@pytest.mark.parametrize(
    "field",
    [
        ScalarDefinition(ScalarKind.Int),
        ScalarDefinition(ScalarKind.Boolean),
        ScalarDefinition(EnumRef("Color")),
        ScalarDefinition(ObjectRef("Fruit")),
        ScalarDefinition(ScalarKind.String).list(),
    ],
)
def test_length_requires_a_string_scalar(field):
    with pytest.raises(ConfigurationError):
        field.length(max=10)


def test_length_accepts_other_string_scalars():
    field = ScalarDefinition(ScalarKind.Email).length(max=255)
    assert field.render() == "Email! @length(max: 255)"


def test_unique():
    assert string().unique().render() == "String! @unique"


def test_unique_with_scope():
    assert string().unique(["email", "org"]).render() == (
        'String! @unique(fields: ["email", "org"])'
    )


@pytest.mark.parametrize("scope", ["email", ["not valid"], [1]])
def test_unique_invalid_scope(scope):
    with pytest.raises(ConfigurationError):
        string().unique(scope)


def test_search():
    assert ScalarDefinition(ScalarKind.Int).search().render() == "Int! @search"


@pytest.mark.parametrize(
    "kind, value, expected",
    [
        (ScalarKind.String, "foo", '"foo"'),
        (ScalarKind.String, 'say "hi"', '"say \\"hi\\""'),
        (ScalarKind.Int, 42, "42"),
        (ScalarKind.BigInt, -1, "-1"),
        (ScalarKind.Float, 4.5, "4.5"),
        (ScalarKind.Float, 4, "4"),
        (ScalarKind.Boolean, False, "false"),
        (ScalarKind.Date, datetime.date(2020, 1, 31), '"2020-01-31"'),
        (ScalarKind.DateTime, "2020-01-31T00:00:00Z", '"2020-01-31T00:00:00Z"'),
        (ScalarKind.JSON, {"a": [1, None]}, "{a: [1, null]}"),
        (ScalarKind.Decimal, decimal.Decimal("1.50"), "1.50"),
        (ScalarKind.Date, "2020-01-31", '"2020-01-31"'),
        (ScalarKind.DateTime, "2020-01-31T10:30:00", '"2020-01-31T10:30:00"'),
        (
            ScalarKind.DateTime,
            "2020-01-31T10:30:00+02:00",
            '"2020-01-31T10:30:00+02:00"',
        ),
        (
            ScalarKind.JSON,
            {"_id": 1, "nested": {"ok": True}},
            "{_id: 1, nested: {ok: true}}",
        ),
    ],
)
def test_default_literals(kind, value, expected):
    field = ScalarDefinition(kind).default(value)
    assert field.render() == "%s! @default(value: %s)" % (kind.value, expected)


def test_default_enum_value_is_not_quoted():
    field = ScalarDefinition(EnumRef("Color", ["RED", "GREEN"])).default("RED")
    assert field.render() == "Color! @default(value: RED)"


def test_default_list():
    field = ScalarDefinition(ScalarKind.Int).list().default([1, 2])
    assert field.render() == "[Int!]! @default(value: [1, 2])"


@pytest.mark.parametrize(
    "field, value",
    [
        (ScalarDefinition(ScalarKind.String), 1),
        (ScalarDefinition(ScalarKind.Int), "1"),
        (ScalarDefinition(ScalarKind.Int), True),
        (ScalarDefinition(ScalarKind.Int), 1.5),
        (ScalarDefinition(ScalarKind.Boolean), 0),
        (ScalarDefinition(ScalarKind.Date), datetime.datetime(2020, 1, 1)),
        (ScalarDefinition(ScalarKind.String), None),
        (ScalarDefinition(EnumRef("Color", ["RED"])), "BLUE"),
        (ScalarDefinition(ScalarKind.Int).list(), 1),
        (ScalarDefinition(ScalarKind.Int).list(), [1, None]),
        (ScalarDefinition(ObjectRef("Fruit")), "foo"),
        (ScalarDefinition(ScalarKind.Float), float("nan")),
        (ScalarDefinition(ScalarKind.Float), float("inf")),
        (ScalarDefinition(ScalarKind.Float), float("-inf")),
        (ScalarDefinition(ScalarKind.Decimal), decimal.Decimal("NaN")),
        (ScalarDefinition(ScalarKind.Decimal), decimal.Decimal("Infinity")),
        (ScalarDefinition(ScalarKind.JSON), {"a": float("nan")}),
        (ScalarDefinition(ScalarKind.JSON), {"my-key": 1}),
        (ScalarDefinition(ScalarKind.JSON), {"a": {"1b": 1}}),
        (ScalarDefinition(ScalarKind.JSON), {1: "a"}),
        (ScalarDefinition(ScalarKind.Date), "yesterday"),
        (ScalarDefinition(ScalarKind.Date), "2020-02-30"),
        (ScalarDefinition(ScalarKind.DateTime), "tomorrow"),
        (ScalarDefinition(ScalarKind.DateTime), "2020-01-31T25:00:00"),
    ],
)
def test_default_value_must_match_the_scalar(field, value):
    with pytest.raises(ConfigurationError):
        field.default(value)


def test_default_list_accepts_null_items_when_nullable():
    field = ScalarDefinition(ScalarKind.Int).optional().list().default([1, None])
    assert field.render() == "[Int]! @default(value: [1, null])"


def test_field_cache():
    assert string().cache(60).render() == "String! @cache(maxAge: 60)"


def test_field_cache_with_stale_while_revalidate():
    assert string().cache(60, 30).render() == (
        "String! @cache(maxAge: 60, staleWhileRevalidate: 30)"
    )


def test_auth():
    field = string().auth(lambda rules: rules.private())
    assert field.render() == "String! @auth(rules: [{ allow: private }])"


def test_auth_accepts_built_rules():
    rules = AuthRules()
    rules.owner().read()
    field = string().auth(rules)
    assert field.render() == (
        "String! @auth(rules: [{ allow: owner, operations: [read] }])"
    )


def test_auth_requires_rules():
    with pytest.raises(ConfigurationError):
        string().auth(lambda rules: None)

    with pytest.raises(ConfigurationError):
        string().auth(AuthRules())


def test_directives_render_in_call_order():
    field = (
        string()
        .length(min=1, max=32)
        .unique()
        .search()
        .auth(lambda r: r.private())
        .cache(30)
    )
    assert field.render() == (
        "String! @length(min: 1, max: 32) @unique @search "
        "@auth(rules: [{ allow: private }]) @cache(maxAge: 30)"
    )


def test_cache_then_auth():
    field = string().cache(30).auth(lambda r: r.public())
    assert field.render() == (
        "String! @cache(maxAge: 30) @auth(rules: [{ allow: public }])"
    )


def test_directive_methods_return_new_nodes():
    scalar = string()
    unique = scalar.unique()
    assert unique is not scalar
    assert unique.inner is scalar
    assert scalar.render() == "String!"


def test_optional_on_decorated_field_mutates_the_leaf():
    scalar = string()
    field = scalar.length(max=10).unique()
    assert field.optional() is field
    assert field.render() == "String @length(max: 10) @unique"
    assert scalar.render() == "String"


def test_rendering_is_idempotent():
    field = string().length(max=10).search()
    assert field.render() == field.render() == str(field)


def test_kinds_iterates_from_outermost():
    field = string().unique().search()
    assert list(field.kinds()) == [
        DecoratorKind.Search,
        DecoratorKind.Unique,
        DecoratorKind.Scalar,
    ]


@pytest.mark.parametrize(
    "build",
    [
        lambda: string().unique().length(max=10),
        lambda: string().search().unique(),
        lambda: string().search().default("a"),
        lambda: string().default("a").length(max=3),
        lambda: string().cache(10).unique(),
        lambda: string().auth(lambda r: r.private()).search(),
    ],
)
def test_incompatible_wrapping_is_rejected(build):
    with pytest.raises(ConfigurationError):
        build()


@pytest.mark.parametrize(
    "build",
    [
        lambda: string().cache(10).cache(10),
        lambda: string().cache(10).auth(lambda r: r.private()).cache(10),
        lambda: string().auth(lambda r: r.private()).auth(lambda r: r.public()),
    ],
)
def test_directive_cannot_be_repeated(build):
    with pytest.raises(ConfigurationError):
        build()


@pytest.mark.parametrize("method", ["unique", "search"])
def test_leaf_directives_reject_references(method):
    with pytest.raises(ConfigurationError):
        getattr(ScalarDefinition(ObjectRef("Fruit")), method)()


def test_references_can_be_cached_and_protected():
    field = (
        ScalarDefinition(ObjectRef("Fruit"))
        .optional()
        .cache(10)
        .auth(lambda r: r.private())
    )
    assert field.render() == (
        "Fruit @cache(maxAge: 10) @auth(rules: [{ allow: private }])"
    )


def test_wrap_table_covers_every_directive():
    assert set(WRAPPABLE) == set(DecoratorKind) - {DecoratorKind.Scalar}
    assert WRAPPABLE[DecoratorKind.Cache] == CACHEABLE
    assert DecoratorKind.Cache not in CACHEABLE
