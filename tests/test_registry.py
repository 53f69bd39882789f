# -*- coding: utf-8 -*-

import logging

import pytest

from py_sdl import Registry
from py_sdl.exc import (
    ConfigurationError,
    DuplicateDefinitionError,
    UnknownDefinition,
)
from py_sdl.typedefs import (
    EnumDefinition,
    InterfaceDefinition,
    ScalarDefinition,
    ScalarKind,
    TypeDefinition,
)


def _field():
    return ScalarDefinition(ScalarKind.String)


def test_definitions_are_kept_in_registration_order():
    registry = Registry()
    t = registry.register_type(TypeDefinition("T", {"a": _field()}))
    i = registry.register_interface(InterfaceDefinition("I", {"a": _field()}))
    e = registry.register_enum(EnumDefinition("E", ["A"]))
    assert registry.definitions() == [t, i, e]
    assert list(registry) == [t, i, e]
    assert len(registry) == 3


def test_get():
    registry = Registry()
    t = registry.register_type(TypeDefinition("T", {"a": _field()}))
    assert registry.get("T") is t
    assert "T" in registry
    assert "U" not in registry


def test_get_unknown():
    with pytest.raises(UnknownDefinition) as exc_info:
        Registry().get("Missing")
    assert str(exc_info.value) == "Unknown definition Missing"


def test_names_are_unique_across_kinds():
    registry = Registry()
    registry.register_interface(InterfaceDefinition("Node", {"a": _field()}))
    with pytest.raises(DuplicateDefinitionError):
        registry.register_type(TypeDefinition("Node", {"a": _field()}))


def test_register_checks_definition_kind():
    with pytest.raises(ConfigurationError):
        Registry().register_interface(TypeDefinition("T", {"a": _field()}))


def test_clear_on_empty_registry():
    registry = Registry()
    registry.clear()
    assert registry.definitions() == []


def test_clear_allows_fresh_registration():
    registry = Registry()
    registry.register_type(TypeDefinition("T", {"a": _field()}))
    registry.clear()
    assert len(registry) == 0
    t = registry.register_type(TypeDefinition("T", {"b": _field()}))
    assert registry.definitions() == [t]


def test_registration_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="py_sdl.registry"):
        Registry().register_enum(EnumDefinition("E", ["A"]))
    assert "Registered EnumDefinition E" in caplog.text
