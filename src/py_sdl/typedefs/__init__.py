# -*- coding: utf-8 -*-
"""
The :mod:`py_sdl.typedefs` module exposes the building blocks of a schema:
field shapes, decorator chains and named definitions.
"""

# flake8: noqa

from .auth import AuthRule, AuthRules
from .cache import (
    ENTITY,
    LIST,
    TYPE,
    FieldCache,
    MutationInvalidation,
    TypeCache,
)
from .definitions import (
    Definition,
    EnumDefinition,
    InterfaceDefinition,
    NamedDefinition,
    TypeDefinition,
    check_fields,
    merge_fields,
)
from .fields import (
    CACHEABLE,
    WRAPPABLE,
    AuthDefinition,
    CacheDefinition,
    DecoratorKind,
    DefaultDefinition,
    FieldDefinition,
    LengthLimitDefinition,
    ScalarDefinition,
    SearchDefinition,
    UniqueDefinition,
)
from .shapes import EnumRef, FieldShape, ObjectRef, ScalarKind

__all__ = (
    "AuthRule",
    "AuthRules",
    "ENTITY",
    "LIST",
    "TYPE",
    "FieldCache",
    "MutationInvalidation",
    "TypeCache",
    "Definition",
    "EnumDefinition",
    "InterfaceDefinition",
    "NamedDefinition",
    "TypeDefinition",
    "check_fields",
    "merge_fields",
    "CACHEABLE",
    "WRAPPABLE",
    "AuthDefinition",
    "CacheDefinition",
    "DecoratorKind",
    "DefaultDefinition",
    "FieldDefinition",
    "LengthLimitDefinition",
    "ScalarDefinition",
    "SearchDefinition",
    "UniqueDefinition",
    "EnumRef",
    "FieldShape",
    "ObjectRef",
    "ScalarKind",
)
