# -*- coding: utf-8 -*-
"""
py_sdl

py_sdl is a fluent builder for `GraphQL <https://graphql.org/>`_ schema
definitions (SDL) for Python 3.6+.

Declare fields, interfaces and types through a :class:`SchemaBuilder`, decorate
fields with directives (``@length``, ``@unique``, ``@cache``, ...) and render
everything with :func:`config`.
"""

from .version import __version__  # isort:skip

from . import typedefs  # noqa: F401
from .builder import SchemaBuilder
from .config import Config, config
from .exc import (
    ConfigurationError,
    DuplicateDefinitionError,
    FieldConflictError,
    SDLBuilderError,
    UnknownDefinition,
)
from .printer import SchemaPrinter, print_definition, print_schema
from .registry import Registry
from .typedefs.cache import MutationInvalidation


__all__ = (
    "__version__",
    "SchemaBuilder",
    "Config",
    "config",
    "ConfigurationError",
    "DuplicateDefinitionError",
    "FieldConflictError",
    "SDLBuilderError",
    "UnknownDefinition",
    "SchemaPrinter",
    "print_definition",
    "print_schema",
    "Registry",
    "MutationInvalidation",
)
