# -*- coding: utf-8 -*-
""" Package a schema builder's definitions for output. """

from typing import List, Optional

from .builder import SchemaBuilder
from .exc import ConfigurationError
from .printer import SchemaPrinter
from .typedefs.definitions import NamedDefinition


class Config:
    """
    Final schema configuration.

    Definitions are captured when the config is created; the SDL is rendered
    on demand.

    Args:
        schema: Builder holding the definitions
        indent: Indentation of field lines, see
            :class:`~py_sdl.printer.SchemaPrinter`

    Attributes:
        definitions (List[NamedDefinition]): Definitions in registration order
    """

    __slots__ = ("definitions", "_printer")

    def __init__(self, schema: SchemaBuilder, indent=2):
        if not isinstance(schema, SchemaBuilder):
            raise ConfigurationError(
                "Expected a schema builder, got %r" % (schema,)
            )
        self.definitions = schema.definitions()  # type: List[NamedDefinition]
        self._printer = SchemaPrinter(indent=indent)

    def to_string(self) -> str:
        return self._printer(self.definitions)

    def __str__(self) -> str:
        return self.to_string()


def config(schema: Optional[SchemaBuilder] = None, indent=2) -> Config:
    """
    Build the final configuration of a schema.

    >>> from py_sdl import SchemaBuilder
    >>> g = SchemaBuilder()
    >>> _ = g.enum("Color", ["RED", "GREEN"])
    >>> print(config(schema=g))
    enum Color {
      RED
      GREEN
    }
    """
    if schema is None:
        raise ConfigurationError("A schema is required")
    return Config(schema, indent=indent)
