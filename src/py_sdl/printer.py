# -*- coding: utf-8 -*-
""" Export definitions as SDL. """

from typing import Iterable, Union

from .typedefs.definitions import (
    EnumDefinition,
    InterfaceDefinition,
    NamedDefinition,
    TypeDefinition,
    check_fields,
    interface_names,
    merge_fields,
)


class SchemaPrinter:
    """
    Args:
        indent (Union[str, int]): Indent character or number of spaces
    """

    __slots__ = ("indent",)

    def __init__(self, indent: Union[str, int] = 2):
        if isinstance(indent, int):
            self.indent = indent * " "
        else:
            self.indent = indent

    def __call__(self, definitions: Iterable[NamedDefinition]) -> str:
        """
        Args:
            definitions: Definitions to format, in output order

        Returns:
            str: Formatted blocks separated by a blank line
        """
        return "\n\n".join(self.print_definition(d) for d in definitions)

    def print_definition(self, definition: NamedDefinition) -> str:
        if isinstance(definition, TypeDefinition):
            return self.print_object_type(definition)
        elif isinstance(definition, InterfaceDefinition):
            return self.print_interface_type(definition)
        elif isinstance(definition, EnumDefinition):
            return self.print_enum_type(definition)

        raise TypeError(definition)

    def print_object_type(self, type_: TypeDefinition) -> str:
        check_fields(type_)
        interfaces = interface_names(type_)
        return "type %s%s%s {\n%s\n}" % (
            type_.name,
            " implements %s" % " & ".join(interfaces) if interfaces else "",
            " %s" % type_.cache_params if type_.cache_params else "",
            self.print_fields(type_),
        )

    def print_interface_type(self, type_: InterfaceDefinition) -> str:
        return "interface %s {\n%s\n}" % (type_.name, self.print_fields(type_))

    def print_fields(
        self, type_: Union[InterfaceDefinition, TypeDefinition]
    ) -> str:
        return "\n".join(
            "%s%s: %s" % (self.indent, name, field.render())
            for name, field in merge_fields(type_)
        )

    def print_enum_type(self, type_: EnumDefinition) -> str:
        return "enum %s {\n%s\n}" % (
            type_.name,
            "\n".join(self.indent + value for value in type_.values),
        )


def print_definition(definition: NamedDefinition, indent=2) -> str:
    """ Render a single definition as an SDL block. """
    return SchemaPrinter(indent=indent).print_definition(definition)


def print_schema(definitions: Iterable[NamedDefinition], indent=2) -> str:
    """ Render definitions as SDL blocks separated by a blank line. """
    return SchemaPrinter(indent=indent)(definitions)
