# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""


class SDLBuilderError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SDLBuilderError, ValueError):
    """
    A builder call violated a construction contract, e.g. a length limit
    without any bound or a directive wrapping an incompatible field.

    Raised synchronously by the offending call; the definition being built is
    left untouched.
    """


class DuplicateDefinitionError(ConfigurationError):
    pass


class FieldConflictError(SDLBuilderError):
    """
    Two definitions declare the same field name with incompatible types.

    Args:
        message: Explanatory message
        field_name: Name of the conflicting field
        types: Rendered field types involved in the conflict

    Attributes:
        message (str): Explanatory message
        field_name (str): Name of the conflicting field
        types (Tuple[str, str]): Rendered field types involved in the conflict
    """

    def __init__(self, message: str, field_name: str, types=()):
        super().__init__(message)
        self.field_name = field_name
        self.types = tuple(types)


class UnknownDefinition(SDLBuilderError, KeyError):
    pass
