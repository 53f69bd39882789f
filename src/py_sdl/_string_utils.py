# -*- coding: utf-8 -*-
""" Work with strings """

import json
import re
import textwrap
from typing import Iterable

VALID_NAME_RE = re.compile(r"^[_a-zA-Z][_a-zA-Z0-9]*$")


def is_name(string: str) -> bool:
    """
    Args:
        string (str): Input value

    Returns:
        bool: Whether the string is a valid GraphQL name

    >>> is_name("Produce")
    True

    >>> is_name("2fast")
    False
    """
    return isinstance(string, str) and bool(VALID_NAME_RE.match(string))


def quote(string: str) -> str:
    """ Quote a string the way GraphQL string literals are written.

    >>> quote('say "hi"')
    '"say \\\\"hi\\\\""'
    """
    return json.dumps(string)


def quoted_list(strings: Iterable[str]) -> str:
    """
    >>> quoted_list(["a", "b"])
    '["a", "b"]'
    """
    return "[%s]" % ", ".join(quote(s) for s in strings)


# Kept for compatibility (only used in tests)
def dedent(raw_string: str) -> str:
    return textwrap.dedent(raw_string).strip("\n")
