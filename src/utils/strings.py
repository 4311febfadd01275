"""
String casing helpers for attribute and event names.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def decamelize(value: str) -> str:
    """
    Convert a camelCase name to lowercase snake_case.

    Examples:
        >>> decamelize("boundsChanged")
        'bounds_changed'
        >>> decamelize("dblclick")
        'dblclick'
    """
    return _CAMEL_BOUNDARY.sub(r"\1_\2", value).lower()
