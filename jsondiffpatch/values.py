# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Admission, copying and structural equality of JSON values.

Values are plain Python objects: dict (str keys), list, str, int,
float, bool and None. Python's `bool` is a subclass of `int`, so
`False == 0` and `True == 1.0` hold for plain `==`. JSON treats
booleans and numbers as distinct, which is why values are compared
with `json_equal` below.
"""

from .errors import InvalidObjectType


__all__ = [
    "check_value", "deep_copy", "json_equal", "equivalent_types",
    "is_number", "is_container",
]


_scalar_types = (str, int, float, bool, type(None))


def check_value(value):
    """Admit a value into the JSON tree model.

    Accepts dicts with str keys, lists, str, int, float, bool and None,
    recursively. Anything else raises InvalidObjectType.
    Returns value unchanged.
    """
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidObjectType(key)
            check_value(item)
    elif isinstance(value, list):
        for item in value:
            check_value(item)
    elif not isinstance(value, _scalar_types):
        raise InvalidObjectType(value)
    return value


def deep_copy(value, copied=None):
    """Return a copy of value that shares no containers with it.

    If a dict `copied` is given, every new container is recorded in it.
    """
    if isinstance(value, dict):
        c = {k: deep_copy(v, copied) for k, v in value.items()}
    elif isinstance(value, list):
        c = [deep_copy(v, copied) for v in value]
    else:
        return value
    if copied is not None:
        copied[id(c)] = c
    return c


def is_number(x):
    "True for int and float values, booleans included."
    return isinstance(x, (int, float))


def is_container(x):
    return isinstance(x, (dict, list))


def equivalent_types(a, b):
    """Check whether two values are of compatible JSON types.

    Numbers are only compatible with numbers of the same boolean-ness.
    """
    if isinstance(a, dict):
        return isinstance(b, dict)
    if isinstance(a, list):
        return isinstance(b, list)
    if isinstance(a, str):
        return isinstance(b, str)
    if a is None:
        return b is None
    if is_number(a) and is_number(b):
        return isinstance(a, bool) == isinstance(b, bool)
    return False


def json_equal(a, b):
    """Compare two JSON values structurally.

    Object key order is irrelevant, array order is significant, and
    booleans never equal numbers (`42 == 42.0`, but `False != 0`).
    """
    if a is b:
        return True
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not json_equal(value, b[key]):
                return False
        return True
    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, str):
        return isinstance(b, str) and a == b
    if a is None:
        return b is None
    if is_number(a) and is_number(b):
        return isinstance(a, bool) == isinstance(b, bool) and a == b
    return False
