# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion between JSON text and the generic tree value.

Any JSON value is accepted at the top level, not only objects and
arrays, since a patched document may itself be a scalar.
"""

import json

from .values import check_value


__all__ = ["loads", "dumps", "load", "dump"]


def loads(data):
    "Parse JSON text (str, or UTF-8 bytes) into a tree value."
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf8")
    return check_value(json.loads(data))


def load(fp):
    return loads(fp.read())


def dumps(value, indent=None, sort_keys=False):
    "Serialize a tree value to JSON text."
    check_value(value)
    if indent is None:
        separators = (",", ":")
    else:
        separators = (",", ": ")
    return json.dumps(value, indent=indent, sort_keys=sort_keys,
                      separators=separators, allow_nan=False, ensure_ascii=False)


def dump(value, fp, indent=None, sort_keys=False):
    fp.write(dumps(value, indent=indent, sort_keys=sort_keys))
