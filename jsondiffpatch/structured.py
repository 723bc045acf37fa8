# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Diffing and patching of dataclass records.

Records are mapped onto the generic JSON tree with `to_tree`, and
rebuilt from a tree with `from_tree`. Fields annotated with another
dataclass type, or with a list or dict of one, are rebuilt recursively.
"""

import dataclasses
import typing

from .diffing import make_patch
from .patching import JSONPatch
from .values import check_value


__all__ = ["to_tree", "from_tree", "create_patch", "apply_to"]


def to_tree(obj):
    "Convert a dataclass instance (or nesting of them) to a JSON tree value."
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_tree(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    elif isinstance(obj, dict):
        return {k: to_tree(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [to_tree(v) for v in obj]
    return check_value(obj)


def _from_tree(tp, value):
    if dataclasses.is_dataclass(tp) and isinstance(value, dict):
        return from_tree(tp, value)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in (list, tuple) and args and isinstance(value, list):
        items = [_from_tree(args[0], v) for v in value]
        return items if origin is list else tuple(items)
    if origin is dict and len(args) == 2 and isinstance(value, dict):
        return {k: _from_tree(args[1], v) for k, v in value.items()}
    if origin is typing.Union:
        for arg in args:
            if dataclasses.is_dataclass(arg) and isinstance(value, dict):
                return from_tree(arg, value)
    return value


def from_tree(cls, tree):
    """Build an instance of dataclass cls from a JSON tree value.

    Keys of tree that are not fields of cls are ignored.
    """
    if not isinstance(tree, dict):
        raise TypeError("Expected an object to build %s, got %r" % (cls.__name__, tree))
    hints = typing.get_type_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in tree:
            kwargs[f.name] = _from_tree(hints.get(f.name), tree[f.name])
    return cls(**kwargs)


def create_patch(source, target):
    "Compute a JSONPatch transforming record source into record target."
    return make_patch(to_tree(source), to_tree(target))


def apply_to(obj, patch):
    "Apply a JSONPatch to a record and return a new record of the same type."
    if not isinstance(patch, JSONPatch):
        patch = JSONPatch(patch)
    return from_tree(type(obj), patch.apply(to_tree(obj)))
