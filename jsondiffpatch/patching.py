# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from . import codec
from .document import JSONDocument
from .log import debug
from .patch_format import parse_patch, to_wire
from .values import deep_copy


__all__ = ["patch", "JSONPatch"]


def patch(obj, entries, relative_to=None, in_place=False):
    """Produce a patched version of obj with given patch entries.

    The entries are applied strictly in order, each one to the result of
    the previous one. Unless `in_place` is true, obj is copied first so
    that a failing entry leaves it untouched. With `in_place`, the
    containers of obj are mutated directly and entries applied before a
    failure stay applied.

    If `relative_to` is given, the entries address the value it points
    to instead of the whole document.

    Returns the patched document, which is a new value when the patch
    replaces the whole document.
    """
    if in_place:
        doc = JSONDocument(obj, owned=True)
    else:
        doc = JSONDocument(deep_copy(obj), owned=True)
    doc.apply_patch(entries, relative_to=relative_to)
    return doc.value


class JSONPatch(object):
    """An ordered list of JSON Patch (RFC 6902) operations."""

    def __init__(self, entries=()):
        self.entries = list(entries)

    @classmethod
    def from_json(cls, wire, on_unknown="reject"):
        "Create a patch from its wire representation (a list of dicts)."
        return cls(parse_patch(wire, on_unknown=on_unknown))

    @classmethod
    def from_string(cls, text, on_unknown="reject"):
        return cls.from_json(codec.loads(text), on_unknown=on_unknown)

    def to_json(self):
        return to_wire(self.entries)

    def to_string(self, indent=None):
        return codec.dumps(self.to_json(), indent=indent)

    def apply(self, obj, relative_to=None, in_place=False):
        debug("Applying patch with %d operations", len(self.entries))
        return patch(obj, self.entries, relative_to=relative_to, in_place=in_place)

    def apply_to_bytes(self, data, indent=None):
        "Apply the patch to a JSON text document, returning JSON text."
        result = self.apply(codec.loads(data), in_place=True)
        return codec.dumps(result, indent=indent).encode("utf8")

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __bool__(self):
        return bool(self.entries)

    def __eq__(self, other):
        if isinstance(other, JSONPatch):
            other = other.entries
        if not isinstance(other, list):
            return NotImplemented
        return self.entries == other

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "JSONPatch(%r)" % (self.to_json(),)
