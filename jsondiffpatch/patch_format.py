# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from jsonschema import ValidationError

from .errors import (
    InvalidPatchFormat, MissingRequiredField, UnknownOperation,
)
from .log import warning
from .pointer import JSONPointer
from .values import check_value, json_equal


__all__ = [
    "PatchOp", "PatchEntry",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy", "op_test",
    "parse_patch", "to_wire", "validate_patch", "is_valid_patch",
]


schema_path = os.path.join(os.path.dirname(__file__), "patch_format.schema.json")


class PatchEntry(dict):
    """A single patch operation.

    Minimal class providing attribute access to the operation fields,
    which use the wire names as keys: "op", "path", "from" and "value".
    The "from" field is available as the `from_` attribute since `from`
    is a Python keyword. Pointer fields hold JSONPointer instances.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value

    def __eq__(self, other):
        if not isinstance(other, dict):
            return NotImplemented
        if self.keys() != other.keys():
            return False
        for key, value in self.items():
            if key == "value":
                if not json_equal(value, other[key]):
                    return False
            elif value != other[key]:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Fields each operation requires in its wire form, in the order checked
required_fields = {
    PatchOp.ADD: ("path", "value"),
    PatchOp.REMOVE: ("path",),
    PatchOp.REPLACE: ("path", "value"),
    PatchOp.MOVE: ("from", "path"),
    PatchOp.COPY: ("from", "path"),
    PatchOp.TEST: ("path", "value"),
}

pointer_fields = ("path", "from")


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=JSONPointer.parse(path), value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=JSONPointer.parse(path))

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=JSONPointer.parse(path), value=value)

def op_move(from_, path):
    "Create a patch entry to move the value at from_ to path."
    return PatchEntry(**{"op": PatchOp.MOVE, "from": JSONPointer.parse(from_),
                         "path": JSONPointer.parse(path)})

def op_copy(from_, path):
    "Create a patch entry to copy the value at from_ to path."
    return PatchEntry(**{"op": PatchOp.COPY, "from": JSONPointer.parse(from_),
                         "path": JSONPointer.parse(path)})

def op_test(path, value):
    "Create a patch entry to test that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=JSONPointer.parse(path), value=value)


_shape_validator = Validator({"type": "array", "items": {"type": "object"}})

_schema_validator = None


def _get_schema_validator():
    global _schema_validator
    if _schema_validator is None:
        with io.open(schema_path, encoding="utf8") as f:
            _schema_validator = Validator(json.load(f))
    return _schema_validator


def parse_patch(wire, on_unknown="reject"):
    """Parse the wire representation of a patch into a list of patch entries.

    The wire value must be a list of dicts, as produced by a JSON codec.
    Operations with an unrecognized op raise UnknownOperation, or are
    skipped with a warning if `on_unknown` is "skip".
    """
    if on_unknown not in ("reject", "skip"):
        raise ValueError("on_unknown must be 'reject' or 'skip', not %r" % (on_unknown,))
    if not _shape_validator.is_valid(wire):
        raise InvalidPatchFormat("A patch must be an array of objects.")

    entries = []
    for index, obj in enumerate(wire):
        op = obj.get("op")
        if not isinstance(op, str):
            raise MissingRequiredField("", index, "op")
        fields = required_fields.get(op)
        if fields is None:
            if on_unknown == "skip":
                warning("Skipping unknown patch operation %r at index %d", op, index)
                continue
            raise UnknownOperation(op, index)

        e = PatchEntry(op=op)
        for field in fields:
            if field not in obj:
                raise MissingRequiredField(op, index, field)
            value = obj[field]
            if field in pointer_fields:
                if not isinstance(value, str):
                    raise MissingRequiredField(op, index, field)
                value = JSONPointer.parse(value)
            else:
                check_value(value)
            e[field] = value
        entries.append(e)
    return entries


def to_wire(entries):
    "Convert patch entries to plain dicts with pointers in string form."
    wire = []
    for e in entries:
        d = {"op": e.op}
        for field in required_fields[e.op]:
            value = e[field]
            if field in pointer_fields:
                value = value.string
            d[field] = value
        wire.append(d)
    return wire


def validate_patch(wire):
    """Check that a wire patch is well formed against the patch schema.

    Raises an InvalidPatchFormat if not well formed.
    """
    try:
        _get_schema_validator().validate(wire)
    except ValidationError as e:
        raise InvalidPatchFormat(e.message)


def is_valid_patch(wire):
    """Checks whether a wire patch is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    return _get_schema_validator().is_valid(wire)
