# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .errors import (
    Missing, JSONPatchError, InvalidPointerSyntax, InvalidObjectType,
    ReferencesNonexistentValue, InvalidPatchFormat, UnknownOperation,
    MissingRequiredField, PatchTestFailed,
)
from .pointer import JSONPointer
from .values import json_equal
from .document import JSONDocument
from .patch_format import (
    PatchOp, PatchEntry,
    op_add, op_remove, op_replace, op_move, op_copy, op_test,
)
from .patching import patch, JSONPatch
from .diffing import diff, make_patch


__all__ = [
    "__version__",
    "diff", "make_patch",
    "patch", "JSONPatch",
    "JSONPointer", "JSONDocument", "json_equal",
    "PatchOp", "PatchEntry",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy", "op_test",
    "Missing", "JSONPatchError", "InvalidPointerSyntax", "InvalidObjectType",
    "ReferencesNonexistentValue", "InvalidPatchFormat", "UnknownOperation",
    "MissingRequiredField", "PatchTestFailed",
    ]
