# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Generation of JSON Patches from two JSON values.

The algorithm is greedy and linear in the size of the documents. It
does not look for a minimal patch (no LCS matching of arrays), but
applying the generated patch to the source always reproduces the
target.

It runs in two passes:

1. Walk both values in parallel and record every pointer where the
   subtrees are equal. These unchanged values are candidate sources
   for copy operations.

2. Walk both values again and emit operations. Values that only exist
   in the source are removed, values that only exist in the target are
   added, and values that differ in type or are scalars are replaced.
   An added value that equals a previously removed value turns the
   removal into a move, and an added value that equals an unchanged
   value becomes a copy.
"""

from .log import debug
from .patch_format import op_add, op_remove, op_replace, op_move, op_copy
from .patching import JSONPatch
from .pointer import JSONPointer, APPEND_TOKEN
from .values import check_value, json_equal, equivalent_types, is_container


__all__ = ["diff", "make_patch", "PatchGenerator"]


class _Removal(object):
    """A removal emitted by the generator, possibly turned into a move later.

    Array tail removals remember the array pointer and the index in the
    source array, the actual index is only known once the final order
    of operations is fixed.
    """

    __slots__ = ("path", "value", "array", "index", "to")

    def __init__(self, path, value, array=None, index=None):
        self.path = path
        self.value = value
        self.array = array
        self.index = index
        self.to = None


class PatchGenerator(object):

    def __init__(self):
        self.unchanged = {}
        self._ops = []

    def compute_unchanged(self, pointer, a, b):
        "Record pointers to every subtree that is equal in a and b."
        if json_equal(a, b):
            self.unchanged[pointer] = a
            return

        if isinstance(a, dict) and isinstance(b, dict):
            for key in sorted(a):
                if key in b:
                    self.compute_unchanged(pointer.append(key), a[key], b[key])
        elif isinstance(a, list) and isinstance(b, list):
            for i in range(min(len(a), len(b))):
                self.compute_unchanged(pointer.append(i), a[i], b[i])

    def generate(self, pointer, source, target):
        "Emit the operations transforming source into target at pointer."
        if json_equal(source, target):
            return

        if not equivalent_types(source, target) or not is_container(source):
            self.replace(pointer, target)
        elif isinstance(source, dict):
            self._generate_dict(pointer, source, target)
        else:
            self._generate_list(pointer, source, target)

    def _generate_dict(self, pointer, source, target):
        skeys = set(source)
        tkeys = set(target)

        # Sorting keys in loops to get a deterministic result
        for key in sorted(skeys - tkeys):
            self.remove(pointer.append(key), source[key])

        for key in sorted(tkeys - skeys):
            self.add(pointer.append(key), target[key])

        for key in sorted(skeys & tkeys):
            self.generate(pointer.append(key), source[key], target[key])

    def _generate_list(self, pointer, source, target):
        n = min(len(source), len(target))

        # Remove surplus from the end, highest index first
        for i in reversed(range(n, len(source))):
            self.remove(pointer.append(i), source[i], array=pointer, index=i)

        for i in range(n):
            self.generate(pointer.append(i), source[i], target[i])

        append_pointer = pointer.append(APPEND_TOKEN)
        for i in range(n, len(target)):
            self.add(append_pointer, target[i])

    def replace(self, pointer, value):
        self._ops.append(op_replace(pointer, value))

    def remove(self, pointer, value, array=None, index=None):
        self._ops.append(_Removal(pointer, value, array, index))

    def add(self, pointer, value):
        """Add value at pointer, as a move or a copy if possible.

        A previous removal of an equal value is turned into a move,
        otherwise an equal unchanged value is copied.
        """
        for i, op in enumerate(self._ops):
            if isinstance(op, _Removal) and op.to is None and json_equal(op.value, value):
                del self._ops[i]
                op.to = pointer
                self._ops.append(op)
                return

        for from_pointer, old in self.unchanged.items():
            if json_equal(old, value):
                self._ops.append(op_copy(from_pointer, pointer))
                return

        self._ops.append(op_add(pointer, value))

    def validated(self):
        """Return the generated patch entries.

        Array tail positions are translated to the indices they have
        when each operation is applied, accounting for lower positions
        of the same array removed by earlier operations.
        """
        removed = {}
        entries = []
        for op in self._ops:
            if not isinstance(op, _Removal):
                entries.append(op)
                continue
            path = op.path
            if op.array is not None:
                gone = removed.setdefault(op.array, [])
                shift = sum(1 for j in gone if j < op.index)
                gone.append(op.index)
                path = op.array.append(op.index - shift)
            if op.to is None:
                entries.append(op_remove(path))
            else:
                entries.append(op_move(path, op.to))
        return entries


def diff(source, target):
    """Compute the patch entries transforming source into target.

    Both values must be valid JSON values (see `check_value`).
    """
    check_value(source)
    check_value(target)

    generator = PatchGenerator()
    root = JSONPointer.whole_document
    generator.compute_unchanged(root, source, target)
    generator.generate(root, source, target)
    entries = generator.validated()

    debug("Found %d unchanged subtrees, generated %d patch operations",
          len(generator.unchanged), len(entries))
    return entries


def make_patch(source, target):
    "Compute a JSONPatch transforming source into target."
    return JSONPatch(diff(source, target))
