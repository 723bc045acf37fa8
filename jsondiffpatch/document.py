# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The mutable JSON document model.

A `JSONDocument` wraps a tree of plain Python values (dict, list, str,
int, float, bool, None) and implements the six JSON Patch mutations on
it, addressed by `JSONPointer`.

Containers are copy-on-write. Each container in the tree is either
shared (it may be referenced from outside the document, e.g. by the
caller) or owned by the document. Before a shared container is
mutated it is promoted: replaced by a shallow copy that the document
owns. Only the containers along the mutated path are promoted,
untouched siblings keep being shared. Operation values are inserted
as owned copies, so the tree never shares containers with a patch.
Containers that leave the tree are no longer owned.
"""

from .errors import (
    InvalidPatchFormat, ReferencesNonexistentValue, PatchTestFailed, Missing,
)
from .log import debug
from .patch_format import PatchOp
from .pointer import JSONPointer, APPEND_TOKEN
from .values import json_equal, check_value, deep_copy


__all__ = ["JSONDocument"]


def _index(container, token, pointer, allow_end=False):
    "Translate an array token to an int index, checking bounds."
    if token == APPEND_TOKEN or not JSONPointer.is_valid_array_index(token):
        raise ReferencesNonexistentValue(pointer, token)
    index = int(token)
    upper = len(container) + 1 if allow_end else len(container)
    if index >= upper:
        raise ReferencesNonexistentValue(pointer, token)
    return index


def _get(container, token, pointer):
    "Evaluate a single pointer token against a container."
    if isinstance(container, dict):
        try:
            return container[token]
        except KeyError:
            raise ReferencesNonexistentValue(pointer, token)
    elif isinstance(container, list):
        if token == APPEND_TOKEN:
            if not container:
                raise ReferencesNonexistentValue(pointer, token)
            return container[-1]
        return container[_index(container, token, pointer)]
    else:
        raise ReferencesNonexistentValue(pointer, token)


def _set(container, token, value, pointer):
    "Overwrite the existing value at token."
    if isinstance(container, dict):
        container[token] = value
    elif isinstance(container, list):
        if token == APPEND_TOKEN:
            if not container:
                raise ReferencesNonexistentValue(pointer, token)
            container[-1] = value
        else:
            container[_index(container, token, pointer)] = value
    else:
        raise ReferencesNonexistentValue(pointer, token)


def _insert(container, token, value, pointer):
    "Insert value at token, shifting later array elements up."
    if isinstance(container, dict):
        container[token] = value
    elif isinstance(container, list):
        if token == APPEND_TOKEN:
            container.append(value)
        else:
            container.insert(_index(container, token, pointer, allow_end=True), value)
    else:
        raise ReferencesNonexistentValue(pointer, token)


def _delete(container, token, pointer):
    if isinstance(container, dict):
        try:
            del container[token]
        except KeyError:
            raise ReferencesNonexistentValue(pointer, token)
    elif isinstance(container, list):
        if token == APPEND_TOKEN:
            if not container:
                raise ReferencesNonexistentValue(pointer, token)
            container.pop()
        else:
            del container[_index(container, token, pointer)]
    else:
        raise ReferencesNonexistentValue(pointer, token)


class JSONDocument(object):
    """A JSON value that can be mutated by pointer-addressed operations.

    If `owned` is true, the containers of `value` are considered
    exclusively owned by the document and are mutated in place.
    Otherwise they are treated as shared and copied before mutation.
    """

    def __init__(self, value=None, owned=False):
        self._root = check_value(value)
        # Maps id() to the owned container, holding a reference
        # keeps the id from being reused while it is registered
        self._owned = {}
        if owned:
            self._own_tree(self._root)

    @classmethod
    def _with_registry(cls, value, owned):
        doc = cls.__new__(cls)
        doc._root = value
        doc._owned = owned
        return doc

    def _own_tree(self, value):
        if isinstance(value, dict):
            self._owned[id(value)] = value
            for v in value.values():
                self._own_tree(v)
        elif isinstance(value, list):
            self._owned[id(value)] = value
            for v in value:
                self._own_tree(v)

    @property
    def value(self):
        "The current root value of the document."
        return self._root

    def is_owned(self, container):
        return self._owned.get(id(container)) is container

    def _release(self, value, keep=None):
        """Forget ownership of the containers of a value leaving the tree.

        Owned containers only ever have owned ancestors, so the walk
        stops at the first shared container. The subtree `keep` stays owned.
        """
        if value is keep or not self.is_owned(value):
            return
        del self._owned[id(value)]
        children = value.values() if isinstance(value, dict) else value
        for v in children:
            self._release(v, keep)

    def _set_root(self, value, keep=None):
        self._release(self._root, keep)
        self._root = value

    def _insert_copy(self, parent, value, pointer):
        "Insert an owned copy of value at pointer, whose parent is parent."
        c = deep_copy(value, self._owned)
        try:
            _insert(parent, pointer.last_token, c, pointer)
        except ReferencesNonexistentValue:
            self._release(c)
            raise

    def _promote(self, container):
        "Return an owned version of container, copying it if shared."
        if self.is_owned(container):
            return container
        if isinstance(container, dict):
            c = dict(container)
        else:
            c = list(container)
        self._owned[id(c)] = c
        return c

    def resolve(self, pointer):
        """Return the value referenced by pointer.

        Raises ReferencesNonexistentValue if there is none.
        """
        pointer = JSONPointer.parse(pointer)
        value = self._root
        for token in pointer:
            value = _get(value, token, pointer)
        return value

    def promote_mutable_path(self, pointer):
        """Make every container along pointer owned, and return the last one.

        The pointer must reference a container.
        """
        pointer = JSONPointer.parse(pointer)
        if not isinstance(self._root, (dict, list)):
            raise ReferencesNonexistentValue(pointer)
        self._root = current = self._promote(self._root)
        for token in pointer:
            child = _get(current, token, pointer)
            if not isinstance(child, (dict, list)):
                raise ReferencesNonexistentValue(pointer, token)
            promoted = self._promote(child)
            if promoted is not child:
                _set(current, token, promoted, pointer)
            current = promoted
        return current

    def add(self, value, pointer):
        pointer = JSONPointer.parse(pointer)
        check_value(value)
        if pointer.is_whole_document:
            self._set_root(deep_copy(value, self._owned))
            return
        parent = self.promote_mutable_path(pointer.parent)
        self._insert_copy(parent, value, pointer)

    def remove(self, pointer):
        pointer = JSONPointer.parse(pointer)
        if pointer.is_whole_document:
            self._set_root(None)
            return
        parent = self.promote_mutable_path(pointer.parent)
        old = _get(parent, pointer.last_token, pointer)
        _delete(parent, pointer.last_token, pointer)
        self._release(old)

    def replace(self, value, pointer):
        pointer = JSONPointer.parse(pointer)
        check_value(value)
        if pointer.is_whole_document:
            self._set_root(deep_copy(value, self._owned))
            return
        parent = self.promote_mutable_path(pointer.parent)
        # The target must exist before it can be replaced
        old = _get(parent, pointer.last_token, pointer)
        _set(parent, pointer.last_token, deep_copy(value, self._owned), pointer)
        self._release(old)

    def move(self, from_pointer, to_pointer):
        from_pointer = JSONPointer.parse(from_pointer)
        to_pointer = JSONPointer.parse(to_pointer)
        if to_pointer.is_whole_document:
            value = self.resolve(from_pointer)
            self._set_root(value, keep=value)
            return
        if from_pointer.is_whole_document:
            raise ReferencesNonexistentValue(from_pointer)

        # Removal must be complete before the insertion
        # index is evaluated, array self-moves depend on it
        from_parent = self.promote_mutable_path(from_pointer.parent)
        value = _get(from_parent, from_pointer.last_token, from_pointer)
        _delete(from_parent, from_pointer.last_token, from_pointer)

        to_parent = self.promote_mutable_path(to_pointer.parent)
        _insert(to_parent, to_pointer.last_token, value, to_pointer)

    def copy(self, from_pointer, to_pointer):
        from_pointer = JSONPointer.parse(from_pointer)
        to_pointer = JSONPointer.parse(to_pointer)
        if to_pointer.is_whole_document:
            self._set_root(deep_copy(self.resolve(from_pointer), self._owned))
            return
        if from_pointer.is_whole_document:
            raise ReferencesNonexistentValue(from_pointer)

        value = self.resolve(from_pointer)
        to_parent = self.promote_mutable_path(to_pointer.parent)
        self._insert_copy(to_parent, value, to_pointer)

    def test(self, value, pointer):
        pointer = JSONPointer.parse(pointer)
        check_value(value)
        try:
            found = self.resolve(pointer)
        except ReferencesNonexistentValue:
            raise PatchTestFailed(pointer.string, value, Missing)
        if not json_equal(found, value):
            raise PatchTestFailed(pointer.string, value, found)

    def apply_operation(self, entry):
        "Apply a single patch entry to the document."
        op = entry.op
        if op == PatchOp.ADD:
            self.add(entry.value, entry.path)
        elif op == PatchOp.REMOVE:
            self.remove(entry.path)
        elif op == PatchOp.REPLACE:
            self.replace(entry.value, entry.path)
        elif op == PatchOp.MOVE:
            self.move(entry.from_, entry.path)
        elif op == PatchOp.COPY:
            self.copy(entry.from_, entry.path)
        elif op == PatchOp.TEST:
            self.test(entry.value, entry.path)
        else:
            raise InvalidPatchFormat("Invalid op {}.".format(op))

    def apply_patch(self, operations, relative_to=None):
        """Apply operations in order.

        If relative_to is given, the operations are applied to the value
        it references as if that value was the whole document, and the
        result is written back in its place.
        """
        if relative_to is not None:
            relative_to = JSONPointer.parse(relative_to)
        if relative_to is None or relative_to.is_whole_document:
            for i, entry in enumerate(operations):
                try:
                    self.apply_operation(entry)
                except Exception as e:
                    debug("Patch operation %d (%s) failed: %s", i, entry.op, e)
                    raise
            return

        parent = self.promote_mutable_path(relative_to.parent)
        token = relative_to.last_token
        sub = JSONDocument._with_registry(_get(parent, token, relative_to), self._owned)
        sub.apply_patch(operations)
        _set(parent, token, sub.value, relative_to)

    def __eq__(self, other):
        if isinstance(other, JSONDocument):
            other = other.value
        return json_equal(self._root, other)

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return "JSONDocument(%r)" % (self._root,)
