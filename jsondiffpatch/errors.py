# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Error kinds raised by pointer parsing, patch parsing and patch application.

All errors are raised synchronously to the immediate caller and never
retried. They share the `JSONPatchError` base so callers can catch
everything this package raises with a single clause.
"""


# Sentinel for a value that could not be found, distinct from a JSON null
Missing = object()


class JSONPatchError(ValueError):
    pass


class InvalidPointerSyntax(JSONPatchError):

    def __init__(self, pointer, reason=None):
        self.pointer = pointer
        msg = "Invalid JSON pointer syntax: %r" % (pointer,)
        if reason:
            msg += " (%s)" % reason
        super(InvalidPointerSyntax, self).__init__(msg)


class InvalidObjectType(JSONPatchError):

    def __init__(self, value):
        self.value = value
        super(InvalidObjectType, self).__init__(
            "Value of type '%s' is not a valid JSON value." % type(value).__name__)


class ReferencesNonexistentValue(JSONPatchError):

    def __init__(self, pointer, token=None):
        self.pointer = pointer
        self.token = token
        msg = "Pointer '%s' references a nonexistent value" % (pointer,)
        if token is not None:
            msg += " (at token %r)" % (token,)
        super(ReferencesNonexistentValue, self).__init__(msg)


class InvalidPatchFormat(JSONPatchError):
    pass


class UnknownOperation(JSONPatchError):

    def __init__(self, op, index):
        self.op = op
        self.index = index
        super(UnknownOperation, self).__init__(
            "Unknown patch operation %r at index %d." % (op, index))


class MissingRequiredField(JSONPatchError):

    def __init__(self, op, index, field):
        self.op = op
        self.index = index
        self.field = field
        super(MissingRequiredField, self).__init__(
            "Patch operation %r at index %d is missing required field '%s'." % (
                op, index, field))


class PatchTestFailed(JSONPatchError):
    """A test operation found a different value, or no value at all.

    `found` is the `Missing` sentinel when the path could not be resolved.
    """

    def __init__(self, path, expected, found=Missing):
        self.path = path
        self.expected = expected
        self.found = found
        if found is Missing:
            msg = "Test failed at '%s': no value found, expected %r." % (path, expected)
        else:
            msg = "Test failed at '%s': found %r, expected %r." % (path, found, expected)
        super(PatchTestFailed, self).__init__(msg)
