# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) parsing and serialization.

A pointer is an immutable sequence of unescaped reference tokens. The
empty sequence references the whole document.
"""

import re
from urllib.parse import quote, unquote

from .errors import InvalidPointerSyntax


__all__ = ["JSONPointer", "APPEND_TOKEN"]


# Token referencing the position after the last element of an array
APPEND_TOKEN = "-"

_array_index_pattern = re.compile(r"^(?:-|0|[1-9][0-9]*)$")

_bad_percent_escape = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters a URI fragment may carry without percent-encoding
_fragment_safe = "!$&'()*+,-./:;=?@_~"


def escape(token):
    "Escape a reference token, '~' must be handled before '/'."
    return token.replace("~", "~0").replace("/", "~1")


def unescape(token):
    "Unescape a reference token, '~1' must be handled before '~0'."
    return token.replace("~1", "/").replace("~0", "~")


def _percent_decode(text):
    if _bad_percent_escape.search(text):
        raise InvalidPointerSyntax("#" + text, "malformed percent-encoding")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        raise InvalidPointerSyntax("#" + text, "percent-encoding is not valid UTF-8")


class JSONPointer(object):
    """A reference to a value within a JSON document.

    Construct from text with `JSONPointer.parse`, or directly from a
    sequence of unescaped tokens.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens=()):
        self._tokens = tuple(tokens)
        if not all(isinstance(t, str) for t in self._tokens):
            raise TypeError("JSON pointer tokens must be strings: %r" % (self._tokens,))

    @classmethod
    def parse(cls, text):
        """Parse the string or URI fragment representation of a pointer."""
        if isinstance(text, JSONPointer):
            return text
        if not isinstance(text, str):
            raise InvalidPointerSyntax(text, "pointer must be a string")
        if text.startswith("#"):
            # Percent-decoded exactly once
            text = _percent_decode(text[1:])
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise InvalidPointerSyntax(text, "pointer must start with '/'")
        return cls(unescape(t) for t in text.split("/")[1:])

    @staticmethod
    def is_valid_array_index(token):
        "Check if token is '-' or a canonical non-negative integer."
        return _array_index_pattern.match(token) is not None

    @property
    def tokens(self):
        return self._tokens

    @property
    def string(self):
        if not self._tokens:
            return ""
        return "/" + "/".join(escape(t) for t in self._tokens)

    @property
    def fragment(self):
        "The URI fragment identifier representation (RFC 6901, section 6)."
        return "#" + quote(self.string, safe=_fragment_safe)

    @property
    def parent(self):
        "Pointer to the container of the referenced value, None for the root."
        if not self._tokens:
            return None
        return JSONPointer(self._tokens[:-1])

    @property
    def last_token(self):
        if not self._tokens:
            return None
        return self._tokens[-1]

    @property
    def is_whole_document(self):
        return not self._tokens

    def append(self, token):
        "Return a new pointer with an unescaped token or an array index appended."
        if isinstance(token, int) and not isinstance(token, bool):
            if token < 0:
                raise ValueError("Array index must be non-negative: %d" % token)
            token = str(token)
        return JSONPointer(self._tokens + (token,))

    def __str__(self):
        return self.string

    def __repr__(self):
        return "JSONPointer(%r)" % self.string

    def __eq__(self, other):
        if not isinstance(other, JSONPointer):
            return NotImplemented
        return self._tokens == other._tokens

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]


# Pointer to the whole document
JSONPointer.whole_document = JSONPointer()
