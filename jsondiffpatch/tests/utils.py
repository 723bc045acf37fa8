# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsondiffpatch import patch, diff, json_equal
from jsondiffpatch.patch_format import to_wire, is_valid_patch


pjoin = os.path.join


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_patch(to_wire(d))
    assert json_equal(patch(a, d), b)
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def ops(entries):
    "List the op names of a sequence of patch entries."
    return [e.op for e in entries]


def read_json_file(filename):
    with io.open(filename, encoding='utf8') as f:
        return json.load(f)
