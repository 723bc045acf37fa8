# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Terminal rendering of JSON patches.

Each operation is printed as a header line naming the operation and its
pointers, followed by its value (if any) prefixed with + or -.
"""

from collections import namedtuple
import pprint
import sys

import colorama

from .errors import InvalidPatchFormat
from .patch_format import PatchOp


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78

PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing, using pprint for everything but strings."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def _display_path(pointer):
    # The root pointer is the empty string, show it as something visible
    return str(pointer) or "<root>"


def pretty_print_patch_entry(e, config=DefaultConfig):
    op = e.op
    path = _display_path(e.path)

    if op == PatchOp.ADD:
        pretty_print_patch_action("add", path, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("remove", path, config)

    elif op == PatchOp.REPLACE:
        pretty_print_patch_action("replace", path, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.MOVE:
        pretty_print_patch_action(
            "move from %s to" % _display_path(e.from_), path, config)

    elif op == PatchOp.COPY:
        pretty_print_patch_action(
            "copy from %s to" % _display_path(e.from_), path, config)

    elif op == PatchOp.TEST:
        pretty_print_patch_action("test", path, config)
        pretty_print_value(e.value, config.KEEP, config)

    else:
        raise InvalidPatchFormat("Unknown patch op {}".format(op))

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(entries, config=DefaultConfig):
    "Pretty-print a sequence of patch entries."
    for e in entries:
        pretty_print_patch_entry(e, config)


patch_header = """\
jsondiff {afn} {bfn}
--- {afn}
+++ {bfn}
"""

def pretty_print_diff_files(afn, bfn, entries, config=DefaultConfig):
    """Pretty-print the patch between two JSON files.

    Prints a header naming both files, then the operations
    transforming the first document into the second.
    """
    if not entries:
        return
    config.out.write(patch_header.format(afn=afn, bfn=bfn))
    pretty_print_patch(entries, config)
