# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from . import codec
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args,
    add_patch_args,
    )
from .errors import JSONPatchError
from .log import error
from .patching import JSONPatch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a JSON Patch (RFC 6902) to a JSON document."


def main_patch(args):
    document_filename = args.document
    patch_filename = args.patch
    output_filename = args.output

    for fn in (document_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(document_filename)
    try:
        p = JSONPatch.from_json(read_json(patch_filename, on_null=[]),
                                on_unknown=args.unknown_op)
        after = p.apply(before, relative_to=args.relative_to,
                        in_place=args.in_place)
    except JSONPatchError as e:
        error("Failed to apply %s to %s: %s", patch_filename, document_filename, e)
        return 1

    if output_filename:
        write_json(after, output_filename, indent=args.indent)
    else:
        print(codec.dumps(after, indent=args.indent))

    return 0


def _build_arg_parser(prog='jsonpatch-apply'):
    """Creates an argument parser for the jsonpatch-apply command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_patch_args(parser)
    add_filename_args(parser, ["document", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
