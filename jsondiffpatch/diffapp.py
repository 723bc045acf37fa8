# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_output_args,
    add_prettyprint_args, ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing import diff
from .patch_format import to_wire
from .prettyprint import pretty_print_diff_files
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Compute a JSON Patch transforming one JSON document into another."


def main_diff(args):
    """Main handler of diff CLI"""
    source = args.source
    target = args.target
    output = getattr(args, 'out', None)

    # Check that filenames either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (source, target):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    a = read_json(source)
    b = read_json(target)

    d = diff(a, b)

    # Output as JSON to file, or print to stdout:
    if output:
        write_json(to_wire(d), output, indent=args.indent)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_diff_files(source, target, d, config)

    return 0


def _build_arg_parser(prog='jsondiff'):
    """Creates an argument parser for the jsondiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["source", "target"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
