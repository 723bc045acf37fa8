# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_jsondiffpatch_log_level, LOG_LEVEL_NAMES


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
        except ValueError:
            defs = {}
        self.set_defaults(**defs)
        if 'log_level' in defs:
            # LogLevelAction is only called when the option is given
            set_jsondiffpatch_log_level(defs['log_level'])
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = default or 'INFO'
        init_logging(level=level)
        set_jsondiffpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsondiffpatch_log_level(values, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondiffpatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVEL_NAMES,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_output_args(parser):
    """Adds arguments controlling how JSON output is written.
    """
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation used when writing JSON output.")


def add_patch_args(parser):
    """Adds a set of arguments for commands that apply patches.
    """
    parser.add_argument(
        '--relative-to',
        default=None,
        help="a JSON pointer, apply the patch to the value it references "
             "instead of the whole document.")
    parser.add_argument(
        '--in-place',
        dest='in_place',
        action='store_true',
        default=False,
        help="mutate the document while patching instead of patching a "
             "copy (no effect on output, faster for large documents).")
    parser.add_argument(
        '--skip-unknown',
        dest='unknown_op',
        action='store_const',
        const='skip',
        default='reject',
        help="skip operations with an unknown op instead of failing.")


filename_help = {
    "source":   "The source JSON document filename.",
    "target":   "The target JSON document filename.",
    "document": "The JSON document filename.",
    "patch":    "The patch filename, output from jsondiff.",
    }


def add_filename_args(parser, names):
    """Add the source, target, document and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
