# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .log import ModifierFormatError, error
from .modifier_format import is_modifier, to_modifier
from .patching import apply
from .utils import EXPLICIT_MISSING_FILE, read_document, write_json, setup_std_streams


_description = "Apply a modifier from docdelta diff to a json document."


def main_patch(args):
    base_filename = args.base
    modifier_filename = args.modifier
    output_filename = args.output

    for fn in (base_filename, modifier_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_document(base_filename, on_null='empty')
    source = read_document(modifier_filename, on_null='empty')
    if is_modifier(source):
        try:
            source = to_modifier(source)
        except ModifierFormatError as e:
            error("Invalid modifier in %s: %s", modifier_filename, e)
            return 1

    after = apply(before, source)

    if output_filename:
        write_json(after, output_filename, indent=args.indent)
    else:
        write_json(after, sys.stdout, indent=args.indent)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "modifier"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--indent',
        default=2,
        type=int,
        help="indentation of the json output.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('docdelta-patch').parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
