# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args,
    add_prettyprint_args, ConfigBackedParser,
    prettyprint_config_from_args,
    )
from .diffing import diff_to_modifier, forward_diff_to_modifier
from .log import warning
from .prettyprint import pretty_print_document_modifier
from .utils import EXPLICIT_MISSING_FILE, read_document, write_json, setup_std_streams


_description = "Compute the modifier transforming one json document into another."


def main_diff(args):
    """Main handler of diff CLI"""
    base = args.base
    remote = args.remote
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1
    # Both files cannot be missing
    assert not (base == EXPLICIT_MISSING_FILE and remote == EXPLICIT_MISSING_FILE), (
        'cannot diff %r against %r' % (base, remote))

    a = read_document(base)
    b = read_document(remote)

    if args.forward:
        if a is None:
            warning("Forward diff against a missing base captures every value")
        d = forward_diff_to_modifier(a, b, args.ignore)
    else:
        d = diff_to_modifier(a, b, args.ignore, args.prune_empty_objects)

    # Output as JSON to file, or print to stdout:
    if output:
        write_json(d or {}, output)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_document_modifier(base, remote, d, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "remote"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the modifier is written to this file as json. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('docdelta-diff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
