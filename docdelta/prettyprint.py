# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import pprint
import sys

import colorama

from .modifier_format import ModifierOp


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
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
            use_color = True,
            ):
        self.out = out
        self.use_color = use_color

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
    "Format simple value for printing. Dates as ISO strings, pprint for the rest."
    if isinstance(v, str):
        return v
    if isinstance(v, (datetime.date, datetime.datetime)):
        return v.isoformat()
    return pprint.pformat(v)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        for i, item in enumerate(v):
            pretty_print_item(i, item, prefix+IND, config)
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


def pretty_print_modifier_header(base_name, remote_name, config=DefaultConfig):
    config.out.write("%s--- %s%s\n" % (config.REMOVE, base_name, config.RESET))
    config.out.write("%s+++ %s%s\n" % (config.ADD, remote_name, config.RESET))


def pretty_print_modifier(modifier, config=DefaultConfig):
    """Print keypaths to set with a leading +, keypaths to unset with a -.

    Keypaths are listed in sorted order, values that do not fit on one
    line are printed indented below their keypath.
    """
    if not modifier:
        config.out.write("%sno changes%s\n" % (config.INFO, config.RESET))
        return
    setpaths = modifier.get(ModifierOp.SET) or {}
    unsetpaths = modifier.get(ModifierOp.UNSET) or {}
    for keypath in sorted(set(setpaths) | set(unsetpaths)):
        if keypath in unsetpaths:
            config.out.write("%s%s%s\n" % (config.REMOVE, keypath, config.RESET))
        else:
            value = setpaths[keypath]
            if isinstance(value, (dict, list)) and value:
                config.out.write("%s%s:%s\n" % (config.ADD, keypath, config.RESET))
                for line in pprint.pformat(value).splitlines(False):
                    config.out.write("%s%s%s%s\n" % (config.ADD, IND, line, config.RESET))
            else:
                config.out.write("%s%s: %s%s\n" % (
                    config.ADD, keypath, format_value(value), config.RESET))


def pretty_print_document_modifier(base_name, remote_name, modifier, config=DefaultConfig):
    pretty_print_modifier_header(base_name, remote_name, config)
    pretty_print_modifier(modifier, config)
