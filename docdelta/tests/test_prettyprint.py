# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import colorama

from docdelta.prettyprint import PrettyPrintConfig, pretty_print_modifier


def test_pretty_print_modifier_no_color():
    out = io.StringIO()
    config = PrettyPrintConfig(out=out, use_color=False)
    pretty_print_modifier({"set": {"b": 1, "c": {"d": 2}}, "unset": {"a": True}}, config)
    assert out.getvalue().splitlines() == [
        "-  a",
        "+  b: 1",
        "+  c:",
        "+    {'d': 2}",
    ]


def test_pretty_print_modifier_color():
    out = io.StringIO()
    config = PrettyPrintConfig(out=out, use_color=True)
    pretty_print_modifier({"unset": {"a": True}}, config)
    assert out.getvalue() == "%s-  a%s\n" % (colorama.Fore.RED, colorama.Style.RESET_ALL)

    out = io.StringIO()
    pretty_print_modifier(None, PrettyPrintConfig(out=out, use_color=False))
    assert out.getvalue() == "## no changes\n"
