# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Addressing values in nested documents by dot separated keypaths.

A keypath such as ``a.b.2.c`` walks mapping keys from the document root,
numeric segments index into sequences. Sequences and dates are leaves:
``keypaths`` never descends into them, although the other functions here
accept numeric segments addressing sequence items. Writing past the end of
a sequence pads it with None, removing an item leaves None in its slot,
so indices stay stable.
"""

import re

from .log import InvalidArgument
from .modifier_format import Missing


__all__ = [
    "keypaths", "value_for_key_path", "set_value_for_key_path",
    "unset_key_path", "key_path_contains_path", "filtered_key_paths",
    "split_key_path", "join_key_path",
]


SEPARATOR = "."

r_is_index = re.compile(r"^\d+$")


def split_key_path(keypath):
    "Split a keypath on the form 'foo.bar' into ['foo', 'bar']."
    return [x for x in keypath.split(SEPARATOR) if x]


def join_key_path(*args):
    "Join segments on the form ['foo', 'bar'] into 'foo.bar'."
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    return SEPARATOR.join(str(a) for a in args if a not in ("", None))


def _index(segment):
    if isinstance(segment, int):
        return segment
    if r_is_index.match(segment):
        return int(segment)
    return None


def _child(node, segment):
    if isinstance(node, dict):
        return node.get(segment, Missing)
    elif isinstance(node, (list, tuple)):
        index = _index(segment)
        if index is None or index >= len(node):
            return Missing
        return node[index]
    return Missing


def _assign(node, segment, value):
    if isinstance(node, dict):
        node[segment] = value
    elif isinstance(node, list):
        index = _index(segment)
        if index is None:
            raise InvalidArgument(
                "Cannot address a sequence with segment '{}'.".format(segment))
        if index >= len(node):
            # Pad with None up to index
            node.extend([None] * (index - len(node) + 1))
        node[index] = value
    else:
        raise InvalidArgument(
            "Cannot assign into {} at '{}'.".format(type(node).__name__, segment))


def _collect(node, prefix, all_levels, paths):
    for key, value in node.items():
        path = join_key_path(prefix, key)
        if isinstance(value, dict) and value:
            if all_levels:
                paths.append(path)
            _collect(value, path, all_levels, paths)
        else:
            paths.append(path)


def keypaths(doc, all_levels=False):
    """List the keypaths of all leaves in doc, in traversal order.

    With `all_levels`, the keypaths of non-empty mappings are included
    too, each one ahead of its descendants.
    """
    paths = []
    if isinstance(doc, dict):
        _collect(doc, "", all_levels, paths)
    return paths


def value_for_key_path(keypath, doc):
    """Look up the value at keypath, or Missing if any segment is absent."""
    if doc is Missing or doc is None:
        return Missing
    node = doc
    for segment in split_key_path(keypath):
        node = _child(node, segment)
        if node is Missing:
            return Missing
    return node


def set_value_for_key_path(value, keypath, doc):
    """Assign value at keypath, creating intermediate mappings as needed.

    Only mappings are ever created. Setting the Missing sentinel
    removes the keypath instead.
    """
    if value is Missing:
        unset_key_path(keypath, doc)
        return doc
    segments = split_key_path(keypath)
    if not segments:
        raise InvalidArgument("Cannot set a value at an empty keypath.")
    node = doc
    for segment, next_segment in zip(segments[:-1], segments[1:]):
        child = _child(node, segment)
        # Lists are only walked into by index, anything else is replaced
        if not (isinstance(child, dict) or
                (isinstance(child, list) and _index(next_segment) is not None)):
            child = {}
            _assign(node, segment, child)
        node = child
    _assign(node, segments[-1], value)
    return doc


def unset_key_path(keypath, doc):
    """Remove the value at keypath.

    Returns whether the document was changed.
    """
    segments = split_key_path(keypath)
    if not segments:
        return False
    parent = value_for_key_path(join_key_path(segments[:-1]), doc)
    leaf = segments[-1]
    if isinstance(parent, dict):
        if leaf in parent:
            del parent[leaf]
            return True
    elif isinstance(parent, list):
        index = _index(leaf)
        if index is not None and index < len(parent) and parent[index] is not None:
            # Sequence items are cleared, never shifted
            parent[index] = None
            return True
    return False


def key_path_contains_path(a, b):
    "Returns True if b is a or a descendant of a."
    return b == a or b.startswith(a + SEPARATOR)


def filtered_key_paths(paths, ignore):
    """Drop paths that are, or are below, any path in ignore."""
    if not ignore:
        return list(paths)
    return [p for p in paths
            if not any(key_path_contains_path(i, p) for i in ignore)]
