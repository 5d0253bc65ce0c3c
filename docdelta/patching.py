# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .containers import clone, contains
from .diffing.comparing import is_present
from .diffing.generic import obj_to_modifier
from .keypaths import (
    set_value_for_key_path, unset_key_path, value_for_key_path,
    split_key_path, join_key_path)
from .log import InvalidArgument
from .modifier_format import Missing, Modifier, ModifierOp, is_modifier


__all__ = [
    "apply", "apply_set", "apply_unset", "add_to_set",
    "modifier_to_obj", "obj_to_modifier", "map_modifier_to_key",
]


def _entries(source, field):
    if is_modifier(source):
        return source.get(field) or {}
    return source


def apply_set(dest, source):
    """Write the `set` entries of a modifier into dest.

    A plain mapping is read as keypaths to values. Falsy values other
    than numbers are skipped.
    """
    if source is None:
        return dest
    for keypath, val in _entries(source, ModifierOp.SET).items():
        if is_present(val):
            set_value_for_key_path(clone(val), keypath, dest)
    return dest


def apply_unset(dest, source):
    """Remove the `unset` keypaths of a modifier, or the keys of a
    plain mapping, from dest.
    """
    if source is None:
        return dest
    for keypath in _entries(source, ModifierOp.UNSET):
        unset_key_path(keypath, dest)
    return dest


def prune_ancestors(keypath, dest):
    """Remove the mappings above keypath that are left empty."""
    segments = split_key_path(keypath)
    for i in range(len(segments) - 1, 0, -1):
        parent_path = join_key_path(segments[:i])
        node = value_for_key_path(parent_path, dest)
        if not isinstance(node, dict) or node:
            break
        unset_key_path(parent_path, dest)


def apply(dest, source):
    """Apply a modifier to dest, in place, and return dest.

    If source is not shaped like a modifier, it is taken as a document
    whose leaves are all written into dest. Mappings left empty by the
    removals are removed as well.
    """
    if source is None:
        return dest
    if is_modifier(source):
        modifier = source
    else:
        modifier = obj_to_modifier(source)
        if modifier is None:
            return dest
    apply_set(dest, modifier)
    apply_unset(dest, modifier)
    for keypath in modifier.get(ModifierOp.UNSET) or {}:
        prune_ancestors(keypath, dest)
    return dest


def add_to_set(dest, item):
    """Append item to the list dest unless an equal item is present."""
    if not isinstance(dest, list):
        raise InvalidArgument(
            "add_to_set expects a list as destination, got {}".format(type(dest).__name__))
    if not contains(dest, item):
        dest.append(item)
    return dest


def modifier_to_obj(modifier):
    """Build a new document holding the effect of modifier on an empty one."""
    if modifier is None:
        return None
    obj = {}
    for keypath, val in (modifier.get(ModifierOp.SET) or {}).items():
        set_value_for_key_path(clone(val), keypath, obj)
    for keypath in modifier.get(ModifierOp.UNSET) or {}:
        set_value_for_key_path(Missing, keypath, obj)
    return obj


def map_modifier_to_key(modifier, key):
    """Scope every keypath of modifier under key.

    Used to lift the modifier of a sub-document into the modifier
    of the document holding it.
    """
    if modifier is None:
        raise InvalidArgument("map_modifier_to_key called without a modifier")
    mapped = Modifier()
    for field in (ModifierOp.SET, ModifierOp.UNSET):
        entries = modifier.get(field)
        if entries:
            mapped[field] = {join_key_path(key, keypath): value
                             for keypath, value in entries.items()}
    return mapped

