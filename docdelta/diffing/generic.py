# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..containers import clone, union, difference
from ..keypaths import (
    keypaths, value_for_key_path, unset_key_path, filtered_key_paths,
    key_path_contains_path)
from ..log import debug
from ..modifier_format import Missing, ModifierBuilder

from .comparing import should_set, should_unset

__all__ = ["diff_to_modifier", "forward_diff_to_modifier", "obj_to_modifier"]


def _absent(doc):
    return doc is Missing or doc is None


def diff_to_modifier(prev, doc, fields_to_ignore=None, prune_empty_objects=False):
    """Compute the modifier transforming prev into doc.

    Returns a Modifier with a `set` field mapping leaf keypaths of doc to
    their new values and an `unset` field holding the keypaths of prev
    to remove, either field left out when empty. Returns None when
    nothing changed.

    Keypaths in `fields_to_ignore`, and everything below them, are left
    out of the comparison.

    With `prune_empty_objects`, mappings emptied by the change are removed
    instead of being set to `{}`, along with the mappings above them left
    empty. If that leaves nothing to change, the modifier computed without
    pruning is returned.
    """
    ignore = fields_to_ignore or []
    di = ModifierBuilder()
    emptied = []

    if not _absent(doc):
        for keypath in filtered_key_paths(keypaths(doc), ignore):
            val = value_for_key_path(keypath, doc)
            if should_set(val, value_for_key_path(keypath, prev)):
                di.set(keypath, val)

    if not _absent(prev):
        existing = filtered_key_paths(keypaths(prev, all_levels=True), ignore)
        for keypath in existing:
            val = value_for_key_path(keypath, doc)
            if should_unset(val, value_for_key_path(keypath, prev)):
                di.unset(keypath)

        # Removing an ancestor removes its descendants too
        unset_paths = di.unset_paths
        for a in unset_paths:
            for b in unset_paths:
                if a != b and key_path_contains_path(a, b):
                    di.discard_unset(b)
        emptied = di.unset_paths

        # A set replaces the whole value at its keypath, including emptied mappings
        set_paths = di.set_paths
        for keypath in di.unset_paths:
            if any(key_path_contains_path(s, keypath) for s in set_paths):
                di.discard_unset(keypath)

    delta = di.validated()
    if delta is None:
        return None
    debug("Computed modifier with %d set and %d unset keypaths",
          len(delta.set or ()), len(delta.unset or ()))

    if prune_empty_objects and not _absent(prev):
        # Imported here to avoid a circular import
        from ..patching import apply, prune_ancestors
        intermediate = apply(clone(prev), delta)
        for keypath in emptied:
            node = value_for_key_path(keypath, intermediate)
            if isinstance(node, dict) and not node:
                unset_key_path(keypath, intermediate)
            prune_ancestors(keypath, intermediate)
        pruned = diff_to_modifier(prev, intermediate, fields_to_ignore, False)
        return pruned or delta
    return delta


def forward_diff_to_modifier(prev, doc, fields_to_ignore=None):
    """Diff prev and doc, only capturing values added or changed in doc.

    Keypaths of prev missing from doc are ignored, so the result never
    removes anything that doc does not hold.
    """
    removed = difference(keypaths(prev), keypaths(doc))
    return diff_to_modifier(prev, doc, union(removed, fields_to_ignore or []))


def obj_to_modifier(obj):
    "Modifier setting every leaf of obj."
    return diff_to_modifier(Missing, obj)
