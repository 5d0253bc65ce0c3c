# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reconcile a desired document with its stored previous state.

The store is reached through collaborators supplied by the caller:

- ``get()`` returns the current authoritative document,
- ``set(document)`` persists a complete new document,
- ``collection`` exposes ``find_one(query)``, ``find(query)`` and
  ``update(query, update_document)``, where the update document uses
  MongoDB style ``$set``/``$unset`` operators.

Each collaborator is called at most once per ``update``, in the order
get, diff, then set or collection update.
"""

from .containers import clone, is_equal
from .diffing.generic import diff_to_modifier
from .keypaths import unset_key_path
from .log import (
    debug, MissingComparisonTarget, MissingSetter, ConsistencyViolation)
from .modifier_format import Missing, to_update_document
from .patching import apply


__all__ = ["update"]


def _without(doc, fields_to_ignore):
    doc = clone(doc)
    for keypath in fields_to_ignore or ():
        unset_key_path(keypath, doc)
    return doc


def update(doc, get=None, set=None, collection=None, ignore=None, id_field="_id"):
    """Bring the stored state up to date with doc.

    The previous state is read with `get`, or looked up in `collection`
    by the identifier field of doc when there is no `get`. An empty
    document is a valid previous state. The computed modifier is then
    persisted, either by applying it to a copy of the previous state
    that is handed to `set`, or as an update of the collection.

    Keypaths in `ignore` are neither compared nor written.

    Returns the modifier, or None if doc holds no change.
    """
    model = None
    if callable(get):
        model = get()
    elif collection is not None and doc.get(id_field):
        model = collection.find_one({id_field: doc[id_field]})
    if model is None or model is Missing:
        raise MissingComparisonTarget("No document to diff against")

    diff = diff_to_modifier(model, doc, ignore)
    if diff is None:
        debug("Document %r is up to date", doc.get(id_field))
        return None

    if not callable(set) and collection is None:
        raise MissingSetter("No setter provided for the computed modifier")

    if callable(set):
        copy = apply(clone(model), diff)
        set(copy)
        if not is_equal(_without(copy, ignore), _without(doc, ignore)):
            raise ConsistencyViolation(
                "Document %r not equal to the desired state after update" % (
                    doc.get(id_field),))
    else:
        debug("Updating %r in collection", model.get(id_field))
        collection.update({id_field: model[id_field]}, to_update_document(diff))
    return diff
