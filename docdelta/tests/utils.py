# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from docdelta import apply, diff_to_modifier, set_value_for_key_path, unset_key_path
from docdelta.containers import is_equal
from docdelta.modifier_format import is_valid_modifier


def check_diff_and_apply(a, b):
    "Check that apply(a, diff_to_modifier(a, b)) reproduces b."
    m = diff_to_modifier(a, b)
    if m is None:
        assert is_equal(a, b)
        return
    assert is_valid_modifier(m)
    before = copy.deepcopy(a)
    result = apply(copy.deepcopy(a), m)
    assert is_equal(result, b)
    # Neither input is touched by diffing
    assert is_equal(a, before)
    # Applying again changes nothing
    assert is_equal(apply(result, m), b)


def check_symmetric_diff_and_apply(a, b):
    "Check that apply(a, diff_to_modifier(a, b)) reproduces b and vice versa."
    check_diff_and_apply(a, b)
    check_diff_and_apply(b, a)


class FakeCollection(object):
    """In memory stand-in for a document collection."""

    def __init__(self, *docs, id_field="_id"):
        self.id_field = id_field
        self.docs = {d[id_field]: copy.deepcopy(d) for d in docs}
        self.updates = []
        self.queries = []

    def find_one(self, query):
        self.queries.append(query)
        doc = self.docs.get(query[self.id_field])
        return copy.deepcopy(doc) if doc is not None else None

    def find(self, query):
        return [copy.deepcopy(d) for d in self.docs.values()
                if all(d.get(k) == v for k, v in query.items())]

    def update(self, query, update):
        self.updates.append((query, update))
        doc = self.docs[query[self.id_field]]
        for keypath in update.get("$unset", {}):
            unset_key_path(keypath, doc)
        for keypath, value in update.get("$set", {}).items():
            set_value_for_key_path(value, keypath, doc)
