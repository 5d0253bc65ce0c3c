# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from docdelta import (
    update, MissingComparisonTarget, MissingSetter, ConsistencyViolation)

from .utils import FakeCollection


class Store(object):
    """Records calls to get and set."""

    def __init__(self, doc):
        self.doc = doc
        self.calls = []

    def get(self):
        self.calls.append("get")
        return self.doc

    def set(self, doc):
        self.calls.append("set")
        self.doc = doc


def test_update_with_getter_and_setter():
    model = {"_id": 1, "name": "a", "tags": ["x"], "old": {"v": 1}}
    store = Store(copy.deepcopy(model))
    doc = {"_id": 1, "name": "b", "tags": ["x", "y"]}

    m = update(doc, get=store.get, set=store.set)

    assert m == {"set": {"name": "b", "tags": ["x", "y"]}, "unset": {"old": True}}
    assert store.calls == ["get", "set"]
    assert store.doc == doc


def test_update_does_not_mutate_model():
    model = {"_id": 1, "a": {"b": 1}}
    before = copy.deepcopy(model)
    stored = []
    update({"_id": 1, "a": {"b": 2}}, get=lambda: model, set=stored.append)
    assert model == before
    assert stored == [{"_id": 1, "a": {"b": 2}}]


def test_update_unchanged_returns_none():
    store = Store({"_id": 1, "a": 1})
    assert update({"_id": 1, "a": 1}, get=store.get, set=store.set) is None
    assert store.calls == ["get"]


def test_update_with_collection(base_doc, remote_doc):
    coll = FakeCollection(base_doc)
    m = update(remote_doc, collection=coll)

    assert coll.queries == [{"_id": "user-1"}]
    assert len(coll.updates) == 1
    query, update_doc = coll.updates[0]
    assert query == {"_id": "user-1"}
    assert set(update_doc) == {"$set", "$unset"}
    assert update_doc["$set"] == m["set"]
    assert update_doc["$unset"] == m["unset"]
    assert coll.docs["user-1"] == remote_doc


def test_update_with_collection_and_custom_id_field():
    coll = FakeCollection({"key": "k", "a": 1}, id_field="key")
    m = update({"key": "k", "a": 2}, collection=coll, id_field="key")
    assert m == {"set": {"a": 2}}
    assert coll.queries == [{"key": "k"}]


def test_update_without_model():
    with pytest.raises(MissingComparisonTarget):
        update({"_id": 1, "a": 1}, get=lambda: None, set=lambda d: None)
    with pytest.raises(MissingComparisonTarget):
        update({"_id": 1, "a": 1}, set=lambda d: None)
    with pytest.raises(MissingComparisonTarget):
        update({"_id": 2}, collection=FakeCollection({"_id": 1}))


def test_update_without_setter():
    with pytest.raises(MissingSetter):
        update({"_id": 1, "a": 2}, get=lambda: {"_id": 1, "a": 1})


def test_update_without_setter_and_no_change():
    assert update({"_id": 1, "a": 1}, get=lambda: {"_id": 1, "a": 1}) is None


def test_update_consistency_violation():
    # A null value is dropped instead of stored, so the
    # stored document can never match the desired one
    stored = []
    with pytest.raises(ConsistencyViolation):
        update({"_id": 1, "a": 1, "b": None},
               get=lambda: {"_id": 1}, set=stored.append)
    assert stored == [{"_id": 1, "a": 1}]


def test_update_ignores_fields():
    store = Store({"_id": 1, "a": 1, "meta": {"rev": 1}})
    doc = {"_id": 1, "a": 2, "meta": {"rev": 7}}
    m = update(doc, get=store.get, set=store.set, ignore=["meta"])
    assert m == {"set": {"a": 2}}
    assert store.doc == {"_id": 1, "a": 2, "meta": {"rev": 1}}


def test_update_empty_model_is_a_comparison_target():
    stored = []
    m = update({"a": 1}, get=lambda: {}, set=stored.append)
    assert m == {"set": {"a": 1}}
    assert stored == [{"a": 1}]

    coll = FakeCollection({"_id": 1})
    m = update({"_id": 1, "a": 1}, collection=coll)
    assert m == {"set": {"a": 1}}
    assert coll.docs[1] == {"_id": 1, "a": 1}


def test_update_getter_takes_precedence_over_collection():
    coll = FakeCollection({"_id": 1, "a": 5})
    m = update({"_id": 1, "a": 2}, get=lambda: {"_id": 1, "a": 1}, collection=coll)
    assert m == {"set": {"a": 2}}
    assert coll.queries == []
    assert coll.updates == [({"_id": 1}, {"$set": {"a": 2}})]


def test_update_with_non_callable_setter():
    with pytest.raises(MissingSetter):
        update({"_id": 1, "a": 2}, get=lambda: {"_id": 1, "a": 1}, set="not callable")

    coll = FakeCollection({"_id": 1, "a": 1})
    update({"_id": 1, "a": 2}, set="not callable", collection=coll)
    assert coll.docs[1] == {"_id": 1, "a": 2}
