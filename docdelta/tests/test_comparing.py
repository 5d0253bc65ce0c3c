# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
from decimal import Decimal

import pytest

from docdelta import Missing
from docdelta.diffing.comparing import ValueKind, value_kind, should_set, should_unset


@pytest.mark.parametrize("value, kind", [
    ([1, 2], ValueKind.SEQUENCE),
    ((), ValueKind.SEQUENCE),
    (datetime.date(2020, 1, 1), ValueKind.TEMPORAL),
    (datetime.datetime(2020, 1, 1, 12), ValueKind.TEMPORAL),
    (5, ValueKind.NUMERIC),
    (-0.5, ValueKind.NUMERIC),
    ({"a": 1}, ValueKind.MAPPING),
    ({}, ValueKind.MAPPING),
    ("text", ValueKind.SCALAR),
    (True, ValueKind.SCALAR),
    ("", ValueKind.ABSENT),
    (0, ValueKind.ABSENT),
    (float("nan"), ValueKind.ABSENT),
    (False, ValueKind.ABSENT),
    (None, ValueKind.ABSENT),
    (b"", ValueKind.ABSENT),
    (set(), ValueKind.ABSENT),
    (Decimal(0), ValueKind.ABSENT),
    (b"x", ValueKind.SCALAR),
    (Decimal("1.5"), ValueKind.SCALAR),
    (Missing, ValueKind.ABSENT),
])
def test_value_kind(value, kind):
    assert value_kind(value) is kind


def test_should_set_sequences():
    assert should_set([1, 2], Missing)
    assert should_set([1, 2], [2, 1])
    assert should_set([], [1])
    assert not should_set([1, {"a": 2}], [1, {"a": 2}])


def test_should_set_dates():
    day = datetime.datetime(2020, 1, 1, 12, 30)
    assert not should_set(day, datetime.datetime(2020, 1, 1, 12, 30))
    assert should_set(day, datetime.datetime(2020, 1, 1, 12, 31))
    assert should_set(day, day.isoformat())
    assert should_set(day, day.date())
    assert should_set(day, Missing)


def test_should_set_numbers_strictly():
    assert not should_set(5, 5)
    assert not should_set(5, 5.0)
    assert should_set(5, "5")
    assert should_set(1, True)
    assert should_set(5, 6)
    assert should_set(5, Missing)


def test_should_set_mappings():
    assert should_set({"a": 1}, {"a": 2})
    assert should_set({}, Missing)
    assert not should_set({"a": [1]}, {"a": [1]})


def test_should_set_scalars():
    assert should_set("a", "b")
    assert not should_set("a", "a")
    assert should_set(True, 1)
    assert not should_set(True, True)


def test_falsy_values_never_set():
    for val in (0, "", False, None, Missing, b"", set(), Decimal(0)):
        assert not should_set(val, "something")
        assert not should_set(val, Missing)


def test_should_unset_when_value_disappears():
    assert should_unset(Missing, 1)
    assert should_unset(Missing, "a")
    assert should_unset(Missing, {"a": 1})
    assert should_unset(0, 1)
    assert should_unset(None, "a")
    # Zero was present, it is a number
    assert should_unset(Missing, 0)


def test_should_unset_emptied_mapping():
    assert should_unset({}, {"a": 1})
    assert not should_unset({"b": 1}, {"a": 1})


def test_should_not_unset():
    assert not should_unset(Missing, Missing)
    assert not should_unset(Missing, "")
    assert not should_unset(Missing, None)
    assert not should_unset(0, 0)
    assert not should_unset({}, {})
    assert not should_unset(2, 1)
    assert not should_unset("b", "a")
