# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Per keypath change rules.

Values are sorted into kinds, and each kind of new value has its own
rule for whether it must be written. Falsy values (including numeric
zero) are ABSENT: they are never written, their removal is expressed
with an unset instead.
"""

import datetime
import enum
import numbers

from ..containers import is_equal
from ..modifier_format import Missing

__all__ = ["ValueKind", "value_kind", "should_set", "should_unset"]


class ValueKind(enum.Enum):
    SEQUENCE = "sequence"
    TEMPORAL = "temporal"
    NUMERIC = "numeric"
    MAPPING = "mapping"
    SCALAR = "scalar"
    ABSENT = "absent"


def is_number(x):
    "Real numbers, excluding bools and numeric strings."
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def value_kind(x):
    if x is Missing or x is None or x is False:
        return ValueKind.ABSENT
    if isinstance(x, bool):
        return ValueKind.SCALAR
    if is_number(x):
        # Zero and NaN are falsy
        if x == 0 or x != x:
            return ValueKind.ABSENT
        return ValueKind.NUMERIC
    if isinstance(x, str):
        return ValueKind.SCALAR if x else ValueKind.ABSENT
    if isinstance(x, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(x, (datetime.date, datetime.time)):
        return ValueKind.TEMPORAL
    if isinstance(x, dict):
        return ValueKind.MAPPING
    if not x:
        return ValueKind.ABSENT
    return ValueKind.SCALAR


def is_present(x):
    return value_kind(x) is not ValueKind.ABSENT or is_number(x)


def _set_structural(val, prev):
    return not is_equal(prev, val)


def _set_temporal(val, prev):
    return value_kind(prev) is not ValueKind.TEMPORAL or type(prev) is not type(val) or prev != val


def _set_numeric(val, prev):
    return not is_number(prev) or prev != val


def _set_scalar(val, prev):
    return type(prev) is not type(val) or prev != val


def _set_absent(val, prev):
    return False


_set_rules = {
    ValueKind.SEQUENCE: _set_structural,
    ValueKind.TEMPORAL: _set_temporal,
    ValueKind.NUMERIC: _set_numeric,
    ValueKind.MAPPING: _set_structural,
    ValueKind.SCALAR: _set_scalar,
    ValueKind.ABSENT: _set_absent,
}


def should_set(val, prev):
    """Whether val must be written where the old document holds prev."""
    return _set_rules[value_kind(val)](val, prev)


def should_unset(val, prev):
    """Whether the keypath holding prev must be removed when the new
    document holds val there.
    """
    if is_equal(prev, val):
        return False
    if is_present(prev) and value_kind(val) is ValueKind.ABSENT:
        return True
    if (value_kind(prev) in (ValueKind.MAPPING, ValueKind.SEQUENCE) and
            isinstance(val, dict) and not val):
        return True
    return False
