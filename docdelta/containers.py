# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy


__all__ = ["is_equal", "clone", "prune", "contains", "union", "difference"]


def is_equal(a, b):
    """Strict structural equality of two documents.

    Unlike ==, booleans never equal numbers. Mapping key order is
    ignored, lists and tuples compare as sequences.
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not is_equal(v, b[k]):
                return False
        return True
    elif isinstance(a, (list, tuple)):
        if not isinstance(b, (list, tuple)) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    elif isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    elif isinstance(a, float) and isinstance(b, float) and a != a and b != b:
        # NaN
        return True
    return a == b


def clone(obj):
    return copy.deepcopy(obj)


def prune(obj):
    """Remove empty mappings from obj, recursively and in place.

    Mappings that become empty because their children were pruned
    are removed as well. Returns obj.
    """
    if isinstance(obj, dict):
        for key in list(obj):
            value = obj[key]
            if isinstance(value, dict):
                prune(value)
                if not value:
                    del obj[key]
    return obj


def contains(seq, item):
    "Whether an item of seq is structurally equal to item."
    return any(is_equal(x, item) for x in seq)


def union(*seqs):
    "Order preserving union of sequences of hashable items."
    seen = set()
    result = []
    for seq in seqs:
        for x in seq:
            if x not in seen:
                seen.add(x)
                result.append(x)
    return result


def difference(a, b):
    "Items of a not in b, in the order of a."
    b = set(b)
    return [x for x in a if x not in b]
