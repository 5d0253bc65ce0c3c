# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime

from .log import ModifierFormatError


# Sentinel to allow None as a value
Missing = object()


class ModifierOp:
    "Collection of valid field names in a modifier."
    SET = "set"
    UNSET = "unset"


# Names used by MongoDB style update documents
UPDATE_OPS = {
    ModifierOp.SET: "$set",
    ModifierOp.UNSET: "$unset",
}


class Modifier(dict):
    """For internal usage in docdelta library.

    Minimal class providing attribute access to the modifier fields.
    Absent fields read as None, so `modifier.set or {}` is the
    idiomatic way to iterate over either of them.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        return self.get(name)

    def __setattr__(self, name, value):
        self[name] = value


class ModifierBuilder(object):
    """Accumulates set/unset entries and produces a Modifier, or None
    when nothing was recorded.
    """

    def __init__(self):
        self._set = {}
        self._unset = {}

    def set(self, keypath, value):
        self._set[keypath] = value

    def unset(self, keypath):
        self._unset[keypath] = True

    def discard_unset(self, keypath):
        self._unset.pop(keypath, None)

    @property
    def set_paths(self):
        return list(self._set)

    @property
    def unset_paths(self):
        return list(self._unset)

    def validated(self):
        modifier = Modifier()
        if self._set:
            modifier.set = self._set
        if self._unset:
            modifier.unset = self._unset
        if not modifier:
            return None
        return modifier


def is_modifier(obj):
    """Whether obj is shaped like a modifier rather than a plain document."""
    if not isinstance(obj, dict) or not obj:
        return False
    for key, value in obj.items():
        if key not in (ModifierOp.SET, ModifierOp.UNSET):
            return False
        if not isinstance(value, dict):
            return False
    return True


def is_valid_modifier(modifier):
    """Checks wheter a modifier is well formed.

    Returns a boolean indicating the well-formedness of the modifier.
    """
    try:
        validate_modifier(modifier)
        result = True
    except ModifierFormatError:
        result = False
    return result


def validate_modifier(modifier):
    """Check wheter a modifier is well formed.

    Raises a ModifierFormatError if not well formed.
    """
    # Imported here, keypaths depends on the Missing sentinel above
    from .keypaths import key_path_contains_path

    if not isinstance(modifier, dict):
        raise ModifierFormatError("Modifier must be a dict, not '{}'.".format(
            type(modifier).__name__))
    for key in modifier:
        if key not in (ModifierOp.SET, ModifierOp.UNSET):
            raise ModifierFormatError("Unknown modifier field '{}'.".format(key))
        if not isinstance(modifier[key], dict):
            raise ModifierFormatError(
                "Modifier field '{}' must map keypaths to values.".format(key))
        for keypath in modifier[key]:
            validate_key_path(keypath)

    setpaths = modifier.get(ModifierOp.SET) or {}
    unsetpaths = sorted(modifier.get(ModifierOp.UNSET) or {})
    for keypath in unsetpaths:
        if keypath in setpaths:
            raise ModifierFormatError(
                "Keypath '{}' is both set and unset.".format(keypath))
    for i, a in enumerate(unsetpaths):
        for b in unsetpaths[i+1:]:
            if key_path_contains_path(a, b):
                raise ModifierFormatError(
                    "Unset keypath '{}' is already covered by '{}'.".format(b, a))


def validate_key_path(keypath):
    if not isinstance(keypath, str):
        msg = "Invalid keypath '{}' of type '{}'. Expecting str."
        raise ModifierFormatError(msg.format(keypath, type(keypath)))
    if not keypath or any(not segment for segment in keypath.split(".")):
        raise ModifierFormatError("Keypath '{}' has an empty segment.".format(keypath))


def to_update_document(modifier):
    """Rename modifier fields to the `$set`/`$unset` form of an external store."""
    if modifier is None:
        return {}
    return {UPDATE_OPS[key]: dict(value) for key, value in modifier.items()}


def from_update_document(update):
    """Inverse of to_update_document."""
    names = {v: k for k, v in UPDATE_OPS.items()}
    modifier = Modifier()
    for key, value in update.items():
        if key not in names:
            raise ModifierFormatError("Unsupported update operator '{}'.".format(key))
        if value:
            modifier[names[key]] = dict(value)
    return modifier or None


def to_modifier(obj):
    """Convert dicts loaded from json into Modifier instances."""
    if obj is None:
        return None
    validate_modifier(obj)
    return Modifier((k, dict(v)) for k, v in obj.items() if v) or None


def json_default(value):
    "Fallback for json.dump, dates are written as ISO 8601 strings."
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError("Object of type {} is not JSON serializable".format(
        type(value).__name__))
