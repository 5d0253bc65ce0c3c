# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff_to_modifier, forward_diff_to_modifier, obj_to_modifier
from .keypaths import (
    keypaths, value_for_key_path, set_value_for_key_path, unset_key_path,
    key_path_contains_path, filtered_key_paths)
from .log import (
    DocDeltaError, ModifierFormatError, InvalidArgument,
    MissingComparisonTarget, MissingSetter, ConsistencyViolation)
from .modifier_format import Missing, Modifier
from .patching import (
    apply, apply_set, apply_unset, add_to_set, modifier_to_obj, map_modifier_to_key)
from .syncing import update


__all__ = [
    "__version__",
    "diff_to_modifier", "forward_diff_to_modifier", "obj_to_modifier",
    "keypaths", "value_for_key_path", "set_value_for_key_path", "unset_key_path",
    "key_path_contains_path", "filtered_key_paths",
    "apply", "apply_set", "apply_unset", "add_to_set",
    "modifier_to_obj", "map_modifier_to_key",
    "update",
    "Missing", "Modifier",
    "DocDeltaError", "ModifierFormatError", "InvalidArgument",
    "MissingComparisonTarget", "MissingSetter", "ConsistencyViolation",
    ]
