# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff_to_modifier, forward_diff_to_modifier, obj_to_modifier

__all__ = ["diff_to_modifier", "forward_diff_to_modifier", "obj_to_modifier"]
