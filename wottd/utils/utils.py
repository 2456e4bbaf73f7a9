#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Some utility functions for the TD data type wrappers.
"""

import copy


def merge_args_kwargs_dict(args, kwargs):
    """Takes a tuple of args and dict of kwargs.
    Returns a dict that is the result of merging a copy of the first
    item of args (if that item is a dict) and the kwargs dict."""

    init_dict = {}

    if len(args) > 0 and isinstance(args[0], dict):
        init_dict = copy.deepcopy(args[0])

    init_dict.update(kwargs)

    return init_dict


def to_camel(val):
    """Takes a string and transforms it to camelCase."""

    if not isinstance(val, str):
        raise ValueError

    parts = val.split("_")
    parts = parts[:1] + [item.title() for item in parts[1:]]

    return "".join(parts)


def to_json_obj(obj):
    """Recursive function that converts any TD wrapper found
    inside the given object into its pure dict representation."""

    if hasattr(obj, "to_dict"):
        return obj.to_dict()

    if isinstance(obj, dict):
        return {key: to_json_obj(val) for key, val in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [to_json_obj(item) for item in obj]

    return copy.deepcopy(obj)


def as_list(val):
    """Returns the given value as a list.
    TD terms such as op or security accept a single item or an array."""

    if val is None:
        return []

    if isinstance(val, (list, tuple)):
        return list(val)

    return [val]
