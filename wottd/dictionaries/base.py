#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Base class for TD dictionaries.
"""

import copy

from wottd.utils.utils import merge_args_kwargs_dict, to_camel, to_json_obj


class WotBaseDict:
    """Base class for all the TD data types represented as dictionaries.
    Keys that are not part of the known vocabulary are kept as extensions."""

    class Meta:
        fields = set()
        required = set()
        defaults = dict()

    def __init__(self, *args, **kwargs):
        """Constructor.
        Will raise ValueError if there is some required field missing."""

        kwargs_camel = {to_camel(key): val for key, val in kwargs.items()}
        init_dict = merge_args_kwargs_dict(args, kwargs_camel)

        self._init = {key: to_json_obj(val) for key, val in init_dict.items()}

        try:
            required = self.Meta.required
        except AttributeError:
            required = []

        for field in required:
            if field not in self._init:
                raise ValueError("Missing required field: {}".format(field))

    def __getattr__(self, name):
        """Transforms the field name to camelCase and
        attemps to retrieve it from the internal dict."""

        if name.startswith("_"):
            raise AttributeError(name)

        name_camel = to_camel(name)

        if name_camel not in self.Meta.fields:
            raise AttributeError(name)

        if name_camel in self._init:
            return self._init[name_camel]

        try:
            return self.Meta.defaults.get(name_camel, None)
        except AttributeError:
            return None

    def __eq__(self, other):
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self._init)

    def __contains__(self, key):
        return key in self._init

    @property
    def semantic_type(self):
        """The JSON-LD @type annotation (a string or a list of strings)."""

        return self._init.get("@type")

    @property
    def extensions(self):
        """Dict of the members that are not part of the known vocabulary
        of this dictionary (e.g. protocol binding or vendor terms)."""

        return {
            key: copy.deepcopy(val)
            for key, val in self._init.items()
            if key not in self.Meta.fields and not key.startswith("@")
        }

    def to_dict(self):
        """Returns the pure dict (JSON-serializable) representation of this TD dictionary.
        Only the members that were explicitly set are included."""

        return copy.deepcopy(self._init)
