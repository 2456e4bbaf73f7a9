#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Utilities related to enumerations.
"""


class EnumListMixin:
    """Mixin for classes that group string constants of the TD vocabulary.
    Constants are the upper case class attributes with a string value."""

    @classmethod
    def items(cls):
        """Returns the (name, value) tuples of the constants in declaration order."""

        return [
            (name, val) for name, val in vars(cls).items()
            if name.isupper() and isinstance(val, str)
        ]

    @classmethod
    def list(cls):
        """Returns a list of enumerated values."""

        return [val for _, val in cls.items()]

    @classmethod
    def has(cls, value):
        """Returns True if the given value is one of the enumerated values."""

        return isinstance(value, str) and value in cls.list()
