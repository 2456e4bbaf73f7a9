#!/usr/bin/env python
# -*- coding: utf-8 -*-


def assert_equal_dict(dict_a, dict_b):
    """Asserts that both dicts are equal."""

    assert set(dict_a.keys()) == set(dict_b.keys())

    for key in dict_a:
        assert dict_a[key] == dict_b[key]


def violation_types(violations):
    """Returns the list of class names of the given violations."""

    return [type(item).__name__ for item in violations]


def find_violation(violations, klass):
    """Returns the first violation of the given class (or None)."""

    return next((item for item in violations if isinstance(item, klass)), None)
