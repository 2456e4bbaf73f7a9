#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest

from wottd.enums import (
    DataType,
    InteractionTypes,
    Operation,
    SecuritySchemeType,
    operations_for_type
)


def test_enum_list():
    """Enumerations list their values in declaration order."""

    assert DataType.list() == ["boolean", "integer", "number", "string", "object", "array", "null"]
    assert ("NOSEC", "nosec") in SecuritySchemeType.items()


def test_enum_has():
    """Membership checks only accept the enumerated strings."""

    assert SecuritySchemeType.has("oauth2")
    assert not SecuritySchemeType.has("OAUTH2")
    assert not DataType.has(None)
    assert not DataType.has(["string"])


def test_operations_for_type():
    """Each interaction kind has its own operation whitelist."""

    assert operations_for_type(InteractionTypes.PROPERTY) == {
        "readproperty",
        "writeproperty",
        "observeproperty",
        "unobserveproperty"
    }

    assert operations_for_type(InteractionTypes.ACTION) == {"invokeaction", "queryaction", "cancelaction"}
    assert operations_for_type(InteractionTypes.EVENT) == {"subscribeevent", "unsubscribeevent"}

    assert operations_for_type() == {
        "readallproperties",
        "writeallproperties",
        "readmultipleproperties",
        "writemultipleproperties"
    }

    all_ops = set().union(*[operations_for_type(item) for item in InteractionTypes.list() + [None]])

    assert all_ops == set(Operation.list())

    with pytest.raises(AssertionError):
        operations_for_type("Thing")
