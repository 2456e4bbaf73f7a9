#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for data schema dictionaries.
"""

from wottd.dictionaries.base import WotBaseDict
from wottd.enums import DataType
from wottd.utils.utils import merge_args_kwargs_dict, to_camel


def iter_nested_schemas(schema):
    """Yields (relative path, nested schema dict) tuples for the direct children of
    the given data schema dict: object properties, array items and oneOf alternatives.
    Members that are not dicts are skipped."""

    if not isinstance(schema, dict):
        return

    properties = schema.get("properties")

    if isinstance(properties, dict):
        for key, val in properties.items():
            if isinstance(val, dict):
                yield ("properties", key), val

    items = schema.get("items")

    if isinstance(items, dict):
        yield ("items",), items
    elif isinstance(items, list):
        for idx, val in enumerate(items):
            if isinstance(val, dict):
                yield ("items", idx), val

    one_of = schema.get("oneOf")

    if isinstance(one_of, list):
        for idx, val in enumerate(one_of):
            if isinstance(val, dict):
                yield ("oneOf", idx), val


def _iter_subclasses(klass):
    for item in klass.__subclasses__():
        yield item
        yield from _iter_subclasses(item)


class DataSchemaDict(WotBaseDict):
    """Represents the common properties of a value type definition.
    Used directly for schemas without a type (e.g. only enum, const or oneOf)."""

    class Meta:
        fields = {
            "@type",
            "title",
            "titles",
            "description",
            "descriptions",
            "type",
            "const",
            "default",
            "unit",
            "enum",
            "oneOf",
            "readOnly",
            "writeOnly",
            "format",
            "contentEncoding",
            "contentMediaType"
        }

        defaults = {
            "readOnly": False,
            "writeOnly": False
        }

    data_type = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        if self.data_type and "type" not in self._init:
            self._init["type"] = self.data_type

    @classmethod
    def build(cls, *args, **kwargs):
        """Builds an instance of the appropriate subclass for the given type.
        Falls back to the untyped DataSchemaDict when the type is missing or unknown."""

        kwargs = {to_camel(key): val for key, val in kwargs.items()}
        init_dict = merge_args_kwargs_dict(args, kwargs)

        klass_type = init_dict.get("type")

        klass = DataSchemaDict if not DataType.has(klass_type) else next(
            item for item in _iter_subclasses(DataSchemaDict)
            if item.data_type == klass_type)

        return klass(init_dict)

    @property
    def type(self):
        """The value type (a member of DataType), None for untyped schemas."""

        return self._init.get("type", self.data_type)

    @property
    def one_of(self):
        """Alternative data schemas (the value must match exactly one of them)."""

        if "oneOf" not in self._init:
            return None

        return [DataSchemaDict.build(item) for item in self._init["oneOf"]]

    @property
    def is_untyped(self):
        """True if this schema does not declare a type."""

        return "type" not in self._init

    @property
    def nested(self):
        """Dict that maps the relative path of each direct child schema to its wrapper."""

        return {
            path: DataSchemaDict.build(child)
            for path, child in iter_nested_schemas(self._init)
        }


class NumberSchemaDict(DataSchemaDict):
    """Properties to describe a numeric type."""

    class Meta:
        fields = DataSchemaDict.Meta.fields.union({
            "minimum",
            "maximum",
            "exclusiveMinimum",
            "exclusiveMaximum",
            "multipleOf"
        })

        defaults = DataSchemaDict.Meta.defaults

    data_type = DataType.NUMBER


class IntegerSchemaDict(NumberSchemaDict):
    """Properties to describe an integer type."""

    data_type = DataType.INTEGER


class BooleanSchemaDict(DataSchemaDict):
    """Properties to describe a boolean type."""

    data_type = DataType.BOOLEAN


class NullSchemaDict(DataSchemaDict):
    """Properties to describe the null type (the value can only be null)."""

    data_type = DataType.NULL


class StringSchemaDict(DataSchemaDict):
    """Properties to describe a string type."""

    class Meta:
        fields = DataSchemaDict.Meta.fields.union({
            "minLength",
            "maxLength",
            "pattern"
        })

        defaults = DataSchemaDict.Meta.defaults

    data_type = DataType.STRING


class ObjectSchemaDict(DataSchemaDict):
    """Properties to describe an object type."""

    class Meta:
        fields = DataSchemaDict.Meta.fields.union({
            "properties",
            "required"
        })

        defaults = DataSchemaDict.Meta.defaults

    data_type = DataType.OBJECT

    @property
    def properties(self):
        """Data schema nested definitions (in declaration order)."""

        return {
            key: DataSchemaDict.build(val)
            for key, val in self._init.get("properties", {}).items()
        }

    @property
    def required(self):
        """Names of the members that must be present in object values."""

        return list(self._init.get("required", []))


class ArraySchemaDict(DataSchemaDict):
    """Properties to describe an array type."""

    class Meta:
        fields = DataSchemaDict.Meta.fields.union({
            "items",
            "minItems",
            "maxItems"
        })

        defaults = DataSchemaDict.Meta.defaults

    data_type = DataType.ARRAY

    @property
    def items(self):
        """Used to define the characteristics of an array.
        Returns a list of schemas when the array is described as a tuple."""

        if "items" not in self._init:
            return None

        items = self._init["items"]

        if isinstance(items, list):
            return [DataSchemaDict.build(item) for item in items]

        return DataSchemaDict.build(items)
