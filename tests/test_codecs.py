#!/usr/bin/env python
# -*- coding: utf-8 -*-

import json

from tests.utils import assert_equal_dict
from wottd.enums import MediaTypes
from wottd.codecs.jsoncodec import JsonCodec


def test_json_codec():
    """Content may be serialized to and deserialized from JSON."""

    test_dict = {"unicode": "áéíóú", "ascii": "hello", "num": 100}
    test_unicode = '{"unicode": "áéíóú", "ascii": "hello", "num": 100}'
    test_bytes = test_unicode.encode("utf8")

    json_codec = JsonCodec()

    dict_from_unicode = json_codec.to_value(test_unicode)
    dict_from_bytes = json_codec.to_value(test_bytes)
    bytes_from_dict = json_codec.to_bytes(test_dict)

    assert_equal_dict(dict_from_unicode, test_dict)
    assert_equal_dict(dict_from_bytes, test_dict)

    assert isinstance(bytes_from_dict, bytes)
    assert_equal_dict(json.loads(bytes_from_dict), test_dict)


def test_json_codec_media_types():
    """The JSON codec serves the TD and JSON-LD media types."""

    media_types = JsonCodec().media_types

    assert MediaTypes.JSON in media_types
    assert MediaTypes.TD_JSON in media_types
    assert MediaTypes.JSON_LD in media_types


def test_json_codec_indent():
    """The JSON codec can produce indented output."""

    text = JsonCodec(indent=2).to_str({"a": [1, 2]})

    assert "\n" in text
    assert json.loads(text) == {"a": [1, 2]}


def test_json_codec_supports():
    """Content types are matched without their parameters."""

    json_codec = JsonCodec()

    assert json_codec.supports("application/td+json")
    assert json_codec.supports("application/json; charset=utf-8")
    assert json_codec.supports("Application/LD+JSON")
    assert not json_codec.supports("text/plain")
