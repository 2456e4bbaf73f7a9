#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that implements the JSON codec.
"""

import json

from wottd.codecs.base import BaseCodec
from wottd.enums import MediaTypes


class JsonCodec(BaseCodec):
    """JSON codec class. Thing Descriptions are JSON-LD documents,
    so the same codec serves the TD and JSON-LD media types."""

    def __init__(self, indent=None):
        self._indent = indent

    @property
    def media_types(self):
        """Returns the JSON media types."""

        return [MediaTypes.JSON, MediaTypes.TD_JSON, MediaTypes.JSON_LD]

    def to_value(self, value):
        """Takes an encoded value that may be an UTF8 bytes
        or unicode JSON string and deserializes it to a Python object."""

        if isinstance(value, bytes):
            value = value.decode("utf8")

        return json.loads(value)

    def to_str(self, value):
        """Takes an object and serializes it to an unicode JSON string."""

        return json.dumps(value, indent=self._indent, ensure_ascii=False)

    def to_bytes(self, value):
        """Takes an object and serializes it to an UTF8 bytes JSON string."""

        return self.to_str(value).encode("utf8")
