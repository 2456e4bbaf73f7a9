#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents the codec interface.
"""


def _media_type(content_type):
    """Strips the parameters (e.g. charset) from a Content-Type value."""

    return content_type.split(";", 1)[0].strip().lower()


class BaseCodec:
    """Base codec abstract class.
    Codecs translate Thing Description documents between
    their Python dict form and one or more serialization formats."""

    @property
    def media_types(self):
        """Property getter for the supported media types of this codec."""

        raise NotImplementedError()

    def supports(self, content_type):
        """Returns True if documents of the given Content-Type
        (parameters such as charset are ignored) can be decoded by this codec."""

        return _media_type(content_type) in self.media_types

    def to_value(self, value):
        """Decodes an UTF8 bytes or unicode document into a Python object."""

        raise NotImplementedError()

    def to_str(self, value):
        """Encodes a Python object into an unicode string."""

        raise NotImplementedError()

    def to_bytes(self, value):
        """Encodes a Python object into an UTF8 bytes string."""

        raise NotImplementedError()
