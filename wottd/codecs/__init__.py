#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Classes to serialize and deserialize Thing Description documents.

.. autosummary::
    :toctree: _codecs

    wottd.codecs.base
    wottd.codecs.jsoncodec
"""
