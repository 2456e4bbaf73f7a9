#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Objects of the Thing Description information model represented as classes that are basically dict-wrappers.

.. autosummary::
    :toctree: _dictionaries

    wottd.dictionaries.base
    wottd.dictionaries.form
    wottd.dictionaries.interaction
    wottd.dictionaries.link
    wottd.dictionaries.schema
    wottd.dictionaries.security
    wottd.dictionaries.thing
"""
