#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Generic helpers shared by the rest of the package.

.. autosummary::
    :toctree: _utils

    wottd.utils.enums
    wottd.utils.utils
"""
