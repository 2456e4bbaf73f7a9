#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Constants related to objects in the Thing Description hierarchy.
"""

WOT_TD_CONTEXT_URL_V1 = "https://www.w3.org/2019/wot/td/v1"
"""W3C WoT TD 1.0 semantic context."""

WOT_TD_CONTEXT_URL_V11 = "https://www.w3.org/2022/wot/td/v1.1"
"""W3C WoT TD 1.1 semantic context."""

WOT_TD_CONTEXT_URL = WOT_TD_CONTEXT_URL_V11
"""Context used when none has been declared."""

DEFAULT_CONTENT_TYPE = "application/json"
"""Content type assumed by forms and responses that do not declare one."""

TITLES = "titles"
DESCRIPTIONS = "descriptions"

MULTILANGUAGE_FIELDS = (TITLES, DESCRIPTIONS)
"""Fields that map language tags to human-readable text."""
