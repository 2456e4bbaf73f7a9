#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Package defaults that can be overridden with environment variables.
"""

import logging
import os

from wottd.constants import WOT_TD_CONTEXT_URL
from wottd.enums import DuplicatePolicy

ENV_DUPLICATE_POLICY = "WOTTD_DUPLICATE_POLICY"
ENV_DEFAULT_CONTEXT = "WOTTD_DEFAULT_CONTEXT"

_logger = logging.getLogger(__name__)


def get_duplicate_policy():
    """Returns the duplicate policy used by builders that do not declare one.
    Falls back to DuplicatePolicy.OVERWRITE for unknown values."""

    policy = os.environ.get(ENV_DUPLICATE_POLICY, DuplicatePolicy.OVERWRITE)
    policy = policy.strip().lower()

    if not DuplicatePolicy.has(policy):
        _logger.warning("Unknown {} value: {}".format(ENV_DUPLICATE_POLICY, policy))
        return DuplicatePolicy.OVERWRITE

    return policy


def get_default_context():
    """Returns the @context used when a builder does not declare one."""

    return os.environ.get(ENV_DEFAULT_CONTEXT) or WOT_TD_CONTEXT_URL
