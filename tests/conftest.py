#!/usr/bin/env python
# -*- coding: utf-8 -*-

import copy

import pytest

from tests.td_examples import TD_EXAMPLE, TD_TEMPERATURE
from wottd.builder import ThingBuilder
from wottd.dictionaries.form import FormDict
from wottd.dictionaries.interaction import PropertyAffordanceDict
from wottd.dictionaries.security import NoSecuritySchemeDict


@pytest.fixture
def td_example():
    """A copy of the lamp example Thing Description."""

    return copy.deepcopy(TD_EXAMPLE)


@pytest.fixture
def td_temperature():
    """A copy of the temperature sensor Thing Description."""

    return copy.deepcopy(TD_TEMPERATURE)


@pytest.fixture
def temperature_builder():
    """A builder for a Thing with a single readOnly temperature property."""

    prop = PropertyAffordanceDict(type="number", read_only=True)
    prop.add_form(FormDict(href="https://dev/temp", op=["readproperty"]))

    builder = ThingBuilder()
    builder.add_title("TemperatureSensor")
    builder.add_property("temperature", prop)
    builder.add_security_definition("nosec", NoSecuritySchemeDict())
    builder.set_default_security(["nosec"])

    return builder
