#!/usr/bin/env python
# -*- coding: utf-8 -*-

import datetime

import pytest
from faker import Faker

from tests.td_examples import TD_EXAMPLE, TD_TEMPERATURE
from tests.utils import violation_types
from wottd.builder import ThingBuilder
from wottd.constants import WOT_TD_CONTEXT_URL
from wottd.dictionaries.form import FormDict
from wottd.dictionaries.interaction import ActionAffordanceDict, PropertyAffordanceDict
from wottd.dictionaries.link import LinkDict
from wottd.dictionaries.schema import ObjectSchemaDict
from wottd.dictionaries.security import BasicSecuritySchemeDict, NoSecuritySchemeDict
from wottd.dictionaries.thing import ThingFragment
from wottd.enums import DuplicatePolicy
from wottd.errors import (
    DuplicateDefinitionName,
    IllegalFormOperation,
    InvalidDescription,
    UnresolvedSecurityReference
)
from wottd.td import ThingDescription


def test_finalize_temperature(temperature_builder):
    """A Thing with a single readOnly property and nosec security is valid."""

    thing_description = temperature_builder.finalize()

    expected = dict(TD_TEMPERATURE)
    expected["@context"] = [WOT_TD_CONTEXT_URL]

    assert isinstance(thing_description, ThingDescription)
    assert thing_description.to_dict() == expected


def test_finalize_unresolved_security(temperature_builder):
    """Default security names must be defined."""

    temperature_builder.set_default_security(["basic"])

    with pytest.raises(InvalidDescription) as exc_info:
        temperature_builder.finalize()

    assert isinstance(exc_info.value.first, UnresolvedSecurityReference)
    assert exc_info.value.first.name == "basic"
    assert exc_info.value.doc["security"] == ["basic"]


def test_finalize_illegal_property_operation(temperature_builder):
    """Property forms cannot invoke actions."""

    prop = PropertyAffordanceDict(type="number", read_only=True)
    prop.add_form(FormDict(href="https://dev/temp", op=["invokeaction"]))
    temperature_builder.add_property("temperature", prop)

    with pytest.raises(InvalidDescription) as exc_info:
        temperature_builder.finalize()

    assert violation_types(exc_info.value.violations) == ["IllegalFormOperation"]
    assert exc_info.value.first == IllegalFormOperation(
        "invokeaction", path=("properties", "temperature", "forms", 0, "op"))


def test_finalize_required_properties(temperature_builder):
    """Required members of object schemas must be declared."""

    temperature_builder.add_action(
        "configure",
        input=ObjectSchemaDict(properties={"unit": {"type": "string"}}, required=["unit", "offset"]),
        forms=[{"href": "https://dev/configure"}])

    violations = temperature_builder.validate()

    assert violation_types(violations) == ["MalformedSchema"]

    temperature_builder.add_action(
        "configure",
        input=ObjectSchemaDict(properties={"unit": {"type": "string"}}, required=["unit"]),
        forms=[{"href": "https://dev/configure"}])

    assert temperature_builder.validate() == []


def test_remove_security_definition(temperature_builder):
    """Removing a referenced security definition breaks the reference."""

    temperature_builder.remove_security_definition("nosec")

    violations = temperature_builder.validate()

    assert violation_types(violations) == ["UnresolvedSecurityReference"]
    assert violations[0].name == "nosec"


def test_finalize_idempotent(temperature_builder):
    """Finalizing an unmodified builder twice yields equal documents."""

    td_a = temperature_builder.finalize()
    td_b = temperature_builder.finalize()

    assert td_a == td_b
    assert td_a is not td_b
    assert td_a.to_dict() == td_b.to_dict()


def test_finalize_does_not_share_state(temperature_builder):
    """Later builder changes do not affect previously finalized documents."""

    thing_description = temperature_builder.finalize()
    temperature_builder.add_title("Other")
    temperature_builder.add_property("humidity", type="number", forms=[{"href": "https://dev/hum"}])

    assert thing_description.title == "TemperatureSensor"
    assert list(thing_description.properties.keys()) == ["temperature"]


def test_order_independence():
    """Calls may be made in any order."""

    builder_a = ThingBuilder()
    builder_a.add_title("Sensor")
    builder_a.add_security_definition("nosec", NoSecuritySchemeDict())
    builder_a.set_default_security("nosec")
    builder_a.set_id("urn:dev:sensor")

    builder_b = ThingBuilder()
    builder_b.set_id("urn:dev:sensor")
    builder_b.set_default_security(["nosec"])
    builder_b.add_security_definition("nosec", scheme="nosec")
    builder_b.add_title("Sensor")

    assert builder_a.finalize() == builder_b.finalize()


def test_last_write_wins():
    """Singular fields keep the last value."""

    builder = ThingBuilder()
    builder.add_title("First")
    builder.add_title("Second")
    builder.set_id("urn:dev:a")
    builder.set_id("urn:dev:b")

    assert builder.thing_fragment.title == "Second"
    assert builder.thing_fragment.id == "urn:dev:b"


def test_duplicates_overwrite(temperature_builder):
    """By default mapping entries are overwritten."""

    assert temperature_builder.on_duplicate == DuplicatePolicy.OVERWRITE

    temperature_builder.add_security_definition("nosec", BasicSecuritySchemeDict())

    assert temperature_builder.validate() == []
    assert temperature_builder.duplicates == []
    assert temperature_builder.finalize().security_definitions["nosec"].scheme == "basic"


def test_duplicates_reject():
    """Repeated names are reported when duplicates are rejected."""

    builder = ThingBuilder(on_duplicate=DuplicatePolicy.REJECT)
    builder.add_security_definition("nosec", NoSecuritySchemeDict())
    builder.set_default_security(["nosec"])
    builder.add_property("status", type="string", forms=[{"href": "https://dev/status"}])
    builder.add_property("status", type="number", forms=[{"href": "https://dev/status"}])
    builder.add_action("status", forms=[{"href": "https://dev/status"}])

    assert builder.duplicates == [(("properties", "status"), "status")]

    with pytest.raises(InvalidDescription) as exc_info:
        builder.finalize()

    assert exc_info.value.violations == [
        DuplicateDefinitionName("status", path=("properties", "status"))
    ]

    assert exc_info.value.doc["properties"]["status"]["type"] == "string"


def test_duplicate_policy_environment(monkeypatch):
    """The default duplicate policy can be set with an environment variable."""

    monkeypatch.setenv("WOTTD_DUPLICATE_POLICY", "REJECT")

    assert ThingBuilder().on_duplicate == DuplicatePolicy.REJECT
    assert ThingBuilder(on_duplicate=DuplicatePolicy.OVERWRITE).on_duplicate == DuplicatePolicy.OVERWRITE


def test_unknown_duplicate_policy():
    """Unknown policies are rejected."""

    with pytest.raises(ValueError):
        ThingBuilder(on_duplicate="ignore")


def test_default_context():
    """The default @context is added when none is set."""

    builder = ThingBuilder()

    assert builder.thing_fragment.context == [WOT_TD_CONTEXT_URL]

    builder.add_context({"saref": "https://w3id.org/saref#"})

    assert builder.thing_fragment.context == [WOT_TD_CONTEXT_URL, {"saref": "https://w3id.org/saref#"}]

    builder.set_context("https://www.w3.org/2019/wot/td/v1")

    assert builder.thing_fragment.context == ["https://www.w3.org/2019/wot/td/v1"]
    assert list(builder.thing_fragment.to_dict().keys())[0] == "@context"


def test_default_context_environment(monkeypatch):
    """The default @context can be set with an environment variable."""

    context_url = Faker().url()
    monkeypatch.setenv("WOTTD_DEFAULT_CONTEXT", context_url)

    assert ThingBuilder().thing_fragment.context == [context_url]


def test_multilanguage(temperature_builder):
    """Titles and descriptions may be added per language."""

    temperature_builder.add_title("Temperatursensor", lang="de")
    temperature_builder.add_description("Measures the temperature")
    temperature_builder.add_description("Misura la temperatura", lang="it")

    thing_description = temperature_builder.finalize()

    assert thing_description.title == "TemperatureSensor"
    assert thing_description.titles == {"de": "Temperatursensor"}
    assert thing_description.descriptions == {"it": "Misura la temperatura"}

    temperature_builder.add_title("Sensor", lang="e1n")

    assert violation_types(temperature_builder.validate()) == ["InvalidLanguageTag"]


def test_metadata(temperature_builder):
    """Metadata fields are stored in their TD form."""

    created = datetime.datetime(2019, 5, 16, 10, 0, 0, tzinfo=datetime.timezone.utc)

    temperature_builder \
        .set_id("urn:dev:ops:temp-1") \
        .set_type(["saref:TemperatureSensor"]) \
        .set_version("1.0.0", model="T1") \
        .set_created(created) \
        .set_modified("2019-05-17T10:00:00Z") \
        .set_support("mailto:support@example.com") \
        .set_base("https://dev/") \
        .add_profile("https://www.w3.org/2022/wot/profile/http-basic/v1")

    thing_description = temperature_builder.finalize()
    doc = thing_description.to_dict()

    assert doc["id"] == "urn:dev:ops:temp-1"
    assert doc["@type"] == ["saref:TemperatureSensor"]
    assert doc["version"] == {"instance": "1.0.0", "model": "T1"}
    assert doc["created"] == "2019-05-16T10:00:00+00:00"
    assert doc["profile"] == ["https://www.w3.org/2022/wot/profile/http-basic/v1"]
    assert thing_description.version.instance == "1.0.0"


def test_kwargs_style():
    """Interactions and definitions may be given as keyword arguments."""

    builder = ThingBuilder()
    builder.add_title("Lamp")
    builder.add_security_definition("apikey_sc", scheme="apikey", name="X-Key")
    builder.set_default_security("apikey_sc")
    builder.add_property(
        "status",
        type="string",
        read_only=True,
        forms=[FormDict(href="https://lamp/status", op="readproperty")])
    builder.add_action("toggle", ActionAffordanceDict(safe=False), forms=[{"href": "https://lamp/toggle"}])
    builder.add_event("overheating", data={"type": "number"}, forms=[{"href": "https://lamp/oh"}])

    thing_description = builder.finalize()

    assert thing_description.properties["status"].read_only is True
    assert thing_description.to_dict()["properties"]["status"]["readOnly"] is True
    assert thing_description.actions["toggle"].forms[0].href == "https://lamp/toggle"
    assert thing_description.events["overheating"].data.type == "number"
    assert thing_description.security_definitions["apikey_sc"].name == "X-Key"


def test_thing_level_forms_and_links(temperature_builder):
    """Thing-level forms and links are appended."""

    temperature_builder.add_form(href="https://dev/properties", op=["readallproperties"])
    temperature_builder.add_link(LinkDict(href="https://dev/manual", rel="service-doc"))
    temperature_builder.add_link(href="icon.png", rel="icon", sizes="16x16")

    thing_description = temperature_builder.finalize()

    assert [form.op for form in thing_description.forms] == [["readallproperties"]]
    assert [link.rel for link in thing_description.links] == ["service-doc", "icon"]

    temperature_builder.add_form(href="https://dev/properties")

    assert violation_types(temperature_builder.validate()) == ["IllegalFormOperation"]


def test_schema_definitions_and_uri_variables(temperature_builder):
    """Schema definitions and Thing-level URI variables can be added."""

    temperature_builder.add_schema_definition("error", type="object", properties={"code": {"type": "integer"}})
    temperature_builder.add_uri_variable("unit", type="string", enum=["C", "F"])

    thing_description = temperature_builder.finalize()

    assert isinstance(thing_description.schema_definitions["error"], ObjectSchemaDict)
    assert thing_description.uri_variables["unit"].enum == ["C", "F"]


def test_extensions(temperature_builder):
    """Members outside of the TD vocabulary are kept."""

    temperature_builder.set_extension("vendor:serial", "A-1234")

    assert temperature_builder.finalize().to_dict()["vendor:serial"] == "A-1234"
    assert temperature_builder.thing_fragment.extensions == {"vendor:serial": "A-1234"}

    with pytest.raises(ValueError):
        temperature_builder.set_extension("title", "Other")


def test_from_dict():
    """Builders may start from an existing document."""

    builder = ThingBuilder.from_dict(TD_EXAMPLE)

    assert builder.finalize().to_dict() == TD_EXAMPLE

    builder.add_title("MyOtherLamp")

    assert builder.finalize().title == "MyOtherLamp"
    assert TD_EXAMPLE["title"] == "MyLampThing"


def test_from_fragment():
    """Builders may start from a ThingFragment."""

    builder = ThingBuilder.from_fragment(ThingFragment(TD_TEMPERATURE))

    assert builder.finalize().to_dict() == TD_TEMPERATURE


def test_invalid_init_type():
    """Interactions must be given as dicts or TD dictionaries."""

    with pytest.raises(TypeError):
        ThingBuilder().add_property("status", ["string"])

    with pytest.raises(TypeError):
        ThingBuilder.from_dict("{}")


def test_invalid_description_message(temperature_builder):
    """The exception message lists every violation."""

    temperature_builder.set_default_security(["basic", "digest"])

    with pytest.raises(InvalidDescription) as exc_info:
        temperature_builder.finalize()

    assert len(exc_info.value.violations) == 2
    assert "basic" in str(exc_info.value)
    assert "digest" in str(exc_info.value)
