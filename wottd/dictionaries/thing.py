#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for dictionaries to represent Things and their version information.
"""

from wottd.dictionaries.base import WotBaseDict
from wottd.dictionaries.form import FormDict
from wottd.dictionaries.interaction import interaction_class_for_type
from wottd.dictionaries.link import LinkDict
from wottd.dictionaries.schema import DataSchemaDict
from wottd.dictionaries.security import SecuritySchemeDict
from wottd.enums import InteractionTypes
from wottd.utils.utils import as_list


class VersioningDict(WotBaseDict):
    """Version information of the TD instance and, optionally, of the
    device model (firmware and hardware versions may be added as extensions)."""

    class Meta:
        fields = {
            "instance",
            "model"
        }

        required = {
            "instance"
        }


class ThingFragment(WotBaseDict):
    """ThingFragment is a wrapper around a dictionary that contains properties
    representing semantic metadata, interactions (Properties, Actions and Events)
    and security configuration. It is the unvalidated representation of a
    Thing Description document that builders accumulate and validators check."""

    class Meta:
        fields = {
            "@context",
            "@type",
            "id",
            "title",
            "titles",
            "description",
            "descriptions",
            "version",
            "created",
            "modified",
            "support",
            "base",
            "properties",
            "actions",
            "events",
            "links",
            "forms",
            "security",
            "securityDefinitions",
            "schemaDefinitions",
            "uriVariables",
            "profile"
        }

    @property
    def context(self):
        """The JSON-LD @context entries (always a list)."""

        return as_list(self._init.get("@context"))

    @property
    def security(self):
        """Names of the security schemes that must all be satisfied for access
        to resources at or below the Thing level, if not overridden at a lower level."""

        return as_list(self._init.get("security"))

    @property
    def security_definitions(self):
        """Dict of named security configurations."""

        return {
            key: SecuritySchemeDict.build(val)
            for key, val in self._init.get("securityDefinitions", {}).items()
        }

    @property
    def schema_definitions(self):
        """Dict of named data schemas that forms may reference."""

        return {
            key: DataSchemaDict.build(val)
            for key, val in self._init.get("schemaDefinitions", {}).items()
        }

    @property
    def uri_variables(self):
        """Define URI template variables as collection based on DataSchema declarations."""

        if "uriVariables" not in self._init:
            return None

        return {
            key: DataSchemaDict.build(val)
            for key, val in self._init["uriVariables"].items()
        }

    def _interaction_dicts(self, key, interaction_type):
        klass = interaction_class_for_type(interaction_type)

        return {
            name: klass(val)
            for name, val in self._init.get(key, {}).items()
        }

    @property
    def properties(self):
        """The properties optional attribute represents a dict with keys
        that correspond to Property names and values of type PropertyAffordanceDict."""

        return self._interaction_dicts("properties", InteractionTypes.PROPERTY)

    @property
    def actions(self):
        """The actions optional attribute represents a dict with keys
        that correspond to Action names and values of type ActionAffordanceDict."""

        return self._interaction_dicts("actions", InteractionTypes.ACTION)

    @property
    def events(self):
        """The events optional attribute represents a dictionary with keys
        that correspond to Event names and values of type EventAffordanceDict."""

        return self._interaction_dicts("events", InteractionTypes.EVENT)

    @property
    def links(self):
        """The links optional attribute represents an array of Link objects."""

        return [LinkDict(item) for item in self._init.get("links", [])]

    @property
    def forms(self):
        """Forms that describe Thing-level operations (e.g. readallproperties)."""

        return [FormDict(item) for item in self._init.get("forms", [])]

    @property
    def version(self):
        """Provides version information."""

        return VersioningDict(self._init.get("version")) if self._init.get("version") else None

    @property
    def profile(self):
        """Profiles the Thing conforms to (always a list)."""

        return as_list(self._init.get("profile"))

    def interactions(self):
        """Returns a list of (map name, interaction name, interaction) tuples
        for every Property, Action and Event of this Thing."""

        ret = []

        for key, val in self.properties.items():
            ret.append(("properties", key, val))

        for key, val in self.actions.items():
            ret.append(("actions", key, val))

        for key, val in self.events.items():
            ret.append(("events", key, val))

        return ret
