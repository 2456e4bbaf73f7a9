#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents a validated, immutable Thing Description document
and its JSON serialization format.
"""

import copy
import json

from wottd.codecs.jsoncodec import JsonCodec
from wottd.dictionaries.thing import ThingFragment
from wottd.errors import InvalidDescription, MalformedField, UnresolvedSecurityReference
from wottd.utils.utils import as_list
from wottd.validator import ThingValidator


class ThingDescription:
    """Class that represents a Thing Description document.
    Instances always contain a document that passed validation and cannot be modified;
    use to_builder() to obtain a builder that produces a changed document."""

    def __init__(self, doc, content_type=None):
        """Constructor.
        Accepts a dict or a serialized (str or bytes) document.
        Validates that the document conforms to the TD invariants.
        Raises InvalidDescription if validation fails."""

        doc = self._decode(doc, content_type=content_type)
        self.validate(doc=doc)
        self._set_doc(doc)

    def __setattr__(self, name, value):
        raise AttributeError("ThingDescription objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("ThingDescription objects are immutable")

    def __getattr__(self, name):
        """Search for members that raised an AttributeError in
        the internal ThingFragment before propagating the exception."""

        if name.startswith("_"):
            raise AttributeError(name)

        return copy.deepcopy(getattr(self._thing_fragment, name))

    def __eq__(self, other):
        return isinstance(other, ThingDescription) and self._doc == other._doc

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(json.dumps(self._doc, sort_keys=True))

    def __repr__(self):
        return "ThingDescription(id={!r}, title={!r})".format(self._doc.get("id"), self._doc.get("title"))

    def _set_doc(self, doc):
        doc = copy.deepcopy(doc)
        object.__setattr__(self, "_doc", doc)
        object.__setattr__(self, "_thing_fragment", ThingFragment(doc))

    @classmethod
    def _decode(cls, doc, content_type=None):
        if not isinstance(doc, (str, bytes)):
            return doc

        codec = JsonCodec()

        if content_type and not codec.supports(content_type):
            raise ValueError("Unsupported content type: {}".format(content_type))

        try:
            return codec.to_value(doc)
        except ValueError as ex:
            raise InvalidDescription([MalformedField("Invalid JSON document: {}".format(ex))])

    @classmethod
    def _from_validated(cls, doc):
        """Builds an instance from a document that has already been validated."""

        instance = cls.__new__(cls)
        instance._set_doc(doc)

        return instance

    @classmethod
    def validate(cls, doc):
        """Validates the given Thing Description document.
        Raises InvalidDescription with every violation if validation fails."""

        violations = ThingValidator(doc).validate()

        if violations:
            raise InvalidDescription(violations, doc=doc)

    @classmethod
    def from_str(cls, value, content_type=None):
        """Decodes and validates a JSON-serialized Thing Description (str or bytes).
        Raises ValueError if the given content type is not a JSON media type."""

        return cls(value, content_type=content_type)

    @classmethod
    def from_bytes(cls, value, content_type=None):
        """Decodes and validates an UTF8 bytes JSON-serialized Thing Description."""

        return cls.from_str(value, content_type=content_type)

    @property
    def doc(self):
        """Thing Description document as a dict (a copy)."""

        return self.to_dict()

    @property
    def id(self):
        """Thing ID."""

        return self._doc.get("id")

    def to_dict(self):
        """Returns the JSON Thing Description as a dict."""

        return copy.deepcopy(self._doc)

    def to_str(self, indent=None):
        """Returns the JSON Thing Description as a string."""

        return JsonCodec(indent=indent).to_str(self._doc)

    def to_bytes(self):
        """Returns the JSON Thing Description as an UTF8 bytes string."""

        return JsonCodec().to_bytes(self._doc)

    def to_thing_fragment(self):
        """Returns a ThingFragment dictionary built from this TD."""

        return ThingFragment(self._doc)

    def to_builder(self, **kwargs):
        """Returns a ThingBuilder populated with the contents of this TD."""

        from wottd.builder import ThingBuilder

        return ThingBuilder.from_dict(self._doc, **kwargs)

    def security_scheme(self, name):
        """Returns the security scheme that is defined with the given name.
        Raises UnresolvedSecurityReference if there is no such scheme."""

        definitions = self._thing_fragment.security_definitions

        if name not in definitions:
            raise UnresolvedSecurityReference(name, path=("securityDefinitions",))

        return definitions[name]

    def resolve_security(self, names):
        """Returns the list of security schemes for the given name (or list of names)."""

        return [self.security_scheme(name) for name in as_list(names)]

    def effective_security(self, form=None, interaction=None):
        """Returns the security schemes that apply to the given form and/or interaction:
        the form overrides the interaction, which overrides the Thing default."""

        names = None

        if form is not None and form.security is not None:
            names = form.security
        elif interaction is not None and interaction.security is not None:
            names = interaction.security

        if names is None:
            names = self._thing_fragment.security

        return self.resolve_security(names)

    def get_interaction(self, name):
        """Returns the interaction that matches the given name.
        Properties shadow actions and actions shadow events."""

        for interactions in (self.properties, self.actions, self.events):
            if name in interactions:
                return interactions[name]

        return None

    def get_forms(self, name):
        """Returns a list of FormDict for the interaction that matches the given name."""

        if name in self.properties:
            return self.get_property_forms(name)

        if name in self.actions:
            return self.get_action_forms(name)

        if name in self.events:
            return self.get_event_forms(name)

        return []

    def get_property_forms(self, name):
        """Returns a list of FormDict for the property that matches the given name."""

        return self.properties[name].forms

    def get_action_forms(self, name):
        """Returns a list of FormDict for the action that matches the given name."""

        return self.actions[name].forms

    def get_event_forms(self, name):
        """Returns a list of FormDict for the event that matches the given name."""

        return self.events[name].forms
