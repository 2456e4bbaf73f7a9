#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Builder that accumulates the fields of a Thing Description in any order
and produces a validated :class:`wottd.td.ThingDescription` on finalize.
"""

import copy
import datetime
import logging

from wottd.config import get_default_context, get_duplicate_policy
from wottd.constants import DESCRIPTIONS, TITLES
from wottd.dictionaries.interaction import (
    ActionAffordanceDict,
    EventAffordanceDict,
    PropertyAffordanceDict
)
from wottd.dictionaries.thing import ThingFragment
from wottd.enums import DuplicatePolicy
from wottd.errors import InvalidDescription
from wottd.td import ThingDescription
from wottd.utils.utils import as_list, to_camel, to_json_obj
from wottd.validator import ThingValidator


def _init_from(value, kwargs):
    """Merges a dictionary (or a TD dictionary wrapper) with
    snake_case keyword arguments into a new pure dict."""

    init = to_json_obj(value) if value is not None else {}

    if not isinstance(init, dict):
        raise TypeError("Expected a dict or a TD dictionary: {!r}".format(value))

    init.update({to_camel(key): to_json_obj(val) for key, val in kwargs.items()})

    return init


def _format_datetime(val):
    if isinstance(val, datetime.datetime):
        return val.isoformat()

    return val


class ThingBuilder:
    """Incremental, order-independent builder of Thing Descriptions.

    Singular fields keep the last value that was set. Mapping fields
    (properties, actions, events, security and schema definitions) insert
    or overwrite by key, unless the builder was created with the
    DuplicatePolicy.REJECT policy, in which case repeated keys are
    reported as DuplicateDefinitionName violations on finalize.

    Every method that modifies the builder returns the builder itself."""

    def __init__(self, on_duplicate=None):
        on_duplicate = on_duplicate or get_duplicate_policy()

        if not DuplicatePolicy.has(on_duplicate):
            raise ValueError("Unknown duplicate policy: {}".format(on_duplicate))

        self._on_duplicate = on_duplicate
        self._doc = {}
        self._duplicates = []
        self._logr = logging.getLogger(__name__)

    @classmethod
    def from_dict(cls, doc, on_duplicate=None):
        """Builds a builder populated with the given Thing Description document.
        Unknown members are kept as extensions."""

        if not isinstance(doc, dict):
            raise TypeError("Expected a dict: {!r}".format(doc))

        builder = cls(on_duplicate=on_duplicate)
        builder._doc = copy.deepcopy(doc)

        return builder

    @classmethod
    def from_fragment(cls, thing_fragment, on_duplicate=None):
        """Builds a builder populated with the given ThingFragment."""

        return cls.from_dict(thing_fragment.to_dict(), on_duplicate=on_duplicate)

    @property
    def on_duplicate(self):
        """The DuplicatePolicy of this builder."""

        return self._on_duplicate

    @property
    def duplicates(self):
        """List of (path, name) tuples of the keys that were added twice
        while the REJECT policy was in place."""

        return list(self._duplicates)

    @property
    def thing_fragment(self):
        """Returns a ThingFragment with the current (unvalidated) contents."""

        return ThingFragment(self._build_doc())

    def _put(self, map_key, name, value):
        mapping = self._doc.setdefault(map_key, {})

        if name in mapping:
            if self._on_duplicate == DuplicatePolicy.REJECT:
                self._logr.warning("Rejected duplicate name in {}: {}".format(map_key, name))
                self._duplicates.append(((map_key, name), name))
                return self

            self._logr.debug("Overwriting {} entry: {}".format(map_key, name))

        mapping[name] = value

        return self

    def _set(self, key, value):
        self._doc[key] = to_json_obj(value)
        return self

    def _add_multilanguage(self, key, key_map, text, lang):
        if lang is None:
            return self._set(key, text)

        self._doc.setdefault(key_map, {})[lang] = text

        return self

    def set_context(self, context):
        """Sets the JSON-LD @context: a URL string, a prefix-to-URI dict or a list of those."""

        return self._set("@context", context)

    def add_context(self, entry):
        """Appends an entry to the @context (the default context is kept as first entry)."""

        context = as_list(self._doc.get("@context")) or [get_default_context()]
        context.append(to_json_obj(entry))
        self._doc["@context"] = context

        return self

    def set_type(self, semantic_type):
        """Sets the JSON-LD @type annotation of the Thing."""

        return self._set("@type", semantic_type)

    def set_id(self, thing_id):
        """Sets the identifier (URI) of the Thing."""

        return self._set("id", thing_id)

    def add_title(self, title, lang=None):
        """Sets the default title or, if lang is given, the title for that language tag."""

        return self._add_multilanguage("title", TITLES, title, lang)

    def add_description(self, description, lang=None):
        """Sets the default description or, if lang is given, the description for that language tag."""

        return self._add_multilanguage("description", DESCRIPTIONS, description, lang)

    def set_version(self, instance, model=None):
        """Sets the version information of the TD instance (and optionally of the device model)."""

        version = {"instance": instance}

        if model is not None:
            version["model"] = model

        return self._set("version", version)

    def set_created(self, created):
        """Sets the creation date-time (datetime or ISO 8601 string)."""

        return self._set("created", _format_datetime(created))

    def set_modified(self, modified):
        """Sets the last modification date-time (datetime or ISO 8601 string)."""

        return self._set("modified", _format_datetime(modified))

    def set_support(self, support):
        """Sets the URI of the support information of the Thing."""

        return self._set("support", support)

    def set_base(self, base):
        """Sets the base URI used to resolve relative form targets."""

        return self._set("base", base)

    def add_property(self, name, prop=None, **kwargs):
        """Adds a Property (PropertyAffordanceDict, dict or keyword arguments)."""

        return self._put("properties", name, PropertyAffordanceDict(_init_from(prop, kwargs)).to_dict())

    def add_action(self, name, action=None, **kwargs):
        """Adds an Action (ActionAffordanceDict, dict or keyword arguments)."""

        return self._put("actions", name, ActionAffordanceDict(_init_from(action, kwargs)).to_dict())

    def add_event(self, name, event=None, **kwargs):
        """Adds an Event (EventAffordanceDict, dict or keyword arguments)."""

        return self._put("events", name, EventAffordanceDict(_init_from(event, kwargs)).to_dict())

    def add_security_definition(self, scheme_name, definition=None, **kwargs):
        """Adds a named security scheme (SecuritySchemeDict, dict or keyword arguments).
        Keyword arguments may include the scheme and name terms of the definition."""

        return self._put("securityDefinitions", scheme_name, _init_from(definition, kwargs))

    def remove_security_definition(self, name):
        """Removes the security scheme with the given name (references to it are kept)."""

        self._doc.get("securityDefinitions", {}).pop(name, None)

        return self

    def set_default_security(self, names):
        """Sets the names (a string or a list) of the security schemes that apply by default."""

        return self._set("security", as_list(names))

    def add_schema_definition(self, name, schema=None, **kwargs):
        """Adds a named data schema that forms may reference in their additional responses."""

        return self._put("schemaDefinitions", name, _init_from(schema, kwargs))

    def add_uri_variable(self, name, schema=None, **kwargs):
        """Adds a Thing-level URI template variable described by a data schema."""

        self._doc.setdefault("uriVariables", {})[name] = _init_from(schema, kwargs)

        return self

    def add_form(self, form=None, **kwargs):
        """Adds a Thing-level form (FormDict, dict or keyword arguments)."""

        self._doc.setdefault("forms", []).append(_init_from(form, kwargs))

        return self

    def add_link(self, link=None, **kwargs):
        """Adds a link (LinkDict, dict or keyword arguments)."""

        self._doc.setdefault("links", []).append(_init_from(link, kwargs))

        return self

    def add_profile(self, profile):
        """Adds the URI of a profile the Thing conforms to."""

        profiles = as_list(self._doc.get("profile"))
        profiles.append(profile)
        self._doc["profile"] = profiles

        return self

    def set_extension(self, key, value):
        """Sets a member outside of the TD vocabulary (e.g. a vendor or protocol term)."""

        if key in ThingFragment.Meta.fields:
            raise ValueError("Not an extension member: {}".format(key))

        self._doc[key] = to_json_obj(value)

        return self

    def _build_doc(self):
        doc = copy.deepcopy(self._doc)
        context = doc.pop("@context", None)

        if context is None:
            context = [get_default_context()]

        ret = {"@context": context}
        ret.update(doc)

        return ret

    def validate(self):
        """Returns the ordered list of violations of the current contents
        (an empty list when the document is valid) without raising."""

        return ThingValidator(self._build_doc(), duplicates=self._duplicates).validate()

    def finalize(self):
        """Validates the accumulated contents and returns an immutable ThingDescription.
        Raises InvalidDescription with every violation if validation fails.
        The builder is not modified and may be finalized again."""

        doc = self._build_doc()
        violations = ThingValidator(doc, duplicates=self._duplicates).validate()

        if violations:
            self._logr.info("Thing Description rejected with {} violation(s)".format(len(violations)))
            raise InvalidDescription(violations, doc=doc)

        return ThingDescription._from_validated(doc)
