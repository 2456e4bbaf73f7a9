#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Validator that checks the invariants of a Thing Description document
and collects every violation instead of stopping at the first one.
"""

import logging
import math
import re

import jsonschema

from wottd.constants import MULTILANGUAGE_FIELDS
from wottd.dictionaries.schema import iter_nested_schemas
from wottd.dictionaries.security import BearerSecuritySchemeDict, OAuth2SecuritySchemeDict, SecuritySchemeDict
from wottd.enums import (
    DataType,
    InteractionTypes,
    OAuth2Flow,
    Operation,
    SecurityLocation,
    SecuritySchemeType,
    operations_for_type
)
from wottd.errors import (
    DuplicateDefinitionName,
    EmptyDefaultSecurity,
    IllegalFormOperation,
    InvalidLanguageTag,
    InvalidMinMax,
    InvalidMultipleOf,
    InvalidName,
    InvalidUri,
    MalformedField,
    MalformedSchema,
    MalformedSecurityScheme,
    UnresolvedSchemaReference,
    UnresolvedSecurityReference
)
from wottd.utils.utils import as_list
from wottd.validation import (
    SCHEMA_THING,
    is_valid_datetime,
    is_valid_language_tag,
    is_valid_name,
    is_valid_uri,
    is_valid_uri_reference
)

INTERACTION_MAPS = (
    ("properties", InteractionTypes.PROPERTY),
    ("actions", InteractionTypes.ACTION),
    ("events", InteractionTypes.EVENT)
)

INTERACTION_SCHEMA_FIELDS = {
    InteractionTypes.PROPERTY: tuple(),
    InteractionTypes.ACTION: ("input", "output"),
    InteractionTypes.EVENT: ("subscription", "data", "dataResponse", "cancellation")
}

NAMED_MAPS = (
    "properties",
    "actions",
    "events",
    "securityDefinitions",
    "schemaDefinitions"
)

OPS_READ_PROPERTY = frozenset([
    Operation.READ_PROPERTY,
    Operation.OBSERVE_PROPERTY,
    Operation.UNOBSERVE_PROPERTY
])

OAUTH2_FLOW_REQUIRED = {
    OAuth2Flow.CODE: ("authorization", "token"),
    OAuth2Flow.CLIENT: ("token",),
    OAuth2Flow.DEVICE: ("authorization", "token")
}

SECURITY_URI_FIELDS = frozenset(
    SecuritySchemeDict.uri_fields +
    BearerSecuritySchemeDict.uri_fields +
    OAuth2SecuritySchemeDict.uri_fields)

_TYPE_CHECKER = jsonschema.Draft7Validator.TYPE_CHECKER


def _as_dict(val):
    return val if isinstance(val, dict) else {}


def _is_number(val):
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def _matches_type(value, data_type):
    """Returns True if the JSON value belongs to the given data type."""

    return _TYPE_CHECKER.is_type(value, data_type)


def _json_equal(val_a, val_b):
    """Compares two JSON values without conflating booleans and numbers."""

    if isinstance(val_a, bool) or isinstance(val_b, bool):
        return isinstance(val_a, bool) and isinstance(val_b, bool) and val_a == val_b

    if isinstance(val_a, dict) and isinstance(val_b, dict):
        return val_a.keys() == val_b.keys() and all(
            _json_equal(val_a[key], val_b[key]) for key in val_a)

    if isinstance(val_a, list) and isinstance(val_b, list):
        return len(val_a) == len(val_b) and all(
            _json_equal(item_a, item_b) for item_a, item_b in zip(val_a, val_b))

    return type(val_a) is type(val_b) and val_a == val_b or \
        _is_number(val_a) and _is_number(val_b) and val_a == val_b


class ThingValidator:
    """Checks a Thing Description document (in dict form) against the
    structural JSON schema and the cross-field invariants of the TD model.

    The checks run in a fixed order (structure, data schemas, interactions,
    security definitions, default security, URIs, language tags and names)
    so that the same document always yields the same list of violations."""

    def __init__(self, doc, duplicates=None):
        self._doc = doc
        self._duplicates = list(duplicates or [])
        self._violations = []
        self._schemas = []
        self._logr = logging.getLogger(__name__)

    @property
    def violations(self):
        """Violations found by the last call to validate()."""

        return list(self._violations)

    def validate(self):
        """Runs every check and returns the ordered list of violations.
        An empty list means that the document is valid."""

        self._violations = []
        self._schemas = []

        if not isinstance(self._doc, dict):
            self._add(MalformedField("Thing Description must be an object"))
            return self.violations

        self._check_structure()
        self._check_data_schemas()
        self._check_interactions()
        self._check_thing_forms()
        self._check_security_definitions()
        self._check_default_security()
        self._check_uris()
        self._check_language_tags()
        self._check_names()

        self._logr.debug("Thing Description validated with {} violation(s)".format(len(self._violations)))

        return self.violations

    def _add(self, violation):
        self._violations.append(violation)

    def _mapping(self, key):
        return _as_dict(self._doc.get(key))

    @property
    def _security_definitions(self):
        return self._mapping("securityDefinitions")

    def _check_structure(self):
        """Checks the shape of every field with the JSON schema of the TD vocabulary."""

        validator = jsonschema.Draft7Validator(SCHEMA_THING)

        errors = sorted(
            validator.iter_errors(self._doc),
            key=lambda err: [str(item) for item in err.absolute_path])

        for err in errors:
            self._add(MalformedField(err.message, path=tuple(err.absolute_path)))

        for key in ("created", "modified"):
            val = self._doc.get(key)

            if isinstance(val, str) and not is_valid_datetime(val):
                self._add(MalformedField("Invalid date-time: {}".format(val), path=(key,)))

    def _schema_roots(self):
        """Returns the (path, schema) tuples of every top-level data schema of the document."""

        roots = []

        for map_key, interaction_type in INTERACTION_MAPS:
            for name, intrct in self._mapping(map_key).items():
                if not isinstance(intrct, dict):
                    continue

                if interaction_type == InteractionTypes.PROPERTY:
                    roots.append(((map_key, name), intrct))

                for field in INTERACTION_SCHEMA_FIELDS[interaction_type]:
                    if isinstance(intrct.get(field), dict):
                        roots.append(((map_key, name, field), intrct[field]))

                for key, val in _as_dict(intrct.get("uriVariables")).items():
                    if isinstance(val, dict):
                        roots.append(((map_key, name, "uriVariables", key), val))

        for map_key in ("uriVariables", "schemaDefinitions"):
            for key, val in self._mapping(map_key).items():
                if isinstance(val, dict):
                    roots.append(((map_key, key), val))

        return roots

    def _check_data_schemas(self):
        """Walks every data schema tree with an explicit stack (no recursion limit)."""

        stack = list(reversed(self._schema_roots()))

        while stack:
            path, schema = stack.pop()
            self._schemas.append((path, schema))
            self._check_data_schema(path, schema)
            children = list(iter_nested_schemas(schema))
            stack.extend((path + rel_path, child) for rel_path, child in reversed(children))

    def _check_data_schema(self, path, schema):
        if schema.get("readOnly") is True and schema.get("writeOnly") is True:
            self._add(MalformedSchema("A data schema cannot be both readOnly and writeOnly", path=path))

        data_type = schema.get("type")

        if not DataType.has(data_type):
            data_type = None

        enum = schema.get("enum") if isinstance(schema.get("enum"), list) else None

        if data_type and enum:
            for idx, item in enumerate(enum):
                if not _matches_type(item, data_type):
                    self._add(MalformedSchema(
                        "enum value {!r} does not match type {}".format(item, data_type),
                        path=path + ("enum", idx)))

        if "const" in schema:
            const = schema["const"]

            if data_type and not _matches_type(const, data_type):
                self._add(MalformedSchema(
                    "const value {!r} does not match type {}".format(const, data_type),
                    path=path + ("const",)))

            if enum and not any(_json_equal(const, item) for item in enum):
                self._add(MalformedSchema(
                    "const value {!r} is not one of the enum values".format(const),
                    path=path + ("const",)))

        if data_type == DataType.OBJECT:
            self._check_object_schema(path, schema)
        elif data_type in (DataType.NUMBER, DataType.INTEGER):
            self._check_numeric_schema(path, schema)
        elif data_type == DataType.STRING:
            self._check_string_schema(path, schema)
        elif data_type == DataType.ARRAY:
            self._check_min_max(path, schema, "minItems", "maxItems")

    def _check_object_schema(self, path, schema):
        properties = _as_dict(schema.get("properties"))
        required = schema.get("required")

        if not isinstance(required, list):
            return

        for name in required:
            if isinstance(name, str) and name not in properties:
                self._add(MalformedSchema(
                    "Required property is not declared in properties: {}".format(name),
                    path=path + ("required",)))

    def _check_min_max(self, path, schema, key_min, key_max, exclusive=False):
        val_min = schema.get(key_min)
        val_max = schema.get(key_max)

        if not _is_number(val_min) or not _is_number(val_max):
            return

        if val_min > val_max or (exclusive and val_min == val_max):
            self._add(InvalidMinMax(
                "{} ({}) is greater than {} ({})".format(key_min, val_min, key_max, val_max),
                path=path))

    def _check_numeric_schema(self, path, schema):
        bounds = ("minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum")
        nan_bounds = set()

        for key in bounds:
            val = schema.get(key)

            if isinstance(val, float) and math.isnan(val):
                self._add(InvalidMinMax("{} cannot be NaN".format(key), path=path + (key,)))
                nan_bounds.add(key)

        pairs = (
            ("minimum", "maximum", False),
            ("exclusiveMinimum", "exclusiveMaximum", True),
            ("minimum", "exclusiveMaximum", True),
            ("exclusiveMinimum", "maximum", True)
        )

        for key_min, key_max, exclusive in pairs:
            if key_min not in nan_bounds and key_max not in nan_bounds:
                self._check_min_max(path, schema, key_min, key_max, exclusive=exclusive)

        multiple_of = schema.get("multipleOf")

        if _is_number(multiple_of) and not multiple_of > 0:
            self._add(InvalidMultipleOf(
                "multipleOf must be greater than zero",
                path=path + ("multipleOf",)))

    def _check_string_schema(self, path, schema):
        self._check_min_max(path, schema, "minLength", "maxLength")

        pattern = schema.get("pattern")

        if not isinstance(pattern, str):
            return

        try:
            re.compile(pattern)
        except re.error as ex:
            self._add(MalformedSchema(
                "Invalid pattern: {}".format(ex),
                path=path + ("pattern",)))

    def _check_security_names(self, names, path):
        definitions = self._security_definitions

        for name in as_list(names):
            if isinstance(name, str) and name not in definitions:
                self._add(UnresolvedSecurityReference(name, path=path))

    def _check_form(self, form, path, allowed_ops, forbidden_ops=None, op_required=False):
        ops = [item for item in as_list(form.get("op")) if isinstance(item, str)]

        if op_required and not ops:
            self._add(IllegalFormOperation(
                None, message="Thing-level forms must declare op",
                path=path + ("op",)))

        for op in ops:
            if op not in allowed_ops:
                self._add(IllegalFormOperation(op, path=path + ("op",)))
            elif forbidden_ops and op in forbidden_ops:
                self._add(IllegalFormOperation(op, message=forbidden_ops[op], path=path + ("op",)))

        if "security" in form:
            self._check_security_names(form.get("security"), path + ("security",))

        schema_definitions = self._mapping("schemaDefinitions")
        responses = form.get("additionalResponses")

        for idx, response in enumerate(responses if isinstance(responses, list) else []):
            schema_name = _as_dict(response).get("schema")

            if isinstance(schema_name, str) and schema_name not in schema_definitions:
                self._add(UnresolvedSchemaReference(
                    schema_name, path=path + ("additionalResponses", idx, "schema")))

    def _forbidden_property_ops(self, path, prop):
        """Returns a dict of operations that the access flags of the property forbid."""

        read_only = prop.get("readOnly") is True
        write_only = prop.get("writeOnly") is True

        if read_only and write_only:
            return {}

        if read_only:
            return {
                Operation.WRITE_PROPERTY: "writeproperty is not allowed on a readOnly property"
            }

        if write_only:
            return {
                op: "{} is not allowed on a writeOnly property".format(op)
                for op in OPS_READ_PROPERTY
            }

        return {}

    def _check_interactions(self):
        for map_key, interaction_type in INTERACTION_MAPS:
            allowed_ops = operations_for_type(interaction_type)

            for name, intrct in self._mapping(map_key).items():
                if not isinstance(intrct, dict):
                    continue

                path = (map_key, name)
                forbidden_ops = None

                if interaction_type == InteractionTypes.PROPERTY:
                    forbidden_ops = self._forbidden_property_ops(path, intrct)

                if "security" in intrct:
                    self._check_security_names(intrct.get("security"), path + ("security",))

                forms = intrct.get("forms")

                for idx, form in enumerate(forms if isinstance(forms, list) else []):
                    if isinstance(form, dict):
                        self._check_form(form, path + ("forms", idx), allowed_ops, forbidden_ops)

    def _check_thing_forms(self):
        forms = self._doc.get("forms")
        allowed_ops = operations_for_type(None)

        for idx, form in enumerate(forms if isinstance(forms, list) else []):
            if isinstance(form, dict):
                self._check_form(form, ("forms", idx), allowed_ops, op_required=True)

    def _combo_cycles(self):
        """Returns the names of the combo schemes that (transitively) reference themselves."""

        definitions = self._security_definitions

        def children(name):
            scheme = _as_dict(definitions.get(name))

            if scheme.get("scheme") != SecuritySchemeType.COMBO:
                return []

            return [
                item for item in as_list(scheme.get("oneOf")) + as_list(scheme.get("allOf"))
                if isinstance(item, str) and item in definitions
            ]

        cyclic = set()

        for root in definitions:
            stack = list(children(root))
            seen = set()

            while stack:
                name = stack.pop()

                if name == root:
                    cyclic.add(root)
                    break

                if name in seen:
                    continue

                seen.add(name)
                stack.extend(children(name))

        return cyclic

    def _check_combo_scheme(self, path, scheme, cyclic):
        has_one_of = "oneOf" in scheme
        has_all_of = "allOf" in scheme

        if has_one_of == has_all_of:
            self._add(MalformedSecurityScheme("combo schemes require exactly one of oneOf or allOf", path=path))
            return

        key = "oneOf" if has_one_of else "allOf"
        names = scheme.get(key)

        if not isinstance(names, list):
            return

        if len(names) < 2:
            self._add(MalformedSecurityScheme(
                "combo schemes must combine at least two schemes",
                path=path + (key,)))

        self._check_security_names(names, path + (key,))

        if path[-1] in cyclic:
            self._add(MalformedSecurityScheme("combo scheme references itself", path=path + (key,)))

    def _check_oauth2_scheme(self, path, scheme):
        flow = scheme.get("flow")

        if flow is None:
            self._add(MalformedSecurityScheme("oauth2 schemes require flow", path=path))
            return

        if not OAuth2Flow.has(flow):
            self._add(MalformedSecurityScheme("Unknown oauth2 flow: {}".format(flow), path=path + ("flow",)))
            return

        for key in OAUTH2_FLOW_REQUIRED[flow]:
            if key not in scheme:
                self._add(MalformedSecurityScheme(
                    "oauth2 {} flow requires {}".format(flow, key),
                    path=path))

    def _check_security_definitions(self):
        cyclic = self._combo_cycles()

        for name, scheme in self._security_definitions.items():
            if not isinstance(scheme, dict) or not isinstance(scheme.get("scheme"), str):
                continue

            path = ("securityDefinitions", name)
            kind = scheme["scheme"]

            if not SecuritySchemeType.has(kind) and ":" not in kind:
                self._add(MalformedSecurityScheme("Unknown security scheme: {}".format(kind), path=path + ("scheme",)))
                continue

            location = scheme.get("in")

            if isinstance(location, str) and not SecurityLocation.has(location):
                self._add(MalformedSecurityScheme(
                    "Unknown security location: {}".format(location),
                    path=path + ("in",)))

            if kind == SecuritySchemeType.COMBO:
                self._check_combo_scheme(path, scheme, cyclic)
            elif kind == SecuritySchemeType.OAUTH2:
                self._check_oauth2_scheme(path, scheme)

    def _check_default_security(self):
        names = [item for item in as_list(self._doc.get("security")) if isinstance(item, str)]

        if not names:
            self._add(EmptyDefaultSecurity())
            return

        self._check_security_names(names, ("security",))

    def _check_uri(self, val, path, reference=False):
        if not isinstance(val, str):
            return

        is_valid = is_valid_uri_reference(val) if reference else is_valid_uri(val)

        if not is_valid:
            self._add(InvalidUri(val, path=path))

    def _check_uris(self):
        for key in ("id", "base", "support"):
            if key in self._doc:
                self._check_uri(self._doc[key], (key,))

        for item in as_list(self._doc.get("profile")):
            self._check_uri(item, ("profile",))

        links = self._doc.get("links")

        for idx, link in enumerate(links if isinstance(links, list) else []):
            link = _as_dict(link)

            for key in ("href", "anchor"):
                if key in link:
                    self._check_uri(link[key], ("links", idx, key), reference=True)

        form_lists = [(("forms",), self._doc.get("forms"))]

        for map_key, _ in INTERACTION_MAPS:
            for name, intrct in self._mapping(map_key).items():
                form_lists.append(((map_key, name, "forms"), _as_dict(intrct).get("forms")))

        for path, forms in form_lists:
            for idx, form in enumerate(forms if isinstance(forms, list) else []):
                if "href" in _as_dict(form):
                    self._check_uri(form["href"], path + (idx, "href"), reference=True)

        for name, scheme in self._security_definitions.items():
            for key in sorted(SECURITY_URI_FIELDS):
                if key in _as_dict(scheme):
                    self._check_uri(scheme[key], ("securityDefinitions", name, key))

    def _check_multilanguage(self, path, obj):
        for field in MULTILANGUAGE_FIELDS:
            for tag in _as_dict(obj.get(field)).keys():
                if not is_valid_language_tag(tag):
                    self._add(InvalidLanguageTag(tag, path=path + (field,)))

    def _check_language_tags(self):
        self._check_multilanguage(tuple(), self._doc)

        for map_key, _ in INTERACTION_MAPS:
            for name, intrct in self._mapping(map_key).items():
                if isinstance(intrct, dict) and map_key != "properties":
                    self._check_multilanguage((map_key, name), intrct)

        for path, schema in self._schemas:
            self._check_multilanguage(path, schema)

        for name, scheme in self._security_definitions.items():
            self._check_multilanguage(("securityDefinitions", name), _as_dict(scheme))

        links = self._doc.get("links")

        for idx, link in enumerate(links if isinstance(links, list) else []):
            for tag in as_list(_as_dict(link).get("hreflang")):
                if isinstance(tag, str) and not is_valid_language_tag(tag):
                    self._add(InvalidLanguageTag(tag, path=("links", idx, "hreflang")))

    def _check_names(self):
        for map_key in NAMED_MAPS:
            for name in self._mapping(map_key):
                if not is_valid_name(name):
                    self._add(InvalidName("Names cannot be empty", path=(map_key,)))

        for path, name in self._duplicates:
            self._add(DuplicateDefinitionName(name, path=path))


def validate_thing(doc, duplicates=None):
    """Validates the given Thing Description document (dict)
    and returns the ordered list of violations."""

    return ThingValidator(doc, duplicates=duplicates).validate()
