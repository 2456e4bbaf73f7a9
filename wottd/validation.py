#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Schemas following the JSON Schema specification used to validate the shape of Thing Description documents,
together with the syntactic checks for URIs, language tags and date-times.
"""

import datetime
import re

from wottd.enums import DataType, InteractionTypes

REGEX_SCHEME = r"[a-zA-Z][a-zA-Z0-9+.\-]*"
REGEX_URI_CHAR = r"(?:[^\s<>\"\\^`|{}%\x00-\x1f\x7f]|%[0-9a-fA-F]{2})"
REGEX_URI_TEMPLATE_EXPR = r"\{[+#./;?&=,!@|]?[a-zA-Z0-9_%.,*:]+\}"
REGEX_ABSOLUTE_URI = r"^" + REGEX_SCHEME + r":" + REGEX_URI_CHAR + r"+$"
REGEX_URI_REFERENCE = r"^(?:" + REGEX_URI_CHAR + r"|" + REGEX_URI_TEMPLATE_EXPR + r")+$"

_LANG_ALPHANUM = r"[a-zA-Z0-9]"
_LANG_LANGUAGE = r"(?:[a-zA-Z]{2,3}(?:-[a-zA-Z]{3}){0,3}|[a-zA-Z]{4}|[a-zA-Z]{5,8})"
_LANG_SCRIPT = r"(?:-[a-zA-Z]{4})"
_LANG_REGION = r"(?:-(?:[a-zA-Z]{2}|[0-9]{3}))"
_LANG_VARIANT = r"(?:-(?:" + _LANG_ALPHANUM + r"{5,8}|[0-9]" + _LANG_ALPHANUM + r"{3}))"
_LANG_EXTENSION = r"(?:-[0-9a-wyzA-WYZ](?:-" + _LANG_ALPHANUM + r"{2,8})+)"
_LANG_PRIVATE_USE = r"(?:[xX](?:-" + _LANG_ALPHANUM + r"{1,8})+)"

REGEX_LANGUAGE_TAG = r"^(?:" + \
                     _LANG_LANGUAGE + _LANG_SCRIPT + r"?" + _LANG_REGION + r"?" + \
                     _LANG_VARIANT + r"*" + _LANG_EXTENSION + r"*" + \
                     r"(?:-" + _LANG_PRIVATE_USE + r")?" + \
                     r"|" + _LANG_PRIVATE_USE + r")$"

LANGUAGE_TAGS_GRANDFATHERED = {
    "en-gb-oed", "i-ami", "i-bnn", "i-default", "i-enochian", "i-hak",
    "i-klingon", "i-lux", "i-mingo", "i-navajo", "i-pwn", "i-tao", "i-tay",
    "i-tsu", "sgn-be-fr", "sgn-be-nl", "sgn-ch-de", "art-lojban",
    "cel-gaulish", "no-bok", "no-nyn", "zh-guoyu", "zh-hakka", "zh-min",
    "zh-min-nan", "zh-xiang"
}

REGEX_DATETIME = r"(\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+\-]\d{2}:\d{2})?"

DATA_TYPES_ENUM = DataType.list()

_STRING = {"type": "string"}

_BOOLEAN = {"type": "boolean"}

_NUMBER = {"type": "number"}

_COUNT = {"type": "integer", "minimum": 0}

_STRING_OR_STRINGS = {
    "anyOf": [
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}}
    ]
}

_MULTILANGUAGE = {
    "type": "object",
    "additionalProperties": {"type": "string"}
}

_REF_DATA_SCHEMA = {"$ref": "#/definitions/dataSchema"}

SCHEMA_DATA_SCHEMA = {
    "type": "object",
    "properties": {
        "@type": _STRING_OR_STRINGS,
        "title": _STRING,
        "titles": _MULTILANGUAGE,
        "description": _STRING,
        "descriptions": _MULTILANGUAGE,
        "type": {
            "type": "string",
            "enum": DATA_TYPES_ENUM
        },
        "const": {},
        "default": {},
        "unit": _STRING,
        "format": _STRING,
        "contentEncoding": _STRING,
        "contentMediaType": _STRING,
        "enum": {
            "type": "array",
            "minItems": 1
        },
        "oneOf": {
            "type": "array",
            "items": _REF_DATA_SCHEMA
        },
        "readOnly": _BOOLEAN,
        "writeOnly": _BOOLEAN,
        "minimum": _NUMBER,
        "maximum": _NUMBER,
        "exclusiveMinimum": _NUMBER,
        "exclusiveMaximum": _NUMBER,
        "multipleOf": _NUMBER,
        "minLength": _COUNT,
        "maxLength": _COUNT,
        "pattern": _STRING,
        "items": {
            "anyOf": [
                _REF_DATA_SCHEMA,
                {"type": "array", "items": _REF_DATA_SCHEMA}
            ]
        },
        "minItems": _COUNT,
        "maxItems": _COUNT,
        "properties": {
            "type": "object",
            "additionalProperties": _REF_DATA_SCHEMA
        },
        "required": {
            "type": "array",
            "items": _STRING
        }
    }
}

SCHEMA_SECURITY_SCHEME = {
    "type": "object",
    "properties": {
        "@type": _STRING_OR_STRINGS,
        "scheme": _STRING,
        "description": _STRING,
        "descriptions": _MULTILANGUAGE,
        "proxy": _STRING,
        "in": _STRING,
        "name": _STRING,
        "qop": {
            "type": "string",
            "enum": ["auth", "auth-int"]
        },
        "authorization": _STRING,
        "token": _STRING,
        "refresh": _STRING,
        "alg": _STRING,
        "format": _STRING,
        "identity": _STRING,
        "flow": _STRING,
        "scopes": _STRING_OR_STRINGS,
        "oneOf": {"type": "array", "items": _STRING},
        "allOf": {"type": "array", "items": _STRING}
    },
    "required": [
        "scheme"
    ]
}

SCHEMA_EXPECTED_RESPONSE = {
    "type": "object",
    "properties": {
        "contentType": _STRING
    }
}

SCHEMA_ADDITIONAL_RESPONSE = {
    "type": "object",
    "properties": {
        "success": _BOOLEAN,
        "contentType": _STRING,
        "schema": _STRING
    }
}

SCHEMA_FORM = {
    "type": "object",
    "properties": {
        "href": _STRING,
        "contentType": _STRING,
        "contentCoding": _STRING,
        "subprotocol": _STRING,
        "op": _STRING_OR_STRINGS,
        "security": _STRING_OR_STRINGS,
        "scopes": _STRING_OR_STRINGS,
        "response": SCHEMA_EXPECTED_RESPONSE,
        "additionalResponses": {
            "type": "array",
            "items": SCHEMA_ADDITIONAL_RESPONSE
        }
    },
    "required": [
        "href"
    ]
}

SCHEMA_LINK = {
    "type": "object",
    "properties": {
        "href": _STRING,
        "type": _STRING,
        "rel": _STRING,
        "anchor": _STRING,
        "sizes": _STRING,
        "hreflang": _STRING_OR_STRINGS
    },
    "required": [
        "href"
    ]
}

SCHEMA_INTERACTION_AFFORDANCE = {
    "type": "object",
    "properties": {
        "@type": _STRING_OR_STRINGS,
        "title": _STRING,
        "titles": _MULTILANGUAGE,
        "description": _STRING,
        "descriptions": _MULTILANGUAGE,
        "forms": {
            "type": "array",
            "items": {"$ref": "#/definitions/form"}
        },
        "uriVariables": {
            "type": "object",
            "additionalProperties": _REF_DATA_SCHEMA
        },
        "security": _STRING_OR_STRINGS,
        "scopes": _STRING_OR_STRINGS
    }
}

SCHEMA_PROPERTY = {
    "allOf": [
        {"$ref": "#/definitions/interactionAffordance"},
        _REF_DATA_SCHEMA,
        {
            "type": "object",
            "properties": {
                "observable": _BOOLEAN
            }
        }
    ]
}

SCHEMA_ACTION = {
    "allOf": [
        {"$ref": "#/definitions/interactionAffordance"},
        {
            "type": "object",
            "properties": {
                "input": _REF_DATA_SCHEMA,
                "output": _REF_DATA_SCHEMA,
                "safe": _BOOLEAN,
                "idempotent": _BOOLEAN,
                "synchronous": _BOOLEAN
            }
        }
    ]
}

SCHEMA_EVENT = {
    "allOf": [
        {"$ref": "#/definitions/interactionAffordance"},
        {
            "type": "object",
            "properties": {
                "subscription": _REF_DATA_SCHEMA,
                "data": _REF_DATA_SCHEMA,
                "dataResponse": _REF_DATA_SCHEMA,
                "cancellation": _REF_DATA_SCHEMA
            }
        }
    ]
}

SCHEMA_VERSIONING = {
    "type": "object",
    "properties": {
        "instance": _STRING,
        "model": _STRING
    },
    "required": [
        "instance"
    ]
}

SCHEMA_CONTEXT_ENTRY = {
    "anyOf": [
        {"type": "string"},
        {"type": "object"}
    ]
}

SCHEMA_DEFINITIONS = {
    "dataSchema": SCHEMA_DATA_SCHEMA,
    "securityScheme": SCHEMA_SECURITY_SCHEME,
    "form": SCHEMA_FORM,
    "link": SCHEMA_LINK,
    "interactionAffordance": SCHEMA_INTERACTION_AFFORDANCE,
    "property": SCHEMA_PROPERTY,
    "action": SCHEMA_ACTION,
    "event": SCHEMA_EVENT,
    "versioning": SCHEMA_VERSIONING
}

SCHEMA_THING = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://wottd.example.org/schemas/thing.json",
    "definitions": SCHEMA_DEFINITIONS,
    "type": "object",
    "properties": {
        "@context": {
            "anyOf": [
                SCHEMA_CONTEXT_ENTRY,
                {"type": "array", "items": SCHEMA_CONTEXT_ENTRY}
            ]
        },
        "@type": _STRING_OR_STRINGS,
        "id": _STRING,
        "title": _STRING,
        "titles": _MULTILANGUAGE,
        "description": _STRING,
        "descriptions": _MULTILANGUAGE,
        "version": {"$ref": "#/definitions/versioning"},
        "created": _STRING,
        "modified": _STRING,
        "support": _STRING,
        "base": _STRING,
        "properties": {
            "type": "object",
            "additionalProperties": {"$ref": "#/definitions/property"}
        },
        "actions": {
            "type": "object",
            "additionalProperties": {"$ref": "#/definitions/action"}
        },
        "events": {
            "type": "object",
            "additionalProperties": {"$ref": "#/definitions/event"}
        },
        "links": {
            "type": "array",
            "items": {"$ref": "#/definitions/link"}
        },
        "forms": {
            "type": "array",
            "items": {"$ref": "#/definitions/form"}
        },
        "security": _STRING_OR_STRINGS,
        "securityDefinitions": {
            "type": "object",
            "additionalProperties": {"$ref": "#/definitions/securityScheme"}
        },
        "schemaDefinitions": {
            "type": "object",
            "additionalProperties": _REF_DATA_SCHEMA
        },
        "uriVariables": {
            "type": "object",
            "additionalProperties": _REF_DATA_SCHEMA
        },
        "profile": _STRING_OR_STRINGS
    }
}


def interaction_schema_for_type(interaction_type):
    """Returns the JSON schema that describes an
    interaction for the given interaction type."""

    type_definition_dict = {
        InteractionTypes.PROPERTY: "property",
        InteractionTypes.ACTION: "action",
        InteractionTypes.EVENT: "event"
    }

    assert interaction_type in type_definition_dict

    return {
        "$schema": SCHEMA_THING["$schema"],
        "definitions": SCHEMA_DEFINITIONS,
        "$ref": "#/definitions/{}".format(type_definition_dict[interaction_type])
    }


def is_valid_uri(val):
    """Returns True if the given value is a valid absolute URI."""

    if not isinstance(val, str):
        return False

    return False if re.fullmatch(REGEX_ABSOLUTE_URI, val) is None else True


def is_valid_uri_reference(val):
    """Returns True if the given value is a valid URI reference.
    Relative references and URI templates are accepted."""

    if not isinstance(val, str) or not val:
        return False

    if re.fullmatch(REGEX_URI_REFERENCE, val) is None:
        return False

    first_segment = re.split(r"[/?#]", val, maxsplit=1)[0]

    if ":" in first_segment:
        scheme = first_segment.split(":", 1)[0]
        return re.fullmatch(REGEX_SCHEME, scheme) is not None

    return True


def is_valid_language_tag(val):
    """Returns True if the given value is a well-formed BCP 47 language tag."""

    if not isinstance(val, str):
        return False

    if val.lower() in LANGUAGE_TAGS_GRANDFATHERED:
        return True

    return False if re.fullmatch(REGEX_LANGUAGE_TAG, val) is None else True


def is_valid_datetime(val):
    """Returns True if the given value is an ISO 8601 date-time string."""

    if not isinstance(val, str):
        return False

    match = re.fullmatch(REGEX_DATETIME, val)

    if match is None:
        return False

    date_time, fraction, offset = match.groups()

    # fromisoformat only takes 3 or 6 fractional digits before Python 3.11
    normalized = date_time[:10] + "T" + date_time[11:]
    normalized += ".{}".format((fraction + "0" * 6)[:6]) if fraction else ""
    normalized += "+00:00" if offset in ("Z", "z") else (offset or "")

    try:
        datetime.datetime.fromisoformat(normalized)
        return True
    except ValueError:
        return False


def is_valid_name(val):
    """Returns True if the given value can be used as a key
    for affordances, security schemes and schema definitions."""

    return isinstance(val, str) and len(val.strip()) > 0
