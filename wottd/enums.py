#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Classes that contain various enumerations.
"""

from wottd.utils.enums import EnumListMixin


class DataType(EnumListMixin):
    """Defines the types that values can take."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


class SecuritySchemeType(EnumListMixin):
    """Defines the supported security schemes."""

    NOSEC = "nosec"
    AUTO = "auto"
    COMBO = "combo"
    BASIC = "basic"
    DIGEST = "digest"
    BEARER = "bearer"
    PSK = "psk"
    OAUTH2 = "oauth2"
    APIKEY = "apikey"


class SecurityLocation(EnumListMixin):
    """Locations where security credentials may be placed (the in term)."""

    HEADER = "header"
    QUERY = "query"
    BODY = "body"
    COOKIE = "cookie"
    URI = "uri"
    AUTO = "auto"


class OAuth2Flow(EnumListMixin):
    """Authorization flows of the oauth2 security scheme."""

    CODE = "code"
    CLIENT = "client"
    DEVICE = "device"


class InteractionTypes(EnumListMixin):
    """Enumeration of interaction types."""

    PROPERTY = "Property"
    ACTION = "Action"
    EVENT = "Event"


class Operation(EnumListMixin):
    """Operation types that forms may declare in the op term."""

    READ_PROPERTY = "readproperty"
    WRITE_PROPERTY = "writeproperty"
    OBSERVE_PROPERTY = "observeproperty"
    UNOBSERVE_PROPERTY = "unobserveproperty"
    INVOKE_ACTION = "invokeaction"
    QUERY_ACTION = "queryaction"
    CANCEL_ACTION = "cancelaction"
    SUBSCRIBE_EVENT = "subscribeevent"
    UNSUBSCRIBE_EVENT = "unsubscribeevent"
    READ_ALL_PROPERTIES = "readallproperties"
    WRITE_ALL_PROPERTIES = "writeallproperties"
    READ_MULTIPLE_PROPERTIES = "readmultipleproperties"
    WRITE_MULTIPLE_PROPERTIES = "writemultipleproperties"


OPERATIONS_PROPERTY = frozenset([
    Operation.READ_PROPERTY,
    Operation.WRITE_PROPERTY,
    Operation.OBSERVE_PROPERTY,
    Operation.UNOBSERVE_PROPERTY
])

OPERATIONS_ACTION = frozenset([
    Operation.INVOKE_ACTION,
    Operation.QUERY_ACTION,
    Operation.CANCEL_ACTION
])

OPERATIONS_EVENT = frozenset([
    Operation.SUBSCRIBE_EVENT,
    Operation.UNSUBSCRIBE_EVENT
])

OPERATIONS_THING = frozenset([
    Operation.READ_ALL_PROPERTIES,
    Operation.WRITE_ALL_PROPERTIES,
    Operation.READ_MULTIPLE_PROPERTIES,
    Operation.WRITE_MULTIPLE_PROPERTIES
])


def operations_for_type(interaction_type=None):
    """Returns the set of operations that a form may declare when it is attached
    to an interaction of the given type (or to the Thing when the type is None)."""

    type_ops_dict = {
        InteractionTypes.PROPERTY: OPERATIONS_PROPERTY,
        InteractionTypes.ACTION: OPERATIONS_ACTION,
        InteractionTypes.EVENT: OPERATIONS_EVENT,
        None: OPERATIONS_THING
    }

    assert interaction_type in type_ops_dict

    return type_ops_dict[interaction_type]


class DuplicatePolicy(EnumListMixin):
    """How the builder treats a key that is added twice to a mapping."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


class MediaTypes(EnumListMixin):
    """Media types of serialized Thing Description documents."""

    JSON = "application/json"
    TD_JSON = "application/td+json"
    JSON_LD = "application/ld+json"
