#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for security scheme dictionaries.
Schemes are declared once in the securityDefinitions map of a Thing
and referenced by name from everywhere else.
"""

from wottd.dictionaries.base import WotBaseDict
from wottd.enums import SecuritySchemeType
from wottd.utils.utils import merge_args_kwargs_dict, to_camel


class SecuritySchemeDict(WotBaseDict):
    """Contains security related configuration."""

    class Meta:
        fields = {
            "@type",
            "scheme",
            "description",
            "descriptions",
            "proxy"
        }

        required = {
            "scheme"
        }

    scheme_type = None

    uri_fields = ("proxy",)
    """Members that must contain a URI."""

    def __init__(self, *args, **kwargs):
        if self.scheme_type:
            args = (merge_args_kwargs_dict(args, {}),)
            args[0].setdefault("scheme", self.scheme_type)

        super().__init__(*args, **kwargs)

    @classmethod
    def build(cls, *args, **kwargs):
        """Builds an instance of the appropriate subclass for the given scheme.
        Unknown extension schemes are wrapped by the base class."""

        kwargs = {to_camel(key): val for key, val in kwargs.items()}
        init_dict = merge_args_kwargs_dict(args, kwargs)

        scheme_type = init_dict.get("scheme")

        if scheme_type is None:
            raise ValueError("Missing required field: scheme")

        klass = next((
            item for item in SecuritySchemeDict.__subclasses__()
            if item.scheme_type == scheme_type
        ), SecuritySchemeDict)

        return klass(init_dict)

    @property
    def scheme(self):
        """Identification of the security mechanism (one of the
        SecuritySchemeType values or a prefixed extension term)."""

        return self._init.get("scheme", self.scheme_type)

    @property
    def location(self):
        """Location of the security authentication information (the in term)."""

        return self._init.get("in", getattr(self.Meta, "defaults", {}).get("in"))

    @property
    def referenced_names(self):
        """Names of other security schemes referenced by this one."""

        return []


class NoSecuritySchemeDict(SecuritySchemeDict):
    """A security configuration indicating there is no authentication
    or other mechanism required to access the resource."""

    scheme_type = SecuritySchemeType.NOSEC


class AutoSecuritySchemeDict(SecuritySchemeDict):
    """A security scheme that lets the consumer negotiate the
    actual mechanism with the protocol in use."""

    scheme_type = SecuritySchemeType.AUTO


class ComboSecuritySchemeDict(SecuritySchemeDict):
    """A combination of other security schemes, identified by name.
    Exactly one of oneOf or allOf must be given."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "oneOf",
            "allOf"
        })

        required = SecuritySchemeDict.Meta.required

    scheme_type = SecuritySchemeType.COMBO

    @property
    def referenced_names(self):
        """Names of the combined security schemes."""

        return list(self._init.get("oneOf", [])) + list(self._init.get("allOf", []))


class BasicSecuritySchemeDict(SecuritySchemeDict):
    """Basic authentication security configuration using an unencrypted username and password."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "in",
            "name"
        })

        required = SecuritySchemeDict.Meta.required

        defaults = {
            "in": "header"
        }

    scheme_type = SecuritySchemeType.BASIC


class DigestSecuritySchemeDict(SecuritySchemeDict):
    """Digest authentication security configuration. This scheme is similar to
    basic authentication but with added features to avoid man-in-the-middle attacks."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "qop",
            "in",
            "name"
        })

        required = SecuritySchemeDict.Meta.required

        defaults = {
            "qop": "auth",
            "in": "header"
        }

    scheme_type = SecuritySchemeType.DIGEST


class BearerSecuritySchemeDict(SecuritySchemeDict):
    """Bearer token authentication security configuration. This scheme is intended
    for situations where bearer tokens are used independently of OAuth2.
    If the oauth2 scheme is specified it is not generally necessary to
    specify this scheme as well as it is implied."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "authorization",
            "alg",
            "format",
            "in",
            "name"
        })

        required = SecuritySchemeDict.Meta.required

        defaults = {
            "alg": "ES256",
            "format": "jwt",
            "in": "header"
        }

    scheme_type = SecuritySchemeType.BEARER

    uri_fields = ("proxy", "authorization")


class PSKSecuritySchemeDict(SecuritySchemeDict):
    """Pre-shared key authentication security configuration."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "identity"
        })

        required = SecuritySchemeDict.Meta.required

    scheme_type = SecuritySchemeType.PSK


class OAuth2SecuritySchemeDict(SecuritySchemeDict):
    """OAuth2 authentication security configuration.
    For the code flow both authorization and token are expected.
    For the client and device flows the token is expected."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "authorization",
            "token",
            "refresh",
            "scopes",
            "flow"
        })

        required = SecuritySchemeDict.Meta.required

    scheme_type = SecuritySchemeType.OAUTH2

    uri_fields = ("proxy", "authorization", "token", "refresh")


class APIKeySecuritySchemeDict(SecuritySchemeDict):
    """API key authentication security configuration.
    This is for the case where the access token is opaque and is not using a standard token format."""

    class Meta:
        fields = SecuritySchemeDict.Meta.fields.union({
            "in",
            "name"
        })

        required = SecuritySchemeDict.Meta.required

        defaults = {
            "in": "query"
        }

    scheme_type = SecuritySchemeType.APIKEY
