#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for form dictionaries: the protocol bindings
that tell consumers where and how an interaction can be accessed.
"""

from wottd.constants import DEFAULT_CONTENT_TYPE
from wottd.dictionaries.base import WotBaseDict
from wottd.dictionaries.link import LinkDict
from wottd.utils.utils import as_list


class ExpectedResponseDict(WotBaseDict):
    """Communication metadata describing the expected response message."""

    class Meta:
        fields = {
            "contentType"
        }

        defaults = {
            "contentType": DEFAULT_CONTENT_TYPE
        }


class AdditionalResponseDict(WotBaseDict):
    """Communication metadata describing a response message other than the
    expected one (e.g. an error message). The schema term is the name of an
    entry in the schemaDefinitions map of the Thing."""

    class Meta:
        fields = {
            "success",
            "contentType",
            "schema"
        }

        defaults = {
            "success": False
        }


class FormDict(LinkDict):
    """Communication metadata indicating where a service can be accessed
    by a client application. An interaction might have more than one form."""

    class Meta:
        fields = {
            "href",
            "contentType",
            "contentCoding",
            "op",
            "subprotocol",
            "security",
            "scopes",
            "response",
            "additionalResponses"
        }

        required = {
            "href"
        }

        defaults = {
            "contentType": DEFAULT_CONTENT_TYPE
        }

    @property
    def op(self):
        """Operation types declared by this form (always a list, may be empty)."""

        return as_list(self._init.get("op"))

    @property
    def security(self):
        """Names of the security schemes that override the
        ones declared at the interaction or Thing level."""

        if "security" not in self._init:
            return None

        return as_list(self._init["security"])

    @property
    def scopes(self):
        """Authorization scope identifiers (always a list)."""

        return as_list(self._init.get("scopes"))

    @property
    def response(self):
        """The expected response message."""

        init = self._init.get("response")

        return ExpectedResponseDict(init) if init is not None else None

    @property
    def additional_responses(self):
        """List of responses other than the expected one."""

        return [AdditionalResponseDict(item) for item in self._init.get("additionalResponses", [])]

    def effective_op(self, defaults):
        """Returns the declared operations or the given defaults when none are declared."""

        return self.op or list(defaults)
