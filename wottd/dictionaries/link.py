#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for link dictionaries.
"""

from urllib.parse import urljoin, urlparse

from wottd.dictionaries.base import WotBaseDict
from wottd.utils.utils import as_list


class LinkDict(WotBaseDict):
    """A Web link, as specified by IETF RFC 8288."""

    class Meta:
        fields = {
            "href",
            "type",
            "rel",
            "anchor",
            "sizes",
            "hreflang"
        }

        required = {
            "href"
        }

    @property
    def hreflang(self):
        """Language tags of the linked resource (always a list)."""

        return as_list(self._init.get("hreflang"))

    def resolve_uri(self, base=None):
        """Resolves and returns the Link URI.
        When the href does not contain a full URL the base URI is joined with said href."""

        href_parsed = urlparse(self.href)

        if base and not href_parsed.scheme:
            return urljoin(base, self.href)

        if href_parsed.scheme:
            return self.href

        return None
