#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Exceptions raised when a Thing Description breaks one of its invariants.
Violations are collected by the validator and delivered together
inside an :class:`InvalidDescription` exception.
"""


def format_path(path):
    """Returns a JSON pointer-like string for the given tuple of keys."""

    if not path:
        return "/"

    return "".join("/{}".format(item) for item in path)


class DescriptionViolation(Exception):
    """Base class for every broken invariant found in a Thing Description.
    Instances can be compared by value and raised directly."""

    def __init__(self, message, path=None):
        self.message = message
        self.path = tuple(path) if path else tuple()
        super().__init__("{}: {}".format(format_path(self.path), message))

    def __eq__(self, other):
        return type(self) is type(other) and \
               self.message == other.message and \
               self.path == other.path

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self).__name__, self.message, self.path))

    def __repr__(self):
        return "{}({!r}, path={!r})".format(type(self).__name__, self.message, self.path)


class MalformedField(DescriptionViolation):
    """A field has the wrong shape (type, missing required key) for the TD vocabulary."""

    pass


class MalformedSchema(DescriptionViolation):
    """A data schema is inconsistent: required names missing from properties,
    const or enum values that do not agree with the type, and so on."""

    pass


class InvalidMinMax(MalformedSchema):
    """A lower bound of a data schema is greater than its upper bound or is NaN."""

    pass


class InvalidMultipleOf(MalformedSchema):
    """The multipleOf term of a numeric data schema is not strictly positive."""

    pass


class UnresolvedSecurityReference(DescriptionViolation):
    """A security scheme name is not a key of securityDefinitions."""

    def __init__(self, name, path=None):
        self.name = name
        super().__init__("Undefined security scheme: {}".format(name), path=path)


class UnresolvedSchemaReference(DescriptionViolation):
    """A schema name is not a key of schemaDefinitions."""

    def __init__(self, name, path=None):
        self.name = name
        super().__init__("Undefined schema definition: {}".format(name), path=path)


class EmptyDefaultSecurity(DescriptionViolation):
    """The document-level security term is missing or empty."""

    def __init__(self, path=("security",)):
        super().__init__("At least one default security scheme is required", path=path)


class IllegalFormOperation(DescriptionViolation):
    """A form declares an operation that is not allowed for its owner."""

    def __init__(self, op, message=None, path=None):
        self.op = op
        message = message or "Operation not allowed here: {}".format(op)
        super().__init__(message, path=path)


class InvalidUri(DescriptionViolation):
    """A URI-valued field does not contain a syntactically valid URI."""

    def __init__(self, uri, path=None):
        self.uri = uri
        super().__init__("Invalid URI: {}".format(uri), path=path)


class InvalidLanguageTag(DescriptionViolation):
    """A multilanguage key or an hreflang value is not a well-formed BCP 47 tag."""

    def __init__(self, tag, path=None):
        self.tag = tag
        super().__init__("Invalid language tag: {}".format(tag), path=path)


class DuplicateDefinitionName(DescriptionViolation):
    """A name was added twice to a mapping while the builder rejects duplicates."""

    def __init__(self, name, path=None):
        self.name = name
        super().__init__("Duplicate definition: {}".format(name), path=path)


class MalformedSecurityScheme(DescriptionViolation):
    """A security scheme misses a field that its kind requires
    or has a value outside of the allowed ones."""

    pass


class InvalidName(DescriptionViolation):
    """An affordance, security scheme or schema definition name is empty."""

    pass


class InvalidDescription(Exception):
    """Exception raised when a Thing Description document
    breaks one or more invariants.

    The ``violations`` attribute contains every violation in the order
    in which the validator found them. The ``doc`` attribute contains
    the rejected document."""

    def __init__(self, violations, doc=None):
        self.violations = list(violations)
        self.doc = doc

        lines = ["{} violation(s) found".format(len(self.violations))]
        lines.extend("{}: {}".format(type(item).__name__, item) for item in self.violations)

        super().__init__("\n".join(lines))

    @property
    def first(self):
        """The first violation found (or None)."""

        return self.violations[0] if self.violations else None
