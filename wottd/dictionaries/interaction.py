#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for the dictionaries of the three types of interaction affordances.
"""

from wottd.dictionaries.base import WotBaseDict
from wottd.dictionaries.form import FormDict
from wottd.dictionaries.schema import (
    ArraySchemaDict,
    DataSchemaDict,
    ObjectSchemaDict,
    StringSchemaDict,
    NumberSchemaDict
)
from wottd.enums import InteractionTypes, Operation, operations_for_type
from wottd.utils.utils import as_list

DATA_SCHEMA_FIELDS = DataSchemaDict.Meta.fields.union(
    NumberSchemaDict.Meta.fields,
    StringSchemaDict.Meta.fields,
    ObjectSchemaDict.Meta.fields,
    ArraySchemaDict.Meta.fields)


def _build_schema(init):
    return DataSchemaDict.build(init) if init is not None else None


class InteractionAffordanceDict(WotBaseDict):
    """Base class for the three types of Interaction patterns
    (Properties, Actions and Events)."""

    class Meta:
        fields = {
            "@type",
            "title",
            "titles",
            "description",
            "descriptions",
            "forms",
            "uriVariables",
            "security",
            "scopes"
        }

    interaction_type = None

    schema_fields = tuple()
    """Members that contain a nested data schema."""

    @property
    def forms(self):
        """Indicates one or more endpoints from which
        an interaction pattern is accessible."""

        return [FormDict(item) for item in self._init.get("forms", [])]

    @property
    def uri_variables(self):
        """Define URI template variables as collection based on DataSchema declarations."""

        if "uriVariables" not in self._init:
            return None

        return {
            key: DataSchemaDict.build(val)
            for key, val in self._init["uriVariables"].items()
        }

    @property
    def security(self):
        """Names of the security schemes that override, for this
        interaction, the ones declared at the Thing level."""

        if "security" not in self._init:
            return None

        return as_list(self._init["security"])

    @property
    def allowed_ops(self):
        """Operations that forms of this interaction may declare."""

        return operations_for_type(self.interaction_type)

    @property
    def default_ops(self):
        """Operations assumed for the forms that do not declare the op term."""

        raise NotImplementedError()

    def add_form(self, form):
        """Appends a form (FormDict or dict) to this interaction."""

        form = form.to_dict() if hasattr(form, "to_dict") else dict(form)
        self._init.setdefault("forms", []).append(form)

    def schemas(self):
        """Returns a list of (path, data schema) tuples for the data schemas
        declared directly by this interaction. Paths are relative to the interaction."""

        ret = [
            ((name,), DataSchemaDict.build(self._init[name]))
            for name in self.schema_fields
            if isinstance(self._init.get(name), dict)
        ]

        for key, val in (self.uri_variables or {}).items():
            ret.append((("uriVariables", key), val))

        return ret


class PropertyAffordanceDict(InteractionAffordanceDict):
    """A dictionary wrapper class that contains data to initialize a Property.
    A Property is itself a data schema."""

    class Meta:
        fields = InteractionAffordanceDict.Meta.fields.union(DATA_SCHEMA_FIELDS).union({
            "observable"
        })

        defaults = {
            "observable": False,
            "readOnly": False,
            "writeOnly": False
        }

    interaction_type = InteractionTypes.PROPERTY

    def __getattr__(self, name):
        """Search for members that raised an AttributeError in
        the internal data schema before propagating the exception."""

        try:
            return super().__getattr__(name)
        except AttributeError:
            if name.startswith("_"):
                raise
            return getattr(self.data_schema, name)

    @property
    def data_schema(self):
        """The DataSchema that represents the schema of this property."""

        schema_init = {
            key: val for key, val in self._init.items()
            if key in DATA_SCHEMA_FIELDS or key not in self.Meta.fields
        }

        return DataSchemaDict.build(schema_init)

    @property
    def writable(self):
        """Returns True if this Property is writable."""

        return not self.read_only

    @property
    def default_ops(self):
        if self.read_only and not self.write_only:
            return [Operation.READ_PROPERTY]

        if self.write_only and not self.read_only:
            return [Operation.WRITE_PROPERTY]

        return [Operation.READ_PROPERTY, Operation.WRITE_PROPERTY]

    def schemas(self):
        return [(tuple(), self.data_schema)] + super().schemas()


class ActionAffordanceDict(InteractionAffordanceDict):
    """A dictionary wrapper class that contains data to initialize an Action."""

    class Meta:
        fields = InteractionAffordanceDict.Meta.fields.union({
            "input",
            "output",
            "safe",
            "idempotent",
            "synchronous"
        })

        defaults = {
            "safe": False,
            "idempotent": False
        }

    interaction_type = InteractionTypes.ACTION

    schema_fields = ("input", "output")

    @property
    def input(self):
        """Used to define the input data schema of the action."""

        return _build_schema(self._init.get("input"))

    @property
    def output(self):
        """Used to define the output data schema of the action."""

        return _build_schema(self._init.get("output"))

    @property
    def default_ops(self):
        return [Operation.INVOKE_ACTION]


class EventAffordanceDict(InteractionAffordanceDict):
    """A dictionary wrapper class that contains data to initialize an Event."""

    class Meta:
        fields = InteractionAffordanceDict.Meta.fields.union({
            "subscription",
            "data",
            "dataResponse",
            "cancellation"
        })

    interaction_type = InteractionTypes.EVENT

    schema_fields = ("subscription", "data", "dataResponse", "cancellation")

    @property
    def subscription(self):
        """Defines data that needs to be passed upon subscription,
        e.g., filters or message format for setting up Webhooks."""

        return _build_schema(self._init.get("subscription"))

    @property
    def data(self):
        """Defines the data schema of the Event instance messages pushed by the Thing."""

        return _build_schema(self._init.get("data"))

    @property
    def data_response(self):
        """Defines the data schema of the response the consumer sends back to the Thing."""

        return _build_schema(self._init.get("dataResponse"))

    @property
    def cancellation(self):
        """Defines any data that needs to be passed to cancel a subscription,
        e.g., a specific message to remove a Webhook."""

        return _build_schema(self._init.get("cancellation"))

    @property
    def default_ops(self):
        return [Operation.SUBSCRIBE_EVENT, Operation.UNSUBSCRIBE_EVENT]


def interaction_class_for_type(interaction_type):
    """Returns the dictionary class for the given interaction type."""

    type_klass_dict = {
        InteractionTypes.PROPERTY: PropertyAffordanceDict,
        InteractionTypes.ACTION: ActionAffordanceDict,
        InteractionTypes.EVENT: EventAffordanceDict
    }

    assert interaction_type in type_klass_dict

    return type_klass_dict[interaction_type]
