#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents a Property of a Thing.
"""

import weakref

from thingpy.enums import LinkRels
from thingpy.exceptions import PropertyError
from thingpy.metadata import PropertyMetadata
from thingpy.validation import JsonSchemaValidator


class Property(object):
    """Properties expose internal state of a Thing that can be
    directly accessed (get) and optionally manipulated (set).

    The Property keeps a non-owning reference to its Thing and
    asks it to notify subscribers every time the value changes.

    Args:
        thing (Thing): Thing that contains this Property.
        name (str): Name of the Property.
        value (Value): Container of the Property value.
        metadata: A dict or :py:class:`.PropertyMetadata` that
            describes the Property and the schema of its value.
    """

    def __init__(self, thing, name, value, metadata=None):
        self._thing_ref = weakref.ref(thing)
        self._name = name
        self._value = value
        self._href_prefix = ""
        self._href = "/properties/{}".format(name)
        self._metadata = PropertyMetadata.build(metadata)
        self._value.subscribe(self._on_value_change)

    def __str__(self):
        return "<{}> {}".format(self.__class__.__name__, self.name)

    def _on_value_change(self, _value):
        thing = self.thing

        if thing is not None:
            thing.property_notify(self)

    @property
    def thing(self):
        """Thing that contains this Property (None if it no longer exists)."""

        return self._thing_ref()

    @property
    def name(self):
        """Property name."""

        return self._name

    @property
    def metadata(self):
        """The :py:class:`.PropertyMetadata` of this Property."""

        return self._metadata

    @property
    def value(self):
        """Current value of the Property."""

        return self._value.get()

    def validate_value(self, value):
        """Raises PropertyError if the value cannot be written to this Property."""

        if self._metadata.read_only:
            raise PropertyError("Read-only property: {}".format(self.name))

        thing = self.thing
        validator = thing.validator if thing is not None else JsonSchemaValidator()

        if not validator.validate(self._metadata.schema, value):
            raise PropertyError("Invalid value for property {}: {}".format(self.name, value))

    def as_property_description(self):
        """Returns the description of this Property as a dict."""

        description = self._metadata.to_dict()
        description["links"] = self._metadata.links + [{
            "rel": LinkRels.PROPERTY,
            "href": self.get_href()
        }]

        return description

    def set_href_prefix(self, prefix):
        """Sets the prefix of any hrefs associated with this Property."""

        self._href_prefix = prefix

    def get_href(self):
        """Returns the href of this Property."""

        return self._href_prefix + self._href

    def get_value(self):
        """Returns the current value of this Property."""

        return self._value.get()

    def set_value(self, value):
        """Validates and writes a new value for this Property."""

        self.validate_value(value)
        self._value.set(value)
