#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Wrapper classes for the metadata dictionaries that describe
the properties, actions and events of a Thing.
"""

import copy

from thingpy.utils.utils import to_camel


class MetadataDict(object):
    """Base class for the metadata records attached to Thing interactions.
    Known fields are exposed as snake_case attributes while every
    key (known or not) is kept and serialized back unchanged."""

    class Meta:
        fields = set()
        defaults = dict()

    @classmethod
    def build(cls, *args, **kwargs):
        """Builds a new instance from a dict, returning the
        argument untouched when it is already an instance of this class."""

        if len(args) == 1 and not kwargs and isinstance(args[0], cls):
            return args[0]

        if len(args) == 1 and args[0] is None:
            args = ()

        return cls(*args, **kwargs)

    def __init__(self, *args, **kwargs):
        self._init = {}

        if len(args) > 0 and isinstance(args[0], dict):
            self._init.update(args[0])

        for key, val in kwargs.items():
            self._init.update({to_camel(key): val})

    def __getattr__(self, name):
        """Transforms the field name to camelCase and
        attemps to retrieve it from the internal dict."""

        name_camel = to_camel(name)

        if name_camel not in self.Meta.fields:
            raise AttributeError(name)

        if name_camel in self._init:
            return self._init[name_camel]

        try:
            return self.Meta.defaults.get(name_camel, None)
        except AttributeError:
            return None

    def __contains__(self, key):
        return key in self._init

    def __eq__(self, other):
        return isinstance(other, MetadataDict) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return "<{}> {}".format(self.__class__.__name__, self._init)

    def get(self, key, default=None):
        """Returns the raw value stored under the given key."""

        return self._init.get(key, default)

    def to_dict(self):
        """Returns a deep copy of the pure dict (JSON-serializable) representation of this metadata."""

        return copy.deepcopy(self._init)


class InteractionMetadata(MetadataDict):
    """Fields shared by the metadata of properties, actions and events."""

    class Meta:
        fields = {
            "title",
            "description",
            "@type",
            "links"
        }

    @property
    def links(self):
        """Links already declared in the metadata."""

        links = self._init.get("links")

        if links is None:
            return []

        if not isinstance(links, list):
            links = [links]

        return copy.deepcopy(links)


class PropertyMetadata(InteractionMetadata):
    """Metadata of a Property, which doubles as the JSON schema of its value."""

    class Meta:
        fields = InteractionMetadata.Meta.fields.union({
            "type",
            "unit",
            "enum",
            "minimum",
            "maximum",
            "multipleOf",
            "readOnly"
        })

        defaults = {
            "readOnly": False
        }

    @property
    def schema(self):
        """The JSON schema that values of the Property must conform to."""

        ret = self.to_dict()
        ret.pop("links", None)

        return ret


class ActionMetadata(InteractionMetadata):
    """Metadata of an Action type."""

    class Meta:
        fields = InteractionMetadata.Meta.fields.union({
            "input",
            "output"
        })

    @property
    def input(self):
        """The JSON schema declared for the input of the action (None if undeclared)."""

        return self._init.get("input")


class EventMetadata(InteractionMetadata):
    """Metadata of an Event type."""

    class Meta:
        fields = InteractionMetadata.Meta.fields.union({
            "type",
            "unit"
        })
