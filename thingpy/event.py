#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents an Event emitted by a Thing.
"""

import weakref

from thingpy.utils.utils import timestamp


class Event(object):
    """An occurrence emitted by a Thing.

    Args:
        thing (Thing): Thing that emitted the event.
        name (str): Name of the event type.
        data: Optional payload of the event.
    """

    def __init__(self, thing, name, data=None):
        self._thing_ref = weakref.ref(thing)
        self._name = name
        self._data = data
        self._time = timestamp()

    def __str__(self):
        return "<{}> {} {}".format(self.__class__.__name__, self.name, self.data)

    @property
    def thing(self):
        """Thing that emitted this event (None if it no longer exists)."""

        return self._thing_ref()

    @property
    def name(self):
        return self._name

    @property
    def data(self):
        return self._data

    @property
    def time(self):
        """Timestamp of the moment the event was emitted."""

        return self._time

    def as_event_description(self):
        """Returns the description of this event as a dict."""

        description = {
            self._name: {
                "timestamp": self._time
            }
        }

        if self._data is not None:
            description[self._name]["data"] = self._data

        return description
