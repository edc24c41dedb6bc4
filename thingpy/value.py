#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents an observable value stored by a Property.
"""

from rx.subject import Subject


class Value(object):
    """A container for a single value that emits the new
    value on an Observable stream every time it changes.

    Args:
        initial_value: Value stored when the container is created.
        value_forwarder: Optional callable that receives every value
            written through :py:meth:`set` (e.g. to push it to the device).
    """

    def __init__(self, initial_value, value_forwarder=None):
        self._last_value = initial_value
        self._value_forwarder = value_forwarder
        self._updates = Subject()

    def set(self, value):
        """Writes a new value, forwarding it to the underlying device if possible."""

        if self._value_forwarder is not None:
            self._value_forwarder(value)

        self.notify_of_external_update(value)

    def get(self):
        """Returns the last known value."""

        return self._last_value

    def notify_of_external_update(self, value):
        """Stores a value that changed outside of this container
        and emits it when it differs from the previous one."""

        if value != self._last_value:
            self._last_value = value
            self._updates.on_next(value)

    def subscribe(self, on_next):
        """Subscribes to value changes.
        Returns a disposable to cancel the subscription."""

        return self._updates.subscribe(on_next=on_next)
