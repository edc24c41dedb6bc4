#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Exceptions raised by the Thing model.
"""


class ThingError(Exception):
    """Base Exception for all errors raised by the Thing model."""

    DEFAULT_MSG = "Thing error"

    def __init__(self, *args, **kwargs):
        if not (args or kwargs):
            args = (self.DEFAULT_MSG,)

        super(ThingError, self).__init__(*args, **kwargs)


class PropertyError(ThingError):
    """Exception raised when a Property rejects a new value."""

    DEFAULT_MSG = "Invalid property value"


class ActionNotFoundError(ThingError):
    """Exception raised when an Action is requested for an unknown action type."""

    DEFAULT_MSG = "Action type not found"


class ActionInputError(ThingError):
    """Exception raised when the input of an Action
    does not conform to the schema declared by its type."""

    DEFAULT_MSG = "Invalid action input"


class SubscriberError(ThingError):
    """Exception raised when a message cannot be delivered to a subscriber."""

    DEFAULT_MSG = "Subscriber delivery error"


class MessageError(ThingError):
    """Exception raised when a notification message has an invalid shape."""

    DEFAULT_MSG = "Invalid notification message"
