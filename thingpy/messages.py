#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Classes that represent the notification messages pushed to Thing subscribers.
"""

import json

from jsonschema import validate, ValidationError

from thingpy.enums import MessageTypes
from thingpy.exceptions import MessageError
from thingpy.schemas import \
    SCHEMA_PROPERTY_STATUS, \
    SCHEMA_ACTION_STATUS, \
    SCHEMA_EVENT


class NotificationMessage(object):
    """Base class for the messages delivered to subscribers.
    Subclasses define the message type and the schema of the message."""

    message_type = None
    schema = None

    def __init__(self, data):
        self.data = data

        try:
            validate(self.to_dict(), self.schema)
        except ValidationError as ex:
            raise MessageError(str(ex))

    def to_dict(self):
        """Returns this message as a dict."""

        return {
            "messageType": self.message_type,
            "data": self.data
        }

    def to_json(self):
        """Returns this message as a JSON string."""

        return json.dumps(self.to_dict())


class PropertyStatusMessage(NotificationMessage):
    """Message that announces the current value of a Property."""

    message_type = MessageTypes.PROPERTY_STATUS
    schema = SCHEMA_PROPERTY_STATUS

    @classmethod
    def from_property(cls, prop):
        """Builds a new message from a Property instance."""

        return cls(data={prop.name: prop.get_value()})


class ActionStatusMessage(NotificationMessage):
    """Message that announces the current status of an Action instance."""

    message_type = MessageTypes.ACTION_STATUS
    schema = SCHEMA_ACTION_STATUS

    @classmethod
    def from_action(cls, action):
        """Builds a new message from an Action instance."""

        return cls(data=action.as_action_description())


class EventMessage(NotificationMessage):
    """Message that announces an emitted Event."""

    message_type = MessageTypes.EVENT
    schema = SCHEMA_EVENT

    @classmethod
    def from_event(cls, event):
        """Builds a new message from an Event instance."""

        return cls(data=event.as_event_description())
