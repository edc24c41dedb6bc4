#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Classes that contain various enumerations.
"""

from thingpy.utils.enums import EnumListMixin


class MessageTypes(EnumListMixin):
    """Enumeration of the notification message types pushed to subscribers."""

    PROPERTY_STATUS = "propertyStatus"
    ACTION_STATUS = "actionStatus"
    EVENT = "event"


class LinkRels(EnumListMixin):
    """Enumeration of the link relations used in Thing Descriptions."""

    PROPERTIES = "properties"
    ACTIONS = "actions"
    EVENTS = "events"
    PROPERTY = "property"
    ACTION = "action"
    EVENT = "event"
    ALTERNATE = "alternate"


class ActionStatus(EnumListMixin):
    """Enumeration of the states in the lifecycle of an Action instance."""

    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ERROR = "error"


class MediaTypes(EnumListMixin):
    """Enumeration of media types."""

    JSON = "application/json"
    HTML = "text/html"
