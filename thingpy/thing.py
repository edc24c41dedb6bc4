#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents a Thing: the aggregate of its properties,
actions, events and the subscribers that observe them.
"""

import logging
import os
import threading
import weakref

from thingpy.description import ThingDescriptionBuilder
from thingpy.exceptions import ActionNotFoundError, ActionInputError, MessageError
from thingpy.messages import PropertyStatusMessage, ActionStatusMessage, EventMessage
from thingpy.metadata import ActionMetadata, EventMetadata
from thingpy.validation import JsonSchemaValidator

DEFAULT_CONTEXT = "https://iot.mozilla.org/schemas"
ENV_DEFAULT_CONTEXT = "THINGPY_DEFAULT_CONTEXT"


def _subscriber_key(ws):
    """Returns the key that identifies a subscriber in the Thing subscriber sets.
    The stable subscriber ID is used when available."""

    key = getattr(ws, "id", None)

    return ("id", key) if key is not None else ("obj", id(ws))


class Thing(object):
    """A Web Thing that exposes properties, actions and events.

    Every operation runs while holding a re-entrant lock owned by
    the Thing. Notifications are delivered synchronously to each
    subscriber before the operation that caused them returns.
    Subscribers are held by weak references: their lifecycle
    is managed by whoever created them.

    Args:
        id_ (str): Unique ID of the Thing (an URI).
        title (str): Title of the Thing.
        type_: A string or list of strings with the semantic types of the Thing.
        description (str): Description of the Thing.
        validator (Validator): Validator used to check action inputs and property values.
        context (str): URI of the schema repository used in the ``@context`` field.
    """

    def __init__(self, id_, title, type_=None, description="", validator=None, context=None):
        self._id = id_
        self._title = title
        self._type = type_ if type_ is not None else []
        self._description = description
        self._context = context or os.environ.get(ENV_DEFAULT_CONTEXT, DEFAULT_CONTEXT)
        self._validator = validator if validator is not None else JsonSchemaValidator()
        self._properties = {}
        self._available_actions = {}
        self._available_events = {}
        self._actions = {}
        self._events = []
        self._subscribers = weakref.WeakValueDictionary()
        self._href_prefix = ""
        self._ui_href = None
        self._lock = threading.RLock()
        self._logr = logging.getLogger(__name__)

    def __str__(self):
        return "<{}> {}".format(self.__class__.__name__, self._id)

    @property
    def id(self):
        """ID of the Thing."""

        return self._id

    @property
    def title(self):
        return self._title

    @property
    def type(self):
        """Semantic type(s) of the Thing."""

        return self._type

    @property
    def description(self):
        return self._description

    @property
    def context(self):
        """URI of the schema repository of the Thing."""

        return self._context

    @property
    def validator(self):
        """Validator used to check values against JSON schemas."""

        return self._validator

    @property
    def href_prefix(self):
        return self._href_prefix

    @property
    def href(self):
        """Base href of the Thing."""

        return self._href_prefix or "/"

    @property
    def ui_href(self):
        """Optional href of an alternate UI for the Thing."""

        return self._ui_href

    @property
    def subscribers(self):
        """List with the current global subscribers."""

        with self._lock:
            return list(self._subscribers.values())

    def as_thing_description(self):
        """Returns the Thing Description document of the Thing as a dict."""

        with self._lock:
            return ThingDescriptionBuilder(self).build()

    def set_href_prefix(self, prefix):
        """Sets the prefix of every href of the Thing. The prefix is propagated
        to all registered properties and to every live action instance."""

        with self._lock:
            self._href_prefix = prefix

            for prop in self._properties.values():
                prop.set_href_prefix(prefix)

            for actions in self._actions.values():
                for action in actions:
                    action.set_href_prefix(prefix)

    def set_ui_href(self, href):
        """Sets the href of the alternate UI of the Thing."""

        with self._lock:
            self._ui_href = href

    def _send_all(self, subscribers, build_message):
        """Serializes the message returned by build_message and delivers it to
        each of the given subscribers. Messages that cannot be built or serialized
        are discarded. Errors in one subscriber do not interrupt the delivery to the others."""

        try:
            message = build_message().to_json()
        except (MessageError, TypeError, ValueError):
            self._logr.warning("Discarded notification that could not be serialized", exc_info=True)
            return

        for subscriber in list(subscribers):
            try:
                subscriber.send(message)
            except Exception:
                self._logr.warning(
                    "Error delivering message to subscriber: {}".format(subscriber),
                    exc_info=True)

    # Properties

    def get_property_descriptions(self):
        """Returns a dict with the description of every property keyed by name."""

        with self._lock:
            return {
                name: prop.as_property_description()
                for name, prop in self._properties.items()
            }

    def add_property(self, prop):
        """Adds a property, replacing any existing property with the same name."""

        with self._lock:
            prop.set_href_prefix(self._href_prefix)
            self._properties[prop.name] = prop
            self._logr.debug("Added property: {}".format(prop.name))

    def remove_property(self, prop):
        """Removes a property. Unknown properties are ignored."""

        with self._lock:
            self._properties.pop(prop.name, None)

    def find_property(self, property_name):
        """Returns the property with the given name (None if not found)."""

        with self._lock:
            return self._properties.get(property_name, None)

    def get_property(self, property_name):
        """Returns the value of the property with the given name (None if not found)."""

        with self._lock:
            prop = self.find_property(property_name)

            if prop is None:
                return None

            return prop.get_value()

    def get_properties(self):
        """Returns a dict with the value of every property keyed by name."""

        with self._lock:
            return {
                name: prop.get_value()
                for name, prop in self._properties.items()
            }

    def has_property(self, property_name):
        """Returns True if a property with the given name exists."""

        with self._lock:
            return property_name in self._properties

    def set_property(self, property_name, value):
        """Writes the value of a property. Unknown properties are ignored.
        Errors raised by the property itself (e.g. PropertyError) are propagated."""

        with self._lock:
            prop = self.find_property(property_name)

            if prop is None:
                return

            prop.set_value(value)

    def property_notify(self, prop):
        """Notifies all the global subscribers of the current value of a property."""

        with self._lock:
            self._send_all(
                self._subscribers.values(),
                lambda: PropertyStatusMessage.from_property(prop))

    # Actions

    def get_available_actions(self):
        """Returns a dict with the metadata of every action type keyed by name."""

        with self._lock:
            return {
                name: action_type["metadata"]
                for name, action_type in self._available_actions.items()
            }

    def add_available_action(self, name, metadata, cls):
        """Registers an action type.

        Args:
            name (str): Name of the action type.
            metadata: A dict or :py:class:`.ActionMetadata` that describes the action type.
            cls: Factory called with ``(thing, input_)`` to build new action instances.
        """

        with self._lock:
            self._available_actions[name] = {
                "metadata": ActionMetadata.build(metadata),
                "class": cls
            }

            self._actions[name] = []
            self._logr.debug("Added available action: {}".format(name))

    def request_action(self, action_name, input_=None):
        """Creates a new action instance.
        Raises ActionNotFoundError if the action type is unknown and
        ActionInputError if the input does not match the declared schema."""

        with self._lock:
            action_type = self._available_actions.get(action_name, None)

            if action_type is None:
                raise ActionNotFoundError("Unknown action: {}".format(action_name))

            input_schema = action_type["metadata"].input

            if input_schema is not None:
                reason = self._validator.error_message(input_schema, input_)

                if reason is not None:
                    raise ActionInputError("Invalid input for action {}: {}".format(action_name, reason))

            action = action_type["class"](self, input_)
            action.set_href_prefix(self._href_prefix)
            self.action_notify(action)
            self._actions[action_name].append(action)

            return action

    def perform_action(self, action_name, input_=None):
        """Creates a new action instance.
        Returns None if the action type is unknown or the input is invalid."""

        try:
            return self.request_action(action_name, input_=input_)
        except (ActionNotFoundError, ActionInputError) as ex:
            self._logr.debug("Rejected action request: {}".format(ex))
            return None

    def get_action(self, action_name, action_id):
        """Returns the action instance with the given type name
        and ID (None if not found)."""

        with self._lock:
            for action in self._actions.get(action_name, []):
                if action.id == action_id:
                    return action

            return None

    def remove_action(self, action_name, action_id):
        """Cancels and removes an action instance.
        Returns True if the action was found and removed.
        The action is removed even when its cancellation fails."""

        with self._lock:
            action = self.get_action(action_name, action_id)

            if action is None:
                return False

            try:
                action.cancel()
            except Exception:
                self._logr.warning("Error cancelling action: {}".format(action), exc_info=True)

            actions = self._actions[action_name]
            idx = next((idx for idx, item in enumerate(actions) if item is action), None)

            if idx is None:
                return False

            actions.pop(idx)

            return True

    def get_action_descriptions(self, action_name=None):
        """Returns a list with the descriptions of the action instances.
        All action types are included if action_name is empty."""

        with self._lock:
            if not action_name:
                return [
                    action.as_action_description()
                    for actions in self._actions.values()
                    for action in actions
                ]

            return [
                action.as_action_description()
                for action in self._actions.get(action_name, [])
            ]

    def action_notify(self, action):
        """Notifies all the global subscribers of the current status of an action."""

        with self._lock:
            self._send_all(
                self._subscribers.values(),
                lambda: ActionStatusMessage.from_action(action))

    # Events

    def get_available_events(self):
        """Returns a dict with the metadata of every event type keyed by name."""

        with self._lock:
            return {
                name: event_type["metadata"]
                for name, event_type in self._available_events.items()
            }

    def add_available_event(self, name, metadata):
        """Registers an event type. Existing subscribers
        of an event type with the same name are dropped."""

        with self._lock:
            self._available_events[name] = {
                "metadata": EventMetadata.build(metadata),
                "subscribers": weakref.WeakValueDictionary()
            }

            self._logr.debug("Added available event: {}".format(name))

    def add_event(self, event):
        """Appends an event to the log and notifies the subscribers of its type."""

        with self._lock:
            self._events.append(event)
            self.event_notify(event)

    def get_event_descriptions(self, event_name=None):
        """Returns a list with the descriptions of the emitted events.
        All events are included if event_name is empty."""

        with self._lock:
            return [
                event.as_event_description()
                for event in self._events
                if not event_name or event.name == event_name
            ]

    def event_notify(self, event):
        """Notifies the subscribers of the type of the given event.
        Events of unknown types are not delivered to anyone."""

        with self._lock:
            event_type = self._available_events.get(event.name, None)

            if event_type is None:
                return

            self._send_all(
                event_type["subscribers"].values(),
                lambda: EventMessage.from_event(event))

    # Subscribers

    def add_subscriber(self, ws):
        """Adds a global subscriber."""

        with self._lock:
            self._subscribers[_subscriber_key(ws)] = ws

    def remove_subscriber(self, ws):
        """Removes a global subscriber and all its event subscriptions."""

        with self._lock:
            self._subscribers.pop(_subscriber_key(ws), None)

            for name in self._available_events:
                self.remove_event_subscriber(name, ws)

    def add_event_subscriber(self, name, ws):
        """Subscribes to the events of the given type.
        Unknown event types are ignored."""

        with self._lock:
            event_type = self._available_events.get(name, None)

            if event_type is None:
                return

            event_type["subscribers"][_subscriber_key(ws)] = ws

    def remove_event_subscriber(self, name, ws):
        """Unsubscribes from the events of the given type."""

        with self._lock:
            event_type = self._available_events.get(name, None)

            if event_type is None:
                return

            event_type["subscribers"].pop(_subscriber_key(ws), None)

    def get_event_subscribers(self, name):
        """Returns a list with the subscribers of the given event type."""

        with self._lock:
            event_type = self._available_events.get(name, None)

            if event_type is None:
                return []

            return list(event_type["subscribers"].values())
