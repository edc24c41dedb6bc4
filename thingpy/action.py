#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that represents an Action instance requested on a Thing.
"""

import logging
import uuid
import weakref

from thingpy.enums import ActionStatus
from thingpy.utils.utils import timestamp


class Action(object):
    """An Action instance: one invocation of an action type with its own lifecycle.
    Subclasses set the ``name`` class attribute and implement :py:meth:`perform_action`.

    The constructor signature ``(thing, input_)`` is the factory
    contract expected by :py:meth:`.Thing.add_available_action`.

    Args:
        thing (Thing): Thing that the action is performed on.
        input_: Input of the action (already validated by the Thing).
        id_ (str): Identifier of this instance. A random hex UUID by default.
        name (str): Name of the action type. Defaults to the ``name`` class attribute.
    """

    name = None

    def __init__(self, thing, input_=None, id_=None, name=None):
        self._thing_ref = weakref.ref(thing)
        self._id = id_ if id_ is not None else uuid.uuid4().hex
        self.name = name if name is not None else self.name
        self._input = input_
        self._href_prefix = ""
        self._href = "/actions/{}/{}".format(self.name, self._id)
        self._status = ActionStatus.CREATED
        self._time_requested = timestamp()
        self._time_completed = None
        self._logr = logging.getLogger(__name__)

    def __str__(self):
        return "<{}> {} {}".format(self.__class__.__name__, self.name, self.id)

    @property
    def thing(self):
        """Thing that this action belongs to (None if it no longer exists)."""

        return self._thing_ref()

    @property
    def id(self):
        """Identifier of this action instance."""

        return self._id

    @property
    def input(self):
        """Input of this action instance."""

        return self._input

    @property
    def status(self):
        """Current status, one of :py:class:`.ActionStatus`."""

        return self._status

    @property
    def time_requested(self):
        return self._time_requested

    @property
    def time_completed(self):
        return self._time_completed

    def _notify(self):
        thing = self.thing

        if thing is not None:
            thing.action_notify(self)

    def as_action_description(self):
        """Returns the description of this action instance as a dict."""

        description = {
            self.name: {
                "href": self.get_href(),
                "timeRequested": self._time_requested,
                "status": self._status
            }
        }

        if self._input is not None:
            description[self.name]["input"] = self._input

        if self._time_completed is not None:
            description[self.name]["timeCompleted"] = self._time_completed

        return description

    def set_href_prefix(self, prefix):
        """Sets the prefix of any hrefs associated with this action."""

        self._href_prefix = prefix

    def get_href(self):
        """Returns the href of this action instance."""

        return self._href_prefix + self._href

    def start(self):
        """Runs the action synchronously, notifying subscribers
        when it becomes pending and when it finishes.
        Errors raised by :py:meth:`perform_action` move
        the action to the error status and are propagated."""

        self._status = ActionStatus.PENDING
        self._notify()

        try:
            self.perform_action()
        except Exception:
            self._logr.warning("Error performing action: {}".format(self), exc_info=True)
            self._status = ActionStatus.ERROR
            self._time_completed = timestamp()
            self._notify()
            raise

        self.finish()

    def perform_action(self):
        """Does the actual work of the action.
        Meant to be overridden by subclasses."""

        pass

    def cancel(self):
        """Cancels this action instance."""

        self.cancel_action()
        self._status = ActionStatus.CANCELLED

    def cancel_action(self):
        """Hook to undo or stop any side effects of the action.
        Meant to be overridden by subclasses."""

        pass

    def finish(self):
        """Marks the action as completed and notifies subscribers."""

        self._status = ActionStatus.COMPLETED
        self._time_completed = timestamp()
        self._notify()
