#!/usr/bin/env python
# -*- coding: utf-8 -*-

import json

from thingpy.action import Action
from thingpy.subscriber import Subscriber


class RecordingSubscriber(Subscriber):
    """Subscriber that keeps every message it receives."""

    def __init__(self, id_=None):
        super(RecordingSubscriber, self).__init__(id_=id_)
        self.messages = []

    def send(self, message):
        self.messages.append(message)

    @property
    def decoded(self):
        """Received messages decoded from JSON."""

        return [json.loads(item) for item in self.messages]

    def message_types(self):
        """Returns the list of message types received so far."""

        return [item["messageType"] for item in self.decoded]


class FadeAction(Action):
    """Action used in tests that records whether it has been cancelled."""

    name = "fade"

    def __init__(self, thing, input_):
        super(FadeAction, self).__init__(thing, input_=input_)
        self.performed = False
        self.cancelled = False

    def perform_action(self):
        self.performed = True

    def cancel_action(self):
        self.cancelled = True


class RebootAction(Action):
    """Action without input used in tests."""

    name = "reboot"


class FailingAction(Action):
    """Action that always fails when performed."""

    name = "fail"

    def perform_action(self):
        raise RuntimeError("Action failed")


FADE_METADATA = {
    "title": "Fade",
    "description": "Fade the lamp to a given level",
    "@type": "FadeAction",
    "input": {
        "type": "object",
        "required": ["brightness", "duration"],
        "properties": {
            "brightness": {
                "type": "integer",
                "minimum": 0,
                "maximum": 100
            },
            "duration": {
                "type": "integer",
                "minimum": 1
            }
        }
    }
}

OVERHEATED_METADATA = {
    "description": "The lamp has exceeded its safe operating temperature",
    "type": "number",
    "unit": "degree celsius"
}
