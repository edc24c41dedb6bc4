#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
A dimmable lamp that serves as an example of how to expose
a Thing with a minimal Tornado application.
"""

import json
import logging
import random

from tornado.ioloop import IOLoop, PeriodicCallback
from tornado.web import Application, RequestHandler
from tornado.websocket import WebSocketHandler

from thingpy.action import Action
from thingpy.event import Event
from thingpy.exceptions import ActionNotFoundError, ActionInputError
from thingpy.property import Property
from thingpy.subscriber import WebsocketSubscriber
from thingpy.thing import Thing
from thingpy.value import Value

HTTP_PORT = 8888
PERIODIC_MS = 5000
OVERHEAT_THRESHOLD = 80

logging.basicConfig()
LOGGER = logging.getLogger("lamp-server")
LOGGER.setLevel(logging.INFO)


class FadeAction(Action):
    """Sets the brightness of the lamp."""

    name = "fade"

    def perform_action(self):
        self.thing.set_property("brightness", self.input["brightness"])


def build_lamp():
    """Builds the lamp Thing."""

    thing = Thing(
        id_="urn:dev:ops:my-lamp-1234",
        title="My Lamp",
        type_=["OnOffSwitch", "Light"],
        description="A web connected lamp")

    thing.add_property(Property(thing, "on", Value(True), metadata={
        "@type": "OnOffProperty",
        "title": "On/Off",
        "type": "boolean"
    }))

    thing.add_property(Property(thing, "brightness", Value(50), metadata={
        "@type": "BrightnessProperty",
        "title": "Brightness",
        "type": "integer",
        "minimum": 0,
        "maximum": 100,
        "unit": "percent"
    }))

    thing.add_available_action("fade", {
        "title": "Fade",
        "input": {
            "type": "object",
            "required": ["brightness"],
            "properties": {
                "brightness": {"type": "integer", "minimum": 0, "maximum": 100}
            }
        }
    }, FadeAction)

    thing.add_available_event("overheated", {
        "type": "number",
        "unit": "degree celsius"
    })

    return thing


class ThingHandler(RequestHandler):
    """Serves the Thing Description."""

    def initialize(self, thing):
        self.thing = thing

    def get(self):
        self.write(self.thing.as_thing_description())


class ActionHandler(RequestHandler):
    """Requests and starts a new action instance."""

    def initialize(self, thing):
        self.thing = thing

    def post(self, name):
        try:
            action = self.thing.request_action(name, json.loads(self.request.body or "null"))
        except ActionNotFoundError:
            self.send_error(404)
            return
        except ActionInputError:
            self.send_error(400)
            return

        action.start()
        self.set_status(201)
        self.write(action.as_action_description())


class ThingWebsocketHandler(WebSocketHandler):
    """Pushes notifications to the connected clients.
    Clients subscribe to events with: {"messageType": "addEventSubscription", "data": {"<name>": {}}}"""

    def initialize(self, thing):
        self.thing = thing
        self.subscriber = WebsocketSubscriber(self)

    def open(self):
        self.thing.add_subscriber(self.subscriber)

    def on_message(self, message):
        msg = json.loads(message)

        if msg.get("messageType") == "addEventSubscription":
            for name in msg.get("data", {}):
                self.thing.add_event_subscriber(name, self.subscriber)

    def on_close(self):
        self.thing.remove_subscriber(self.subscriber)


def main():
    lamp = build_lamp()

    def check_temperature():
        temperature = random.randint(20, 100)

        if temperature > OVERHEAT_THRESHOLD:
            LOGGER.info("Overheated: {}".format(temperature))
            lamp.add_event(Event(lamp, "overheated", temperature))

    app = Application([
        (r"/", ThingHandler, {"thing": lamp}),
        (r"/actions/([^/]+)", ActionHandler, {"thing": lamp}),
        (r"/ws", ThingWebsocketHandler, {"thing": lamp})
    ])

    app.listen(HTTP_PORT)
    PeriodicCallback(check_temperature, PERIODIC_MS).start()

    LOGGER.info("Thing Description: http://localhost:{}/".format(HTTP_PORT))

    IOLoop.current().start()


if __name__ == "__main__":
    main()
