#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Classes that represent the targets of the notifications pushed by a Thing.
"""

import uuid

from tornado.websocket import WebSocketClosedError

from thingpy.exceptions import SubscriberError


class Subscriber(object):
    """Base subscriber class.
    A subscriber is identified by a stable ID and is able to receive serialized messages."""

    def __init__(self, id_=None):
        self._id = id_ if id_ is not None else uuid.uuid4().hex

    def __str__(self):
        return "<{}> {}".format(self.__class__.__name__, self.id)

    @property
    def id(self):
        """Stable identifier of this subscriber."""

        return self._id

    def send(self, message):
        """Delivers a serialized message to this subscriber."""

        raise NotImplementedError()


class WebsocketSubscriber(Subscriber):
    """Subscriber that writes messages to a Tornado WebSocket connection.

    Args:
        handler (tornado.websocket.WebSocketHandler): The open WebSocket connection.
        id_ (str): Optional stable identifier (a random hex UUID by default).
    """

    def __init__(self, handler, id_=None):
        super(WebsocketSubscriber, self).__init__(id_=id_)
        self._handler = handler

    @property
    def handler(self):
        """The WebSocket handler wrapped by this subscriber."""

        return self._handler

    def send(self, message):
        """Writes the message to the WebSocket.
        Raises SubscriberError if the connection is already closed."""

        try:
            self._handler.write_message(message)
        except WebSocketClosedError as ex:
            raise SubscriberError("WebSocket closed: {}".format(self.id)) from ex
