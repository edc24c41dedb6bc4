#!/usr/bin/env python
# -*- coding: utf-8 -*-

import uuid

# noinspection PyPackageRequirements
import pytest
# noinspection PyPackageRequirements
from faker import Faker

from tests.utils import \
    RecordingSubscriber, \
    FadeAction, \
    RebootAction, \
    FADE_METADATA, \
    OVERHEATED_METADATA
from thingpy.property import Property
from thingpy.thing import Thing
from thingpy.value import Value


@pytest.fixture
def thing():
    """Builds and returns an empty Thing with a random ID."""

    return Thing(id_=uuid.uuid4().urn, title=Faker().word())


@pytest.fixture
def lamp():
    """Builds and returns a lamp Thing with properties,
    action types and event types already registered."""

    lamp_thing = Thing(
        id_="urn:dev:lamp-1",
        title="Lamp",
        type_=["OnOffSwitch", "Light"],
        description="A web connected lamp")

    lamp_thing.add_property(Property(
        lamp_thing, "on", Value(False),
        metadata={
            "@type": "OnOffProperty",
            "title": "On/Off",
            "type": "boolean",
            "description": "Whether the lamp is turned on"
        }))

    lamp_thing.add_property(Property(
        lamp_thing, "brightness", Value(50),
        metadata={
            "@type": "BrightnessProperty",
            "title": "Brightness",
            "type": "integer",
            "minimum": 0,
            "maximum": 100,
            "unit": "percent"
        }))

    lamp_thing.add_available_action("fade", FADE_METADATA, FadeAction)
    lamp_thing.add_available_action("reboot", None, RebootAction)
    lamp_thing.add_available_event("overheated", OVERHEATED_METADATA)

    return lamp_thing


@pytest.fixture
def subscriber():
    """Returns a subscriber that records the messages it receives."""

    return RecordingSubscriber()


@pytest.fixture
def fade_input():
    """Returns a valid input for the fade action."""

    fake = Faker()

    return {
        "brightness": fake.pyint(min_value=0, max_value=100),
        "duration": fake.pyint(min_value=1, max_value=5000)
    }
