#!/usr/bin/env python
# -*- coding: utf-8 -*-

import gc
import uuid

# noinspection PyPackageRequirements
import pytest
from mock import MagicMock

from thingpy.exceptions import PropertyError
from thingpy.metadata import PropertyMetadata
from thingpy.property import Property
from thingpy.thing import Thing
from thingpy.value import Value


def test_property_description(thing):
    """Descriptions keep the metadata and append the property link."""

    metadata = {
        "title": "Level",
        "type": "integer",
        "links": [{"rel": "alternate", "href": "/level.html"}]
    }

    prop = Property(thing, "level", Value(1), metadata=metadata)
    prop.set_href_prefix("/things/lamp")

    assert prop.as_property_description() == {
        "title": "Level",
        "type": "integer",
        "links": [
            {"rel": "alternate", "href": "/level.html"},
            {"rel": "property", "href": "/things/lamp/properties/level"}
        ]
    }

    assert len(metadata["links"]) == 1
    assert len(prop.as_property_description()["links"]) == 2


def test_property_metadata_instance(thing):
    """Metadata may be given as a PropertyMetadata instance."""

    metadata = PropertyMetadata(type="number", unit="percent")
    prop = Property(thing, "level", Value(1.5), metadata=metadata)

    assert prop.metadata is metadata
    assert prop.value == 1.5


def test_read_only(thing):
    """Read-only properties reject writes."""

    prop = Property(thing, "temperature", Value(20), metadata={"type": "number", "readOnly": True})
    thing.add_property(prop)

    with pytest.raises(PropertyError):
        thing.set_property("temperature", 25)

    assert thing.get_property("temperature") == 20


def test_external_update_notifies(thing):
    """Changes that come from the device are notified through the Thing."""

    value = Value(20)
    prop = Property(thing, "temperature", value, metadata={"type": "number", "readOnly": True})
    thing.add_property(prop)

    subscriber = MagicMock()
    subscriber.id = uuid.uuid4().hex
    thing.add_subscriber(subscriber)

    value.notify_of_external_update(21)

    subscriber.send.assert_called_once_with('{"messageType": "propertyStatus", "data": {"temperature": 21}}')


def test_thing_reference_is_weak():
    """Properties do not keep their Thing alive."""

    thing = Thing(id_=uuid.uuid4().urn, title="Thing")
    value = Value(0)
    prop = Property(thing, "level", value)

    del thing
    gc.collect()

    assert prop.thing is None

    value.set(1)

    assert prop.get_value() == 1


def test_property_description_single_link(thing):
    """A single link object declared in the metadata is kept next to the property link."""

    link = {"rel": "alternate", "href": "/level.html"}
    prop = Property(thing, "level", Value(1), metadata={"type": "integer", "links": link})

    assert prop.as_property_description()["links"] == [
        link,
        {"rel": "property", "href": "/properties/level"}
    ]
