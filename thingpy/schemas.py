#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Schemas following the JSON Schema specification used to validate
the shape of the notification messages pushed to subscribers.
"""

from thingpy.enums import MessageTypes

SCHEMA_PROPERTY_STATUS = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://thingpy.local/schemas/property-status.json",
    "type": "object",
    "properties": {
        "messageType": {
            "type": "string",
            "enum": [MessageTypes.PROPERTY_STATUS]
        },
        "data": {
            "type": "object",
            "minProperties": 1,
            "maxProperties": 1
        }
    },
    "required": [
        "messageType",
        "data"
    ]
}

SCHEMA_ACTION_STATUS = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://thingpy.local/schemas/action-status.json",
    "type": "object",
    "properties": {
        "messageType": {
            "type": "string",
            "enum": [MessageTypes.ACTION_STATUS]
        },
        "data": {"type": "object"}
    },
    "required": [
        "messageType",
        "data"
    ]
}

SCHEMA_EVENT = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://thingpy.local/schemas/event.json",
    "type": "object",
    "properties": {
        "messageType": {
            "type": "string",
            "enum": [MessageTypes.EVENT]
        },
        "data": {"type": "object"}
    },
    "required": [
        "messageType",
        "data"
    ]
}
