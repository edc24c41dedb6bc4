#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Some utility functions shared by the Thing model classes.
"""

import datetime



def to_camel(val):
    """Takes a string and transforms it to camelCase."""

    if not isinstance(val, str):
        raise ValueError

    parts = val.split("_")
    parts = parts[:1] + [item.title() for item in parts[1:]]

    return "".join(parts)



def timestamp():
    """Returns the current UTC time as an ISO 8601 string with second precision."""

    now = datetime.datetime.now(datetime.timezone.utc)

    return now.replace(microsecond=0).isoformat()
