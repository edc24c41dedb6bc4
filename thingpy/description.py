#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Class that builds the JSON serialization of a Thing Description document.
"""

from thingpy.enums import LinkRels, MediaTypes


class ThingDescriptionBuilder(object):
    """Builds Thing Description documents from the current state of a Thing.
    Documents are built from scratch on every call and never cached."""

    def __init__(self, thing):
        self._thing = thing

    def _href(self, *parts):
        return "/".join((self._thing.href_prefix,) + parts)

    def _interaction_links(self, rel, collection, name):
        return [{
            "rel": rel,
            "href": self._href(collection, name)
        }]

    def _json_actions(self):
        ret = {}

        for name, metadata in self._thing.get_available_actions().items():
            ret[name] = metadata.to_dict()
            ret[name]["links"] = self._interaction_links(LinkRels.ACTION, "actions", name)

        return ret

    def _json_events(self):
        ret = {}

        for name, metadata in self._thing.get_available_events().items():
            ret[name] = metadata.to_dict()
            ret[name]["links"] = self._interaction_links(LinkRels.EVENT, "events", name)

        return ret

    def _json_links(self):
        links = [
            {"rel": LinkRels.PROPERTIES, "href": self._href("properties")},
            {"rel": LinkRels.ACTIONS, "href": self._href("actions")},
            {"rel": LinkRels.EVENTS, "href": self._href("events")}
        ]

        ui_href = self._thing.ui_href

        if ui_href is not None:
            links.append({
                "rel": LinkRels.ALTERNATE,
                "mediaType": MediaTypes.HTML,
                "href": ui_href
            })

        return links

    def build(self):
        """Returns the Thing Description document as a dict."""

        thing = self._thing

        doc = {
            "id": thing.id,
            "title": thing.title,
            "@context": thing.context,
            "properties": thing.get_property_descriptions(),
            "actions": self._json_actions(),
            "events": self._json_events(),
            "links": self._json_links()
        }

        if thing.description:
            doc["description"] = thing.description

        if thing.type:
            doc["@type"] = thing.type

        return doc
