#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Validators that check values against JSON Schema fragments.
"""

import jsonschema


class Validator(object):
    """Validator interface.
    Implementations decide whether a value conforms to a schema."""

    DEFAULT_ERROR = "Value does not conform to the schema"

    def validate(self, schema, value):
        """Returns True if the value conforms to the given schema."""

        raise NotImplementedError()

    def error_message(self, schema, value):
        """Returns the reason why the value does not conform
        to the given schema, or None if the value is valid."""

        return None if self.validate(schema, value) else self.DEFAULT_ERROR


class JsonSchemaValidator(Validator):
    """Validator backed by the JSON Schema specification."""

    def error_message(self, schema, value):
        """Returns the reason why the value does not conform
        to the given schema, or None if the value is valid."""

        try:
            jsonschema.validate(value, schema)
        except (jsonschema.ValidationError, jsonschema.SchemaError) as ex:
            return ex.message

        return None

    def validate(self, schema, value):
        """Returns True if the value conforms to the given schema."""

        return self.error_message(schema, value) is None
