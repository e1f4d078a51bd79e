"""Model and feature documents using mongoengine for MongoDB."""

from __future__ import annotations

import mongoengine as me
from mongoengine import fields


class Feature(me.Document):
    """Equipment or option a model can list."""

    meta = {
        "collection": "features",
        "indexes": ["name"],
        "strict": False,
    }

    name = fields.StringField(required=True, max_length=100)
    summary = fields.StringField()

    def __str__(self) -> str:
        return self.name


class Model(me.Document):
    """A car model; references exactly one brand."""

    meta = {
        "collection": "models",
        "indexes": ["name", "brand"],
        "ordering": ["name"],
        "strict": False,
    }

    name = fields.StringField(required=True, max_length=100)
    brand = fields.ObjectIdField(required=True)
    features = fields.ListField(fields.ObjectIdField(), default=list)
    summary = fields.StringField()

    def __str__(self) -> str:
        return self.name
