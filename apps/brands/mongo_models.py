"""Brand model using mongoengine for MongoDB."""

from __future__ import annotations

import mongoengine as me
from django.conf import settings
from mongoengine import fields

BRAND_URL_PREFIX = "/catalog/brand/"


class Brand(me.Document):
    """Brand model.

    ``url``, ``logo_url``, ``founded_formatted`` and ``founded_yyyy_mm_dd`` are
    derived on read and never stored. Unset ``logo``/``founded`` derive to an
    empty string.
    """

    meta = {
        "collection": "brands",
        "indexes": ["name"],
        "strict": False,
    }

    name = fields.StringField(required=True, max_length=100)
    logo = fields.StringField()
    founded = fields.DateTimeField()

    @property
    def url(self) -> str:
        return f"{BRAND_URL_PREFIX}{self.id}"

    @property
    def logo_url(self) -> str:
        if not self.logo:
            return ""
        return f"{settings.BRAND_LOGO_URL}{self.logo}"

    @property
    def founded_formatted(self) -> str:
        if self.founded is None:
            return ""
        return f"{self.founded.year:04d}"

    @property
    def founded_yyyy_mm_dd(self) -> str:
        if self.founded is None:
            return ""
        return self.founded.date().isoformat()

    def __str__(self) -> str:
        return self.name
