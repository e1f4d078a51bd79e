"""Serializers for the MongoEngine Brand document and the brand form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from dateutil.parser import isoparse
from django.utils.html import escape
from rest_framework import serializers

NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class BrandSerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    founded = serializers.SerializerMethodField()
    logo = serializers.CharField(allow_null=True)
    url = serializers.CharField(read_only=True)
    logo_url = serializers.CharField(read_only=True)
    founded_formatted = serializers.CharField(read_only=True)
    founded_yyyy_mm_dd = serializers.CharField(read_only=True)

    def get_id(self, obj):
        return str(obj.id)

    def get_founded(self, obj):
        return obj.founded_yyyy_mm_dd or None


class ModelSummarySerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    brand = serializers.SerializerMethodField()

    def get_id(self, obj):
        return str(obj.id)

    def get_brand(self, obj):
        return str(obj.brand)


class BrandFormSerializer(serializers.Serializer):
    """Checks the create/update brand form."""

    name = serializers.CharField(max_length=100, allow_blank=True, default="")
    founded = serializers.CharField(allow_blank=True, default="")

    def validate_name(self, value: str) -> str:
        if len(value) < 1:
            raise serializers.ValidationError("Brand name must be specified.")
        if not NAME_PATTERN.match(value):
            raise serializers.ValidationError("Brand name has non-alphanumeric characters.")
        return value

    def validate_founded(self, value: str) -> Optional[date]:
        if not value:
            return None
        parsed = _parse_iso_date(value)
        if parsed is None:
            raise serializers.ValidationError("Invalid date")
        return parsed


def _parse_iso_date(value: str) -> Optional[date]:
    """Parse any ISO-8601 date or date-time down to its calendar date.

    Reduced forms (``1980``, ``1980-04``) land on the first day of their
    period; ordinal (``1980-091``) and week (``1980-W14``) dates resolve to
    their calendar day.
    """
    try:
        return isoparse(value).date()
    except (ValueError, OverflowError):
        return None


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class BrandForm:
    """Escaped form values, ready for redisplay or storage."""

    name: str = ""
    founded: str = ""
    founded_date: Optional[date] = None

    @property
    def founded_datetime(self) -> Optional[datetime]:
        if self.founded_date is None:
            return None
        return datetime.combine(self.founded_date, time.min)


def validate_brand_form(data) -> tuple[BrandForm, list[FieldError]]:
    """Run the brand form through validation and HTML escaping.

    Returns the escaped form and the ordered list of field errors; the form
    is safe to persist only when the list is empty. Never touches the store.
    """
    serializer = BrandFormSerializer(data=data)
    valid = serializer.is_valid()

    raw_name = str(data.get("name", "") or "").strip()
    raw_founded = str(data.get("founded", "") or "").strip()
    founded_date = serializer.validated_data.get("founded") if valid else None

    form = BrandForm(
        name=escape(raw_name),
        founded=escape(raw_founded),
        founded_date=founded_date,
    )
    errors = [
        FieldError(field, str(message))
        for field, messages in serializer.errors.items()
        for message in messages
    ]
    return form, errors
