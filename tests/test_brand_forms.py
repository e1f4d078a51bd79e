"""
Unit tests for the brand form validation pipeline.
"""

from datetime import date, datetime

import pytest
from django.http import QueryDict

from apps.brands.mongo_serializers import BrandForm, FieldError, validate_brand_form


class TestBrandName:
    """Rules applied to the name field."""

    def test_empty_name_rejected(self):
        """An empty name must be specified."""
        form, errors = validate_brand_form({"name": ""})

        assert errors == [FieldError("name", "Brand name must be specified.")]
        assert form.name == ""

    def test_whitespace_only_name_rejected(self):
        """A name that trims to nothing counts as missing."""
        _, errors = validate_brand_form({"name": "   "})

        assert errors == [FieldError("name", "Brand name must be specified.")]

    def test_missing_name_rejected(self):
        """An absent name is rejected like an empty one."""
        _, errors = validate_brand_form({})

        assert [error.field for error in errors] == ["name"]

    def test_non_alphanumeric_name_rejected(self):
        """Punctuation is not allowed in names."""
        form, errors = validate_brand_form({"name": "Acme!"})

        assert errors == [FieldError("name", "Brand name has non-alphanumeric characters.")]
        assert form.name == "Acme!"

    def test_alphanumeric_name_accepted(self):
        """Letters and digits pass."""
        form, errors = validate_brand_form({"name": "Acme1"})

        assert errors == []
        assert form.name == "Acme1"

    def test_name_is_trimmed(self):
        """Surrounding whitespace is removed before checking."""
        form, errors = validate_brand_form({"name": "  Acme  "})

        assert errors == []
        assert form.name == "Acme"

    def test_inner_space_rejected(self):
        """Spaces inside the name are non-alphanumeric."""
        _, errors = validate_brand_form({"name": "Aston Martin"})

        assert errors[0].field == "name"

    def test_name_too_long(self):
        """Names are capped at 100 characters."""
        _, errors = validate_brand_form({"name": "a" * 101})

        assert [error.field for error in errors] == ["name"]

    def test_name_at_limit_accepted(self):
        """Exactly 100 characters is fine."""
        _, errors = validate_brand_form({"name": "a" * 100})

        assert errors == []

    def test_markup_is_escaped_for_redisplay(self):
        """HTML-special characters come back escaped."""
        form, errors = validate_brand_form({"name": "<b>Acme</b>"})

        assert errors
        assert form.name == "&lt;b&gt;Acme&lt;/b&gt;"


class TestBrandFounded:
    """Rules applied to the founded field."""

    def test_invalid_date_rejected(self):
        """Free text is not a date."""
        form, errors = validate_brand_form({"name": "Acme", "founded": "not-a-date"})

        assert errors == [FieldError("founded", "Invalid date")]
        assert form.founded == "not-a-date"
        assert form.founded_date is None

    def test_impossible_date_rejected(self):
        """A well-formed but impossible date is rejected."""
        _, errors = validate_brand_form({"name": "Acme", "founded": "2021-02-30"})

        assert errors == [FieldError("founded", "Invalid date")]

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1980", date(1980, 1, 1)),
            ("1980-04", date(1980, 4, 1)),
            ("1980-091", date(1980, 3, 31)),
            ("1980-W14", date.fromisocalendar(1980, 14, 1)),
            ("19800401", date(1980, 4, 1)),
            ("1980-04-01 10:30", date(1980, 4, 1)),
        ],
    )
    def test_other_iso_forms_accepted(self, value, expected):
        """Reduced, ordinal, week and basic ISO-8601 forms all parse."""
        form, errors = validate_brand_form({"name": "Acme", "founded": value})

        assert errors == []
        assert form.founded_date == expected

    @pytest.mark.parametrize("value", ["not-a-date", "2021-02-30", "1980-13", "1980-367", "80"])
    def test_malformed_forms_rejected(self, value):
        _, errors = validate_brand_form({"name": "Acme", "founded": value})

        assert errors == [FieldError("founded", "Invalid date")]

    def test_year_only_stored_as_new_year(self):
        """A bare year is stored as January 1st of that year."""
        form, _ = validate_brand_form({"name": "Acme", "founded": "1980"})

        assert form.founded_datetime == datetime(1980, 1, 1)

    def test_iso_date_accepted(self):
        """YYYY-MM-DD parses to a date."""
        form, errors = validate_brand_form({"name": "Acme", "founded": "1975-04-01"})

        assert errors == []
        assert form.founded_date == date(1975, 4, 1)
        assert form.founded_datetime == datetime(1975, 4, 1)

    def test_iso_datetime_accepted(self):
        """A full ISO-8601 timestamp keeps its calendar date."""
        form, errors = validate_brand_form({"name": "Acme", "founded": "1975-04-01T10:30:00Z"})

        assert errors == []
        assert form.founded_date == date(1975, 4, 1)

    def test_absent_founded_accepted(self):
        """Founded is optional."""
        form, errors = validate_brand_form({"name": "Acme"})

        assert errors == []
        assert form.founded_date is None
        assert form.founded_datetime is None

    def test_blank_founded_treated_as_absent(self):
        """An empty date input is the same as no date."""
        form, errors = validate_brand_form({"name": "Acme", "founded": ""})

        assert errors == []
        assert form.founded_date is None


class TestPipeline:
    """Behaviour of the pipeline as a whole."""

    def test_errors_are_ordered_by_field(self):
        """All errors are collected, name first."""
        _, errors = validate_brand_form({"name": "Acme!", "founded": "nope"})

        assert [error.field for error in errors] == ["name", "founded"]

    def test_accepts_query_dict(self):
        """Form posts arrive as a QueryDict."""
        form, errors = validate_brand_form(QueryDict("name=Acme&founded=1980-01-01"))

        assert errors == []
        assert form == BrandForm(name="Acme", founded="1980-01-01", founded_date=date(1980, 1, 1))

    def test_query_dict_without_founded(self):
        """A form without the date input still validates."""
        form, errors = validate_brand_form(QueryDict("name=Acme"))

        assert errors == []
        assert form.founded_date is None
