"""Tests for raw profile input parsing."""

import dataclasses
from datetime import date

import pytest

from health_profile.exceptions import MissingArgumentError, ValidationError
from health_profile.models.profile import Sex, UnitSystem
from health_profile.services.validation import (
    parse_date_of_birth,
    parse_enum,
    parse_positive_number,
    parse_profile_input,
)

TODAY = date(2025, 10, 1)


class TestParseProfileInput:
    """Tests for parse_profile_input."""

    def test_valid_input(self, valid_input):
        parsed = parse_profile_input(valid_input, TODAY)

        assert parsed.name == "John Smith"
        assert parsed.date_of_birth == date(1999, 7, 22)
        assert parsed.height == 180.0
        assert parsed.weight == 75.0
        assert parsed.sex == Sex.MALE
        assert parsed.unit_system == UnitSystem.METRIC

    def test_name_is_stripped(self, valid_input):
        parsed = parse_profile_input(dataclasses.replace(valid_input, name="  Ada  "), TODAY)
        assert parsed.name == "Ada"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", ""),
            ("name", "   "),
            ("date_of_birth", ""),
            ("date_of_birth", "22/07/1999"),
            ("date_of_birth", "1999-02-30"),
            ("date_of_birth", "19990722"),
            ("date_of_birth", "1999-W29-4"),
            ("date_of_birth", "2030-01-01"),
            ("height", "tall"),
            ("height", "-180"),
            ("height", "0"),
            ("height", "nan"),
            ("weight", ""),
            ("weight", "inf"),
            ("sex", "robot"),
            ("unit_system", "furlongs"),
        ],
    )
    def test_invalid_field(self, valid_input, field, value):
        raw = dataclasses.replace(valid_input, **{field: value})

        with pytest.raises(ValidationError) as exc_info:
            parse_profile_input(raw, TODAY)
        assert exc_info.value.field == field

    def test_none_input(self):
        with pytest.raises(MissingArgumentError):
            parse_profile_input(None, TODAY)


class TestFieldParsers:
    """Tests for the individual field parsers."""

    def test_date_of_birth_today_allowed(self):
        assert parse_date_of_birth("2025-10-01", TODAY) == TODAY

    def test_number_with_whitespace(self):
        assert parse_positive_number("height", " 172.5 ") == 172.5

    @pytest.mark.parametrize("raw", ["FEMALE", "female", "Female", " female "])
    def test_enum_matches_name_or_value(self, raw):
        assert parse_enum("sex", raw, Sex) == Sex.FEMALE

    def test_enum_error_lists_choices(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_enum("unit_system", "stone", UnitSystem)
        assert "METRIC, IMPERIAL" in str(exc_info.value)
