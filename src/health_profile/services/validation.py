"""Parsing and validation of raw profile input."""

import math
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TypeVar

from ..exceptions import MissingArgumentError, ValidationError
from ..models.profile import Sex, UnitSystem
from ..models.sign_up import ProfileInput

E = TypeVar("E", bound=Enum)

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class ParsedProfileInput:
    """Typed, validated profile fields (everything but ID and age)."""

    name: str
    date_of_birth: date
    height: float
    weight: float
    sex: Sex
    unit_system: UnitSystem


def parse_name(raw: str) -> str:
    name = (raw or "").strip()
    if not name:
        raise ValidationError("name", "must not be empty")
    return name


def parse_date_of_birth(raw: str, today: date) -> date:
    """Parse an ISO YYYY-MM-DD date that is not in the future."""
    text = (raw or "").strip()
    if not text:
        raise ValidationError("date_of_birth", "must not be empty")
    invalid = ValidationError(
        "date_of_birth", f"'{text}' is not a valid date (expected YYYY-MM-DD)"
    )
    # fromisoformat also takes basic and week dates on newer Pythons
    if not ISO_DATE_PATTERN.fullmatch(text):
        raise invalid
    try:
        value = date.fromisoformat(text)
    except ValueError:
        raise invalid from None
    if value > today:
        raise ValidationError("date_of_birth", "must not be in the future")
    return value


def parse_positive_number(field: str, raw: str) -> float:
    text = (raw or "").strip()
    try:
        value = float(text)
    except ValueError:
        raise ValidationError(field, f"'{text}' is not a number") from None
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(field, "must be a positive number")
    return value


def parse_enum(field: str, raw: str, enum_cls: type[E]) -> E:
    """Match an enum member by name or value, ignoring case."""
    text = (raw or "").strip().lower()
    for member in enum_cls:
        if text in (member.name.lower(), str(member.value).lower()):
            return member
    choices = ", ".join(member.name for member in enum_cls)
    raise ValidationError(field, f"'{raw}' is not one of {choices}")


def parse_profile_input(raw_input: ProfileInput, today: date) -> ParsedProfileInput:
    """Validate every field of the raw input.

    Raises ValidationError for the first invalid field, in form order.
    """
    if raw_input is None:
        raise MissingArgumentError("raw_input")

    return ParsedProfileInput(
        name=parse_name(raw_input.name),
        date_of_birth=parse_date_of_birth(raw_input.date_of_birth, today),
        height=parse_positive_number("height", raw_input.height),
        weight=parse_positive_number("weight", raw_input.weight),
        sex=parse_enum("sex", raw_input.sex, Sex),
        unit_system=parse_enum("unit_system", raw_input.unit_system, UnitSystem),
    )
