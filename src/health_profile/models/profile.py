"""Health profile data models."""

import dataclasses
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..exceptions import ValidationError

# Conversion factor for BMI computed from pounds and inches
IMPERIAL_BMI_FACTOR = 703


class Sex(str, Enum):
    """Biological sex recorded on a profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class UnitSystem(str, Enum):
    """Measurement convention for height and weight."""

    METRIC = "metric"  # cm, kg
    IMPERIAL = "imperial"  # in, lb

    @property
    def height_unit(self) -> str:
        return "cm" if self is UnitSystem.METRIC else "in"

    @property
    def weight_unit(self) -> str:
        return "kg" if self is UnitSystem.METRIC else "lb"


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """Whole years elapsed between date_of_birth and today."""
    if today is None:
        today = date.today()
    before_birthday = (today.month, today.day) < (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - int(before_birthday)


@dataclass(frozen=True)
class Profile:
    """Snapshot of one person's demographic and physical attributes.

    Profiles are never mutated: an update builds a new snapshot with
    ``replace()`` and stores it under the same ID.
    """

    id: int
    name: str
    sex: Sex
    date_of_birth: date
    height: float
    weight: float
    unit_system: UnitSystem = UnitSystem.METRIC
    age: int | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("name", "must not be empty")
        if not math.isfinite(self.height) or self.height <= 0:
            raise ValidationError("height", "must be a positive number")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValidationError("weight", "must be a positive number")
        if self.unit_system is None:
            object.__setattr__(self, "unit_system", UnitSystem.METRIC)
        if self.age is None:
            object.__setattr__(self, "age", calculate_age(self.date_of_birth))

    def replace(self, **changes) -> "Profile":
        """Return a new snapshot with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @property
    def bmi(self) -> float:
        """Body-mass index, rounded to one decimal."""
        if self.unit_system is UnitSystem.IMPERIAL:
            value = IMPERIAL_BMI_FACTOR * self.weight / self.height**2
        else:
            height_m = self.height / 100
            value = self.weight / height_m**2
        return round(value, 1)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "sex": self.sex.value,
            "date_of_birth": self.date_of_birth.isoformat(),
            "height": self.height,
            "weight": self.weight,
            "unit_system": self.unit_system.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            sex=Sex(data["sex"]),
            date_of_birth=date.fromisoformat(data["date_of_birth"]),
            height=data["height"],
            weight=data["weight"],
            unit_system=UnitSystem(data.get("unit_system") or UnitSystem.METRIC.value),
            age=data.get("age"),
        )

    def get_summary(self) -> str:
        """Generate a human-readable summary."""
        units = self.unit_system
        summary = f"Profile #{self.id}: {self.name}\n"
        summary += f"Born: {self.date_of_birth.isoformat()} (age {self.age})\n"
        summary += f"Sex: {self.sex.value}\n"
        summary += f"Height: {self.height:g} {units.height_unit}\n"
        summary += f"Weight: {self.weight:g} {units.weight_unit}\n"
        summary += f"BMI: {self.bmi}\n"
        summary += f"Units: {units.value}\n"
        return summary
