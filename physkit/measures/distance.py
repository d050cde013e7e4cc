"""Единицы расстояния.

Канон: метры; каждая единица знает свой множитель meters_per_unit.
"""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit
from physkit.core.units import (
    CENTIMETER,
    FOOT,
    INCH,
    KILOMETER,
    METER,
    MILE,
    MILLIMETER,
    NAUTICAL_MILE,
    YARD,
)


class DistanceUnit(EnumeratedUnit):
    METERS = "meters"
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"
    KILOMETERS = "kilometers"
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    MILES = "miles"
    NAUTICAL_MILES = "nautical miles"

    @classmethod
    def default_value(cls) -> "DistanceUnit":
        return cls.METERS

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "DistanceUnit":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    @property
    def meters_per_unit(self) -> float:
        try:
            return _METERS_PER_UNIT[self]
        except KeyError:
            raise self.unexpected() from None

    def to_abbreviated_string(self) -> str:
        try:
            return _ABBREVIATIONS[self]
        except KeyError:
            raise self.unexpected() from None

    def to_presentation_string(self) -> str:
        return self.to_abbreviated_string()


_METERS_PER_UNIT: Dict[DistanceUnit, float] = {
    DistanceUnit.METERS: METER,
    DistanceUnit.MILLIMETERS: MILLIMETER,
    DistanceUnit.CENTIMETERS: CENTIMETER,
    DistanceUnit.KILOMETERS: KILOMETER,
    DistanceUnit.INCHES: INCH,
    DistanceUnit.FEET: FOOT,
    DistanceUnit.YARDS: YARD,
    DistanceUnit.MILES: MILE,
    DistanceUnit.NAUTICAL_MILES: NAUTICAL_MILE,
}

_ABBREVIATIONS: Dict[DistanceUnit, str] = {
    DistanceUnit.METERS: "m",
    DistanceUnit.MILLIMETERS: "mm",
    DistanceUnit.CENTIMETERS: "cm",
    DistanceUnit.KILOMETERS: "km",
    DistanceUnit.INCHES: "in",
    DistanceUnit.FEET: "ft",
    DistanceUnit.YARDS: "yd",
    DistanceUnit.MILES: "mi",
    DistanceUnit.NAUTICAL_MILES: "nmi",
}

_BY_ABBREVIATION: Dict[str, DistanceUnit] = {v: k for k, v in _ABBREVIATIONS.items()}
