"""Единицы температуры (канон: K)."""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit
from physkit.measures.angle import DEGREES_SYMBOL


class TemperatureUnit(EnumeratedUnit):
    KELVIN = "kelvin"
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @classmethod
    def default_value(cls) -> "TemperatureUnit":
        return cls.KELVIN

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "TemperatureUnit":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    def to_abbreviated_string(self) -> str:
        if self is TemperatureUnit.KELVIN:
            return "K"
        if self is TemperatureUnit.CELSIUS:
            return DEGREES_SYMBOL + "C"
        if self is TemperatureUnit.FAHRENHEIT:
            return DEGREES_SYMBOL + "F"
        raise self.unexpected()

    def to_presentation_string(self) -> str:
        return self.to_abbreviated_string()


_BY_ABBREVIATION: Dict[str, TemperatureUnit] = {u.to_abbreviated_string().lower(): u for u in TemperatureUnit}
