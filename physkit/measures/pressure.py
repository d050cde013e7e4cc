"""Единицы давления (канон: Pa)."""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit


class PressureUnit(EnumeratedUnit):
    PASCALS = "pascals"
    KILOPASCALS = "kilopascals"
    MILLIBARS = "millibars"
    ATMOSPHERES = "atmospheres"

    @classmethod
    def default_value(cls) -> "PressureUnit":
        return cls.PASCALS

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "PressureUnit":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    def to_abbreviated_string(self) -> str:
        try:
            return _ABBREVIATIONS[self]
        except KeyError:
            raise self.unexpected() from None

    def to_presentation_string(self) -> str:
        return self.to_abbreviated_string()


_ABBREVIATIONS: Dict[PressureUnit, str] = {
    PressureUnit.PASCALS: "Pa",
    PressureUnit.KILOPASCALS: "kPa",
    PressureUnit.MILLIBARS: "mb",
    PressureUnit.ATMOSPHERES: "atm",
}

# "kPa" и "Pa" различаются и в нижнем регистре
_BY_ABBREVIATION: Dict[str, PressureUnit] = {v.lower(): k for k, v in _ABBREVIATIONS.items()}
