"""Единицы угла.

Сокращённая форма: то, что дописывается к числу при отображении:
- DEGREES: символ градуса "°" (без пробела);
- RADIANS: " rad": ведущий пробел является частью токена.
"""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit

DEGREES_SYMBOL: str = "°"
RADIANS_SUFFIX: str = " rad"


class AngleUnit(EnumeratedUnit):
    DEGREES = "degrees"
    RADIANS = "radians"

    @classmethod
    def default_value(cls) -> "AngleUnit":
        return cls.DEGREES

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "AngleUnit":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    def to_abbreviated_string(self) -> str:
        if self is AngleUnit.DEGREES:
            return DEGREES_SYMBOL
        if self is AngleUnit.RADIANS:
            return RADIANS_SUFFIX
        raise self.unexpected()

    def to_presentation_string(self) -> str:
        return self.to_abbreviated_string()


_BY_ABBREVIATION: Dict[str, AngleUnit] = {
    DEGREES_SYMBOL: AngleUnit.DEGREES,
    RADIANS_SUFFIX: AngleUnit.RADIANS,
}
