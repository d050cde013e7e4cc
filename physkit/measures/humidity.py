"""Единицы влажности.

Сейчас поддерживается только относительная влажность (%).
MOLAR объявлена, но перевода для неё нет.
"""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit


class HumidityUnit(EnumeratedUnit):
    RELATIVE = "relative"
    MOLAR = "molar"

    @classmethod
    def default_value(cls) -> "HumidityUnit":
        return cls.RELATIVE

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "HumidityUnit":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    def to_abbreviated_string(self) -> str:
        if self is HumidityUnit.RELATIVE:
            return "%"
        if self is HumidityUnit.MOLAR:
            return "mol/mol"
        raise self.unexpected()

    def to_presentation_string(self) -> str:
        return self.to_abbreviated_string()


_BY_ABBREVIATION: Dict[str, HumidityUnit] = {u.to_abbreviated_string(): u for u in HumidityUnit}
