"""Высотные диапазоны LOW / MEDIUM / HIGH.

Границы диапазонов это физические константы в метрах (см. AltitudeBands),
а не состояние экземпляра. Для отображения они переводятся в единицы вызывающего
и округляются до целого (half-up).
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from physkit.config import DEFAULT_ALTITUDE_BANDS, AltitudeBands
from physkit.core.conversion import convert_distance
from physkit.core.enums import EnumeratedUnit
from physkit.measures.distance import DistanceUnit


def _round_half_up(x: float) -> int:
    return int(np.floor(float(x) + 0.5))


class Altitude(EnumeratedUnit):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def default_value(cls) -> "Altitude":
        return cls.LOW

    def to_presentation_string(
        self,
        distance_unit: DistanceUnit,
        bands: Optional[AltitudeBands] = None,
    ) -> str:
        """Например: "Between 1000 and 5000 meters"."""

        bands = bands or DEFAULT_ALTITUDE_BANDS
        unit = distance_unit.to_canonical_string()
        low = _round_half_up(convert_distance(bands.low_m, DistanceUnit.METERS, distance_unit))
        high = _round_half_up(convert_distance(bands.high_m, DistanceUnit.METERS, distance_unit))

        if self is Altitude.LOW:
            return f"Below {low} {unit}"
        if self is Altitude.MEDIUM:
            return f"Between {low} and {high} {unit}"
        if self is Altitude.HIGH:
            return f"Above {high} {unit}"
        raise self.unexpected()
