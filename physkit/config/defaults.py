"""Значения по умолчанию для окружающей среды и высотных диапазонов.

Все величины в канонических единицах: K, %, Pa, m.
"""

from __future__ import annotations

from dataclasses import dataclass

from physkit.core.units import (
    ALTITUDE_HIGH_METERS,
    ALTITUDE_LOW_METERS,
    PRESSURE_REFERENCE_PA,
    ROOM_TEMPERATURE_K,
)
from physkit.core.validation import ensure_finite, ensure_in_range, ensure_positive


@dataclass(frozen=True)
class EnvironmentDefaults:
    """Дефолты NaturalEnvironment (воздух у поверхности Земли)."""

    temperature_k: float = ROOM_TEMPERATURE_K
    humidity_relative: float = 50.0     # %
    pressure_pa: float = PRESSURE_REFERENCE_PA
    air_attenuation_applied: bool = True

    def __post_init__(self) -> None:
        ensure_finite(self.temperature_k, "temperature_k")
        ensure_positive(self.temperature_k, "temperature_k")
        ensure_in_range(self.humidity_relative, 0.0, 100.0, "humidity_relative")
        ensure_finite(self.pressure_pa, "pressure_pa")
        ensure_positive(self.pressure_pa, "pressure_pa")


@dataclass(frozen=True)
class AltitudeBands:
    """Границы LOW/MEDIUM/HIGH (м)."""

    low_m: float = ALTITUDE_LOW_METERS
    high_m: float = ALTITUDE_HIGH_METERS

    def __post_init__(self) -> None:
        ensure_positive(self.low_m, "low_m")
        ensure_positive(self.high_m, "high_m")
        if self.low_m >= self.high_m:
            raise ValueError(f"low_m must be < high_m, got {self.low_m} >= {self.high_m}")


DEFAULT_ENVIRONMENT = EnvironmentDefaults()
DEFAULT_ALTITUDE_BANDS = AltitudeBands()
