"""Закрытые перечисления единиц измерения."""

from __future__ import annotations

from physkit.measures.angle import AngleUnit
from physkit.measures.distance import DistanceUnit
from physkit.measures.humidity import HumidityUnit
from physkit.measures.pressure import PressureUnit
from physkit.measures.temperature import TemperatureUnit

__all__ = [
    "AngleUnit",
    "DistanceUnit",
    "HumidityUnit",
    "PressureUnit",
    "TemperatureUnit",
]
