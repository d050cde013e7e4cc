"""physkit.core.conversion

Чистые функции перевода между системами единиц.

Все функции тотальные: принимают скаляр или array-like.
Скаляр на входе -> float на выходе, массив -> np.ndarray.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from physkit.core.units import (
    ATMOSPHERE,
    FAHRENHEIT_PER_KELVIN,
    KILOPASCAL,
    MILLIBAR,
    RAD_TO_DEG,
    DEG_TO_RAD,
    ZERO_CELSIUS_K,
)

if TYPE_CHECKING:
    from physkit.measures.distance import DistanceUnit

Quantity = Union[float, NDArray[np.float64]]

_FAHRENHEIT_ZERO_CELSIUS: float = 32.0


def _out(x: NDArray[np.float64]) -> Quantity:
    if np.ndim(x) == 0:
        return float(x)
    return x


def _as_array(value: ArrayLike) -> NDArray[np.float64]:
    return np.asarray(value, dtype=np.float64)


# --- temperature ---

def celsius_to_kelvin(t_c: ArrayLike) -> Quantity:
    return _out(_as_array(t_c) + ZERO_CELSIUS_K)


def kelvin_to_celsius(t_k: ArrayLike) -> Quantity:
    return _out(_as_array(t_k) - ZERO_CELSIUS_K)


def fahrenheit_to_kelvin(t_f: ArrayLike) -> Quantity:
    t = (_as_array(t_f) - _FAHRENHEIT_ZERO_CELSIUS) / FAHRENHEIT_PER_KELVIN
    return _out(t + ZERO_CELSIUS_K)


def kelvin_to_fahrenheit(t_k: ArrayLike) -> Quantity:
    t = (_as_array(t_k) - ZERO_CELSIUS_K) * FAHRENHEIT_PER_KELVIN
    return _out(t + _FAHRENHEIT_ZERO_CELSIUS)


# --- pressure (канон: Pa) ---

def pascals_to_atmospheres(p_pa: ArrayLike) -> Quantity:
    return _out(_as_array(p_pa) / ATMOSPHERE)


def pascals_to_kilopascals(p_pa: ArrayLike) -> Quantity:
    return _out(_as_array(p_pa) / KILOPASCAL)


def pascals_to_millibars(p_pa: ArrayLike) -> Quantity:
    return _out(_as_array(p_pa) / MILLIBAR)


def atmospheres_to_pascals(p_atm: ArrayLike) -> Quantity:
    return _out(_as_array(p_atm) * ATMOSPHERE)


def kilopascals_to_pascals(p_kpa: ArrayLike) -> Quantity:
    return _out(_as_array(p_kpa) * KILOPASCAL)


def millibars_to_pascals(p_mb: ArrayLike) -> Quantity:
    return _out(_as_array(p_mb) * MILLIBAR)


# --- angle ---

def degrees_to_radians(angle_deg: ArrayLike) -> Quantity:
    return _out(_as_array(angle_deg) * DEG_TO_RAD)


def radians_to_degrees(angle_rad: ArrayLike) -> Quantity:
    return _out(_as_array(angle_rad) * RAD_TO_DEG)


# --- distance ---

def convert_distance(value: ArrayLike, from_unit: "DistanceUnit", to_unit: "DistanceUnit") -> Quantity:
    """Перевод расстояния через метры: value * m(from) / m(to)."""

    # локальный импорт: measures.distance сам зависит от core.units
    from physkit.measures.distance import DistanceUnit

    for unit in (from_unit, to_unit):
        if not isinstance(unit, DistanceUnit):
            raise ValueError(f"Unexpected DistanceUnit {unit}")

    if from_unit is to_unit:
        return _out(_as_array(value))

    meters = _as_array(value) * from_unit.meters_per_unit
    return _out(meters / to_unit.meters_per_unit)
