"""Параметры естественной среды (воздух): температура, влажность, давление, затухание.

Хранение только в канонических единицах (K, %, Pa). Все геттеры/сеттеры
в других единицах являются обёртками над каноническим полем через physkit.core.conversion.

Уведомление об изменении:
- любой сеттер (даже с тем же значением) выставляет changed=True
  и синхронно вызывает подписчиков ровно один раз;
- групповые операции (reset / set_natural_environment*) присваивают все четыре поля
  и уведомляют ровно один раз.

Неявное копирование (copy.copy / copy.deepcopy) запрещено; копия делается только через
NaturalEnvironment.copy_of(other), источник при этом не меняется.

Несимметричная политика ошибок для неизвестной единицы сохранена как есть:
get_pressure/get_temperature -> ValueError, set_pressure/set_temperature -> warning в лог,
поле не меняется.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from physkit.config import DEFAULT_ENVIRONMENT, EnvironmentDefaults
from physkit.core import conversion
from physkit.measures.humidity import HumidityUnit
from physkit.measures.pressure import PressureUnit
from physkit.measures.temperature import TemperatureUnit

logger = logging.getLogger(__name__)

Listener = Callable[["NaturalEnvironment"], None]


class NaturalEnvironment:
    """Изменяемый агрегат из четырёх величин с уведомлением подписчиков."""

    def __init__(
        self,
        temperature_k: float = DEFAULT_ENVIRONMENT.temperature_k,
        humidity_relative: float = DEFAULT_ENVIRONMENT.humidity_relative,
        pressure_pa: float = DEFAULT_ENVIRONMENT.pressure_pa,
        air_attenuation_applied: bool = DEFAULT_ENVIRONMENT.air_attenuation_applied,
    ) -> None:
        self._temperature_k = float(temperature_k)
        self._humidity_relative = float(humidity_relative)
        self._pressure_pa = float(pressure_pa)
        self._air_attenuation_applied = bool(air_attenuation_applied)

        self._listeners: List[Listener] = []
        self._changed = False

    @classmethod
    def from_defaults(cls, defaults: EnvironmentDefaults) -> "NaturalEnvironment":
        return cls(
            defaults.temperature_k,
            defaults.humidity_relative,
            defaults.pressure_pa,
            defaults.air_attenuation_applied,
        )

    @classmethod
    def copy_of(cls, other: "NaturalEnvironment") -> "NaturalEnvironment":
        """Копия по значению. Подписчики источника не переносятся."""

        return cls(
            other.get_temperature_k(),
            other.get_humidity_relative(),
            other.get_pressure_pa(),
            other.is_air_attenuation_applied(),
        )

    def __copy__(self) -> "NaturalEnvironment":
        raise TypeError("NaturalEnvironment cannot be copied implicitly; use NaturalEnvironment.copy_of()")

    def __deepcopy__(self, memo: Any) -> "NaturalEnvironment":
        raise TypeError("NaturalEnvironment cannot be copied implicitly; use NaturalEnvironment.copy_of()")

    # --- change notification ---

    @property
    def changed(self) -> bool:
        return self._changed

    def clear_changed(self) -> None:
        self._changed = False

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        self._changed = True
        for listener in list(self._listeners):
            listener(self)

    # --- temperature ---

    def get_temperature_k(self) -> float:
        return self._temperature_k

    def get_temperature_c(self) -> float:
        return conversion.kelvin_to_celsius(self._temperature_k)

    def get_temperature_f(self) -> float:
        return conversion.kelvin_to_fahrenheit(self._temperature_k)

    def get_temperature(self, unit: TemperatureUnit) -> float:
        if unit is TemperatureUnit.KELVIN:
            return self.get_temperature_k()
        if unit is TemperatureUnit.CELSIUS:
            return self.get_temperature_c()
        if unit is TemperatureUnit.FAHRENHEIT:
            return self.get_temperature_f()
        raise ValueError(f"Unexpected TemperatureUnit {unit}")

    def set_temperature_k(self, temperature_k: float) -> None:
        self._temperature_k = float(temperature_k)
        self._notify()

    def set_temperature_c(self, temperature_c: float) -> None:
        self.set_temperature_k(conversion.celsius_to_kelvin(temperature_c))

    def set_temperature_f(self, temperature_f: float) -> None:
        self.set_temperature_k(conversion.fahrenheit_to_kelvin(temperature_f))

    def set_temperature(self, temperature: float, unit: TemperatureUnit) -> None:
        if unit is TemperatureUnit.KELVIN:
            self.set_temperature_k(temperature)
        elif unit is TemperatureUnit.CELSIUS:
            self.set_temperature_c(temperature)
        elif unit is TemperatureUnit.FAHRENHEIT:
            self.set_temperature_f(temperature)
        else:
            logger.warning("Unexpected TemperatureUnit %s", unit)

    # --- humidity ---

    def get_humidity_relative(self) -> float:
        return self._humidity_relative

    def set_humidity_relative(self, humidity: float, unit: HumidityUnit = HumidityUnit.RELATIVE) -> None:
        # TODO: molar humidity needs a molar <-> relative conversion in physkit.core.conversion
        if unit is not HumidityUnit.RELATIVE:
            logger.debug("Humidity in %s is not supported, value ignored", unit)
            return
        self._humidity_relative = float(humidity)
        self._notify()

    # --- pressure ---

    def get_pressure_pa(self) -> float:
        return self._pressure_pa

    def get_pressure_kpa(self) -> float:
        return conversion.pascals_to_kilopascals(self._pressure_pa)

    def get_pressure_mb(self) -> float:
        return conversion.pascals_to_millibars(self._pressure_pa)

    def get_pressure_atm(self) -> float:
        return conversion.pascals_to_atmospheres(self._pressure_pa)

    def get_pressure(self, unit: PressureUnit) -> float:
        if unit is PressureUnit.KILOPASCALS:
            return self.get_pressure_kpa()
        if unit is PressureUnit.PASCALS:
            return self.get_pressure_pa()
        if unit is PressureUnit.MILLIBARS:
            return self.get_pressure_mb()
        if unit is PressureUnit.ATMOSPHERES:
            return self.get_pressure_atm()
        raise ValueError(f"Unexpected PressureUnit {unit}")

    def set_pressure_pa(self, pressure_pa: float) -> None:
        self._pressure_pa = float(pressure_pa)
        self._notify()

    def set_pressure_kpa(self, pressure_kpa: float) -> None:
        self.set_pressure_pa(conversion.kilopascals_to_pascals(pressure_kpa))

    def set_pressure_mb(self, pressure_mb: float) -> None:
        self.set_pressure_pa(conversion.millibars_to_pascals(pressure_mb))

    def set_pressure_atm(self, pressure_atm: float) -> None:
        self.set_pressure_pa(conversion.atmospheres_to_pascals(pressure_atm))

    def set_pressure(self, pressure: float, unit: PressureUnit) -> None:
        if unit is PressureUnit.KILOPASCALS:
            self.set_pressure_kpa(pressure)
        elif unit is PressureUnit.PASCALS:
            self.set_pressure_pa(pressure)
        elif unit is PressureUnit.MILLIBARS:
            self.set_pressure_mb(pressure)
        elif unit is PressureUnit.ATMOSPHERES:
            self.set_pressure_atm(pressure)
        else:
            logger.warning("Unexpected PressureUnit %s", unit)

    # --- air attenuation ---

    def is_air_attenuation_applied(self) -> bool:
        return self._air_attenuation_applied

    def set_air_attenuation_applied(self, applied: bool) -> None:
        self._air_attenuation_applied = bool(applied)
        self._notify()

    # --- bulk ---

    def set_natural_environment(
        self,
        temperature_k: float,
        humidity_relative: float,
        pressure_pa: float,
        air_attenuation_applied: bool,
    ) -> None:
        self._temperature_k = float(temperature_k)
        self._humidity_relative = float(humidity_relative)
        self._pressure_pa = float(pressure_pa)
        self._air_attenuation_applied = bool(air_attenuation_applied)
        self._notify()

    def set_natural_environment_from(self, other: "NaturalEnvironment") -> None:
        """Разовое копирование значений из other (не живая привязка)."""

        self.set_natural_environment(
            other.get_temperature_k(),
            other.get_humidity_relative(),
            other.get_pressure_pa(),
            other.is_air_attenuation_applied(),
        )

    def reset(self, defaults: Optional[EnvironmentDefaults] = None) -> None:
        d = defaults or DEFAULT_ENVIRONMENT
        self.set_natural_environment(
            d.temperature_k,
            d.humidity_relative,
            d.pressure_pa,
            d.air_attenuation_applied,
        )

    # --- value semantics ---

    def _values(self) -> tuple:
        return (
            self._temperature_k,
            self._humidity_relative,
            self._pressure_pa,
            self._air_attenuation_applied,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaturalEnvironment):
            return NotImplemented
        return self._values() == other._values()

    # mutable: не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"NaturalEnvironment(T={self._temperature_k:.2f}K, "
            f"RH={self._humidity_relative:.1f}%, p={self._pressure_pa:.1f}Pa, "
            f"air_attenuation={self._air_attenuation_applied})"
        )
