"""physkit.core.units

Минимальный слой единиц измерения и физических констант.

Принцип: везде, где есть числа, должна быть явная единица (например, 5 * KILOPASCAL).
Внутренние (канонические) единицы: метры, паскали, кельвины, радианы.
"""

from __future__ import annotations

import math

# Base units (conceptual SI multipliers)
METER: float = 1.0
KILOGRAM: float = 1.0
SECOND: float = 1.0

# Derived units
NEWTON: float = KILOGRAM * METER / (SECOND**2)
PASCAL: float = NEWTON / (METER**2)

# Pressure
KILOPASCAL: float = 1e3 * PASCAL
MILLIBAR: float = 1e2 * PASCAL
ATMOSPHERE: float = 101325.0 * PASCAL

# Distance
MILLIMETER: float = 1e-3 * METER
CENTIMETER: float = 1e-2 * METER
KILOMETER: float = 1e3 * METER
INCH: float = 0.0254 * METER
FOOT: float = 12.0 * INCH
YARD: float = 3.0 * FOOT
MILE: float = 1760.0 * YARD
NAUTICAL_MILE: float = 1852.0 * METER

# Temperature (offset, not multiplier)
ZERO_CELSIUS_K: float = 273.15
FAHRENHEIT_PER_KELVIN: float = 9.0 / 5.0

# Angle
DEG_TO_RAD: float = math.pi / 180.0
RAD_TO_DEG: float = 180.0 / math.pi

# Useful constants
ROOM_TEMPERATURE_K: float = ZERO_CELSIUS_K + 20.0
PRESSURE_REFERENCE_PA: float = 1.0 * ATMOSPHERE

# Altitude bands (m)
ALTITUDE_LOW_METERS: float = 1000.0 * METER
ALTITUDE_HIGH_METERS: float = 5000.0 * METER
