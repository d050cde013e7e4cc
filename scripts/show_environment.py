#!/usr/bin/env python
"""
Show Natural Environment in chosen units + altitude bands

Usage:
    python scripts/show_environment.py [--temperature-c 15] [--pressure-unit millibars]
    python scripts/show_environment.py --distance-unit feet
"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from physkit.measures import DistanceUnit, PressureUnit, TemperatureUnit
from physkit.physics import Altitude, NaturalEnvironment
from physkit.text import UnitDecoratedFormat

logger = logging.getLogger("show_environment")


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Print natural environment values and altitude bands in the requested units",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Defaults (20 C, 50 %, 1 atm)
  python scripts/show_environment.py

  # Cold day, pressure in millibars, altitude bands in feet
  python scripts/show_environment.py --temperature-c -5 --pressure-unit millibars --distance-unit feet
        """
    )

    parser.add_argument(
        "--temperature-c",
        type=float,
        default=None,
        help="Air temperature in Celsius (default: room temperature)"
    )

    parser.add_argument(
        "--humidity",
        type=float,
        default=None,
        help="Relative humidity, %% (default: 50)"
    )

    parser.add_argument(
        "--temperature-unit",
        type=str,
        default="celsius",
        help="Output temperature unit: kelvin, celsius, fahrenheit (default: celsius)"
    )

    parser.add_argument(
        "--pressure-unit",
        type=str,
        default="kilopascals",
        help="Output pressure unit: pascals, kilopascals, millibars, atmospheres (default: kilopascals)"
    )

    parser.add_argument(
        "--distance-unit",
        type=str,
        default="meters",
        help="Distance unit for altitude bands (default: meters)"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)
    args = parse_args()

    try:
        t_unit = TemperatureUnit.canonical_value_of(args.temperature_unit)
        p_unit = PressureUnit.canonical_value_of(args.pressure_unit)
        d_unit = DistanceUnit.canonical_value_of(args.distance_unit)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    env = NaturalEnvironment()
    env.add_listener(lambda e: logger.debug("Environment changed: %r", e))
    if args.temperature_c is not None:
        env.set_temperature(args.temperature_c, TemperatureUnit.CELSIUS)
    if args.humidity is not None:
        env.set_humidity_relative(args.humidity)

    t_fmt = UnitDecoratedFormat("0.0#", " " + t_unit.to_abbreviated_string().lstrip())
    p_fmt = UnitDecoratedFormat("#,##0.0##", " " + p_unit.to_abbreviated_string())

    logger.info("Temperature:  %s", t_fmt(env.get_temperature(t_unit)))
    logger.info("Humidity:     %s", UnitDecoratedFormat("0.#", "%")(env.get_humidity_relative()))
    logger.info("Pressure:     %s", p_fmt(env.get_pressure(p_unit)))
    logger.info("Attenuation:  %s", env.is_air_attenuation_applied())

    for altitude in Altitude:
        logger.info("Altitude %-6s %s", altitude.to_canonical_string(), altitude.to_presentation_string(d_unit))

    return 0


if __name__ == "__main__":
    sys.exit(main())
