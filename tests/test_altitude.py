import pytest

from physkit.config import AltitudeBands
from physkit.measures.distance import DistanceUnit
from physkit.physics.altitude import Altitude


def test_default_is_low() -> None:
    assert Altitude.default_value() is Altitude.LOW
    assert Altitude.canonical_value_of(None) is Altitude.LOW


@pytest.mark.parametrize(
    "altitude,expected",
    [
        (Altitude.LOW, "Below 1000 meters"),
        (Altitude.MEDIUM, "Between 1000 and 5000 meters"),
        (Altitude.HIGH, "Above 5000 meters"),
    ],
)
def test_presentation_in_meters(altitude: Altitude, expected: str) -> None:
    assert altitude.to_presentation_string(DistanceUnit.METERS) == expected


def test_presentation_in_feet_rounds() -> None:
    # 1000 m = 3280.84 ft, 5000 m = 16404.2 ft
    assert Altitude.MEDIUM.to_presentation_string(DistanceUnit.FEET) == "Between 3281 and 16404 feet"


def test_presentation_in_kilometers() -> None:
    assert Altitude.HIGH.to_presentation_string(DistanceUnit.KILOMETERS) == "Above 5 kilometers"


def test_presentation_with_custom_bands() -> None:
    bands = AltitudeBands(low_m=500.0, high_m=2500.0)
    assert Altitude.MEDIUM.to_presentation_string(DistanceUnit.METERS, bands) == "Between 500 and 2500 meters"


def test_rounding_is_half_up() -> None:
    bands = AltitudeBands(low_m=1.5, high_m=2.5)
    assert Altitude.MEDIUM.to_presentation_string(DistanceUnit.METERS, bands) == "Between 2 and 3 meters"
