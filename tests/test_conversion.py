import numpy as np
import pytest

from physkit.core import conversion
from physkit.core.units import ATMOSPHERE, ZERO_CELSIUS_K
from physkit.measures.distance import DistanceUnit


class TestTemperature:
    def test_celsius_kelvin(self) -> None:
        assert conversion.celsius_to_kelvin(0.0) == pytest.approx(ZERO_CELSIUS_K)
        assert conversion.kelvin_to_celsius(373.15) == pytest.approx(100.0)

    def test_fahrenheit_kelvin(self) -> None:
        assert conversion.fahrenheit_to_kelvin(32.0) == pytest.approx(273.15)
        assert conversion.fahrenheit_to_kelvin(212.0) == pytest.approx(373.15)
        assert conversion.kelvin_to_fahrenheit(233.15) == pytest.approx(-40.0)

    def test_scalar_returns_float(self) -> None:
        assert isinstance(conversion.kelvin_to_celsius(300), float)

    def test_array_in_array_out(self) -> None:
        out = conversion.celsius_to_kelvin([0.0, 100.0])
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, [273.15, 373.15])


class TestPressure:
    def test_atmospheres(self) -> None:
        assert conversion.pascals_to_atmospheres(ATMOSPHERE) == pytest.approx(1.0)
        assert conversion.atmospheres_to_pascals(2.0) == pytest.approx(202650.0)

    def test_kilopascals_and_millibars(self) -> None:
        assert conversion.pascals_to_kilopascals(101325.0) == pytest.approx(101.325)
        assert conversion.pascals_to_millibars(101325.0) == pytest.approx(1013.25)
        assert conversion.kilopascals_to_pascals(1.5) == pytest.approx(1500.0)
        assert conversion.millibars_to_pascals(1013.25) == pytest.approx(101325.0)


class TestAngle:
    def test_degrees_radians(self) -> None:
        assert conversion.degrees_to_radians(180.0) == pytest.approx(np.pi)
        assert conversion.radians_to_degrees(np.pi / 2) == pytest.approx(90.0)


class TestDistance:
    def test_same_unit_is_identity(self) -> None:
        assert conversion.convert_distance(12.5, DistanceUnit.FEET, DistanceUnit.FEET) == 12.5

    def test_meters_to_feet(self) -> None:
        assert conversion.convert_distance(0.3048, DistanceUnit.METERS, DistanceUnit.FEET) == pytest.approx(1.0)

    def test_miles_to_kilometers(self) -> None:
        assert conversion.convert_distance(1.0, DistanceUnit.MILES, DistanceUnit.KILOMETERS) == pytest.approx(1.609344)

    def test_unknown_unit_raises(self) -> None:
        with pytest.raises(ValueError, match="Unexpected DistanceUnit"):
            conversion.convert_distance(1.0, "meters", DistanceUnit.FEET)  # type: ignore[arg-type]
