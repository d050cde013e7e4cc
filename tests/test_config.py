import pytest

from physkit.config import DEFAULT_ALTITUDE_BANDS, DEFAULT_ENVIRONMENT, AltitudeBands, EnvironmentDefaults


def test_default_environment() -> None:
    assert DEFAULT_ENVIRONMENT.temperature_k == pytest.approx(293.15)
    assert DEFAULT_ENVIRONMENT.humidity_relative == pytest.approx(50.0)
    assert DEFAULT_ENVIRONMENT.pressure_pa == pytest.approx(101325.0)
    assert DEFAULT_ENVIRONMENT.air_attenuation_applied is True


def test_default_altitude_bands() -> None:
    assert DEFAULT_ALTITUDE_BANDS.low_m == pytest.approx(1000.0)
    assert DEFAULT_ALTITUDE_BANDS.high_m == pytest.approx(5000.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature_k": 0.0},
        {"temperature_k": float("nan")},
        {"humidity_relative": -1.0},
        {"humidity_relative": 100.5},
        {"pressure_pa": 0.0},
    ],
)
def test_environment_invariants(kwargs) -> None:
    with pytest.raises(ValueError):
        EnvironmentDefaults(**kwargs)


@pytest.mark.parametrize("low_m,high_m", [(0.0, 10.0), (10.0, 10.0), (20.0, 10.0)])
def test_altitude_band_invariants(low_m: float, high_m: float) -> None:
    with pytest.raises(ValueError):
        AltitudeBands(low_m=low_m, high_m=high_m)


def test_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_ENVIRONMENT.pressure_pa = 1.0  # type: ignore[misc]
