import math

import pytest

from physkit.core.validation import ensure_finite, ensure_in_range, ensure_non_negative, ensure_positive


def test_ensure_positive_ok():
    ensure_positive(1.0, "x")


def test_ensure_positive_raises():
    with pytest.raises(ValueError):
        ensure_positive(0.0, "x")


def test_ensure_non_negative_allows_zero():
    ensure_non_negative(0.0, "x")


def test_ensure_non_negative_raises():
    with pytest.raises(ValueError, match="digits must be >= 0"):
        ensure_non_negative(-1, "digits")


def test_ensure_in_range_message_names_field():
    with pytest.raises(ValueError, match="humidity"):
        ensure_in_range(101.0, 0.0, 100.0, "humidity")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_ensure_finite_raises(value: float):
    with pytest.raises(ValueError):
        ensure_finite(value, "x")
