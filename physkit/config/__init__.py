"""Конфиги physkit.

Только data-only объекты (frozen dataclasses) с проверкой инвариантов в __post_init__.
"""

from __future__ import annotations

from .defaults import (  # noqa: F401
    DEFAULT_ALTITUDE_BANDS,
    DEFAULT_ENVIRONMENT,
    AltitudeBands,
    EnvironmentDefaults,
)

__all__ = [
    "AltitudeBands",
    "EnvironmentDefaults",
    "DEFAULT_ALTITUDE_BANDS",
    "DEFAULT_ENVIRONMENT",
]
