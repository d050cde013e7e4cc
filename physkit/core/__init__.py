"""Core utilities: units, conversion, enums, validation."""

from __future__ import annotations

__all__ = [
    "units",
    "conversion",
    "enums",
    "validation",
]
