"""Пакет физики (высотные диапазоны, параметры окружающей среды)."""

from __future__ import annotations

from .altitude import Altitude
from .environment import NaturalEnvironment

__all__ = [
    "Altitude",
    "NaturalEnvironment",
]
