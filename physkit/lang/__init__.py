"""Мелкие языковые утилиты."""

from __future__ import annotations

from .comparators import LongComparator

__all__ = ["LongComparator"]
