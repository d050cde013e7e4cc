"""Форматирование чисел для отображения."""

from __future__ import annotations

from .number_format import UnitDecoratedFormat, uniquefier_format

__all__ = [
    "UnitDecoratedFormat",
    "uniquefier_format",
]
