"""Уровни секретности."""

from __future__ import annotations

from .classification import ClassificationLevel

__all__ = ["ClassificationLevel"]
