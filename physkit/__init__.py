"""physkit package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов подпакетов.

Импортируй нужное напрямую:
- from physkit.physics.environment import NaturalEnvironment
- from physkit.measures import TemperatureUnit, PressureUnit
- from physkit.security.classification import ClassificationLevel
"""

from __future__ import annotations

__all__: list[str] = []
