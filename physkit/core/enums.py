"""physkit.core.enums

Общий шаблон для перечислимых единиц (angle/distance/pressure/...).

Соглашения:
- value каждого члена: каноническая строка (lowercase), она же формат сериализации;
- парсинг всегда регистронезависимый, пробелы НЕ обрезаются;
- None на входе канонического парсера -> default_value(), а не ошибка;
- abbreviated_value_of «прощающий»: нераспознанный ввод -> default_value().
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Type, TypeVar

E = TypeVar("E", bound="EnumeratedUnit")


class EnumeratedUnit(Enum):
    """Базовый класс без членов; конкретные типы наследуют и задают члены."""

    @classmethod
    def default_value(cls: Type[E]) -> E:
        raise NotImplementedError(f"{cls.__name__} must define default_value()")

    @classmethod
    def _normalize_canonical(cls, text: str) -> str:
        return text.lower()

    @classmethod
    def canonical_value_of(cls: Type[E], text: Optional[str]) -> E:
        """Разбор канонической строки.

        None -> default_value(); нераспознанная строка -> ValueError.
        """

        if text is None:
            return cls.default_value()

        token = cls._normalize_canonical(text)
        for member in cls:
            if member.value == token:
                return member
        raise ValueError(f"Unexpected {cls.__name__} {text!r}")

    @classmethod
    def _lookup_abbreviated(cls: Type[E], text: Optional[str], table: Mapping[str, E]) -> E:
        # table: lowercase abbreviated token -> member
        if text is None:
            return cls.default_value()
        return table.get(text.lower(), cls.default_value())

    def unexpected(self) -> ValueError:
        return ValueError(f"Unexpected {type(self).__name__} {self.name}")

    def to_canonical_string(self) -> str:
        return str(self.value)
