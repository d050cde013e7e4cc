"""Компаратор целых чисел для API в стиле cmp (functools.cmp_to_key)."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable


class LongComparator:
    """Без состояния: любые два экземпляра эквивалентны."""

    def compare(self, a: int, b: int) -> int:
        """-1, если a < b; 0, если равны; 1, если a > b."""

        return (a > b) - (a < b)

    __call__ = compare

    def key(self) -> Callable[[Any], Any]:
        return cmp_to_key(self.compare)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LongComparator)

    def __hash__(self) -> int:
        return hash(LongComparator)

    def __repr__(self) -> str:
        return "LongComparator()"
