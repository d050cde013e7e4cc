"""Форматирование чисел с единицами и «уникализаторы» имён.

Поддерживается подмножество десятичных шаблонов:
    0 : обязательная цифра;
    # : необязательная цифра;
    , : группировка (только в целой части; размер группы задаёт последняя запятая);
    . : десятичный разделитель.

Локали не поддерживаются: разделители всегда "." и ",".
Знак минуса сохраняется, даже если значение округлилось до нуля.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from physkit.core.validation import ensure_non_negative

_NUMERIC_CHARS = frozenset("0#,.")

# три цифры: сортировка имён по номеру без разделителей групп
UNIQUEFIER_DIGITS: int = 3


def uniquefier_format(index: int, digits: int = UNIQUEFIER_DIGITS) -> str:
    """Суффикс для уникализации имени: 7 -> "_007", 1234 -> "_1234"."""

    ensure_non_negative(digits, "digits")
    n = int(index)
    sign = "-" if n < 0 else ""
    return f"{sign}_{abs(n):0{digits}d}"


@dataclass(frozen=True)
class _DecimalPattern:
    min_integer_digits: int
    min_fraction_digits: int
    max_fraction_digits: int
    grouping_size: int  # 0: без группировки

    @classmethod
    def parse(cls, pattern: str) -> "_DecimalPattern":
        # отрицательный под-шаблон ("...;-...") игнорируем
        positive = pattern.split(";", 1)[0]
        if not positive or any(ch not in _NUMERIC_CHARS for ch in positive):
            raise ValueError(f"Unsupported number pattern {pattern!r}")
        if positive.count(".") > 1:
            raise ValueError(f"Multiple decimal separators in pattern {pattern!r}")

        integer, _, fraction = positive.partition(".")
        if "," in fraction:
            raise ValueError(f"Grouping separator after decimal point in pattern {pattern!r}")
        if "0" in fraction and "#" in fraction and fraction.index("#") < fraction.rindex("0"):
            raise ValueError(f"Optional digit before required digit in pattern {pattern!r}")

        # размер группы = число цифр после последней запятой в целой части
        grouping_size = 0
        if "," in integer:
            grouping_size = len(integer) - integer.rindex(",") - 1
            if grouping_size == 0:
                raise ValueError(f"Empty grouping in pattern {pattern!r}")

        return cls(
            min_integer_digits=integer.count("0"),
            min_fraction_digits=fraction.count("0"),
            max_fraction_digits=len(fraction),
            grouping_size=grouping_size,
        )

    def _group(self, digits: str) -> str:
        size = self.grouping_size
        if size == 0 or len(digits) <= size:
            return digits
        head = len(digits) % size or size
        groups = [digits[:head]] + [digits[i:i + size] for i in range(head, len(digits), size)]
        return ",".join(groups)

    def format(self, value: float) -> str:
        x = float(value)
        text = f"{abs(x):.{self.max_fraction_digits}f}"

        integer, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0").ljust(self.min_fraction_digits, "0")

        integer = integer.zfill(self.min_integer_digits)
        if self.min_integer_digits == 0 and integer == "0" and fraction:
            integer = ""

        body = f"{self._group(integer)}.{fraction}" if fraction else (self._group(integer) or "0")
        # знак сохраняется и при округлении до нуля: -0.01 -> "-0.0"
        return f"-{body}" if x < 0 else body


@dataclass(frozen=True)
class UnitDecoratedFormat:
    """Десятичный формат с дописанной единицей: UnitDecoratedFormat("0.0", " m")(2.25) -> "2.2 m".

    Если unit пустой или из одних пробелов, единица не дописывается.
    """

    pattern: str
    unit: Optional[str] = None
    _decimal: _DecimalPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_decimal", _DecimalPattern.parse(self.pattern))

    @property
    def suffix(self) -> str:
        if self.unit is None or not self.unit.strip():
            return ""
        return self.unit

    def format(self, value: float) -> str:
        return self._decimal.format(value) + self.suffix

    __call__ = format
