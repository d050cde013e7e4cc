"""Уровень секретности (гриф).

Внешний текстовый формат исторически записывает многословные уровни через пробел
("TOP SECRET"), поэтому везде, где уровень превращается в строку, "_" заменяется на " ".
Парсер принимает оба варианта.
"""

from __future__ import annotations

from typing import Dict, Optional

from physkit.core.enums import EnumeratedUnit


class ClassificationLevel(EnumeratedUnit):
    UNCLASSIFIED = "unclassified"
    CONFIDENTIAL = "confidential"
    SECRET = "secret"
    TOP_SECRET = "top secret"

    @classmethod
    def default_value(cls) -> "ClassificationLevel":
        return cls.UNCLASSIFIED

    @classmethod
    def _normalize_canonical(cls, text: str) -> str:
        return text.lower().replace("_", " ")

    @classmethod
    def abbreviated_value_of(cls, text: Optional[str]) -> "ClassificationLevel":
        return cls._lookup_abbreviated(text, _BY_ABBREVIATION)

    def to_abbreviated_string(self) -> str:
        try:
            return _ABBREVIATIONS[self]
        except KeyError:
            raise self.unexpected() from None

    def to_presentation_string(self) -> str:
        return " ".join(word.capitalize() for word in self.to_abbreviated_string().split(" "))

    def __str__(self) -> str:
        return self.name.replace("_", " ")


_ABBREVIATIONS: Dict[ClassificationLevel, str] = {
    ClassificationLevel.UNCLASSIFIED: "unclassified",
    ClassificationLevel.CONFIDENTIAL: "confidential",
    ClassificationLevel.SECRET: "secret",
    ClassificationLevel.TOP_SECRET: "top secret",
}

_BY_ABBREVIATION: Dict[str, ClassificationLevel] = {
    **{v: k for k, v in _ABBREVIATIONS.items()},
    "top_secret": ClassificationLevel.TOP_SECRET,
}
