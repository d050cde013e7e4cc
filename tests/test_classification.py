import pytest

from physkit.security.classification import ClassificationLevel


def test_str_uses_space() -> None:
    text = str(ClassificationLevel.TOP_SECRET)
    assert text == "TOP SECRET"
    assert "_" not in text


def test_canonical_string_uses_space() -> None:
    assert ClassificationLevel.TOP_SECRET.to_canonical_string() == "top secret"


@pytest.mark.parametrize("text", ["top secret", "top_secret", "TOP SECRET", "Top_Secret"])
def test_abbreviated_accepts_space_or_underscore(text: str) -> None:
    assert ClassificationLevel.abbreviated_value_of(text) is ClassificationLevel.TOP_SECRET


def test_canonical_accepts_underscore() -> None:
    assert ClassificationLevel.canonical_value_of("TOP_SECRET") is ClassificationLevel.TOP_SECRET


def test_abbreviated_unknown_defaults_to_unclassified() -> None:
    assert ClassificationLevel.abbreviated_value_of("cosmic") is ClassificationLevel.UNCLASSIFIED


@pytest.mark.parametrize(
    "level,expected",
    [
        (ClassificationLevel.UNCLASSIFIED, "Unclassified"),
        (ClassificationLevel.CONFIDENTIAL, "Confidential"),
        (ClassificationLevel.SECRET, "Secret"),
        (ClassificationLevel.TOP_SECRET, "Top Secret"),
    ],
)
def test_presentation(level: ClassificationLevel, expected: str) -> None:
    assert level.to_presentation_string() == expected


def test_abbreviated_string() -> None:
    assert ClassificationLevel.SECRET.to_abbreviated_string() == "secret"
    assert ClassificationLevel.TOP_SECRET.to_abbreviated_string() == "top secret"
