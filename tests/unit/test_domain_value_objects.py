"""Tests for domain value objects (IdentificationNumber, RecordName) and EntitableType."""

import dataclasses

import pytest

from registry.domain.enums import EntitableType
from registry.domain.value_objects.core import IdentificationNumber, RecordName


class TestIdentificationNumber:
    """IdentificationNumber: stripped, 1-32 chars, letters/digits/inner hyphens."""

    def test_valid_numbers(self) -> None:
        assert IdentificationNumber("4WA3X6E21T").value == "4WA3X6E21T"
        assert IdentificationNumber("123-456-789").value == "123-456-789"
        IdentificationNumber("a" * 32)

    def test_whitespace_stripped_and_case_preserved(self) -> None:
        assert IdentificationNumber("  4wa3X6e21t \n").value == "4wa3X6e21t"

    def test_str_returns_value(self) -> None:
        assert str(IdentificationNumber("4WA3X6E21T")) == "4WA3X6E21T"

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            IdentificationNumber("")
        with pytest.raises(ValueError, match="non-empty"):
            IdentificationNumber("   ")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="32"):
            IdentificationNumber("a" * 33)

    def test_invalid_characters_rejected(self) -> None:
        with pytest.raises(ValueError, match="letters, digits"):
            IdentificationNumber("4WA 3X6")
        with pytest.raises(ValueError, match="letters, digits"):
            IdentificationNumber("-4WA3X6")
        with pytest.raises(ValueError, match="letters, digits"):
            IdentificationNumber("4WA_3X6")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="string"):
            IdentificationNumber(12345)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        number = IdentificationNumber("4WA3X6E21T")
        with pytest.raises(dataclasses.FrozenInstanceError):
            number.value = "OTHER"  # type: ignore[misc]


class TestRecordName:
    def test_stripped(self) -> None:
        assert RecordName("  Acme Ltd ").value == "Acme Ltd"

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            RecordName(" ")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="255"):
            RecordName("x" * 256)


class TestEntitableType:
    def test_values(self) -> None:
        assert EntitableType.values() == ["business", "person"]

    def test_lookup_by_value(self) -> None:
        assert EntitableType("person") is EntitableType.PERSON
        with pytest.raises(ValueError):
            EntitableType("company")
