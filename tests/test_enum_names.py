"""Test enum label normalization and enum constant naming."""

import pytest

from proto_oas_generator.naming.enums import enum_value_name, normalize_enum_name
from proto_oas_generator.utils.string_case import all_caps


class TestNormalizeEnumName:
    """Test class for enum label normalization."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Cats & Dogs", "Cats_AND_Dogs"),
            ("R&D", "R_AND_D"),
            ("in   stock", "in_stock"),
            ("foo__bar", "foo_bar"),
            ("N/A", "NA"),
            ("a - b", "a_b"),
            ("available", "available"),
        ],
    )
    def test_collapses_word_breaks(self, label: str, expected: str) -> None:
        """Test that whitespace and underscores collapse and punctuation drops."""
        assert normalize_enum_name(label) == expected

    def test_case_is_not_forced(self) -> None:
        """Test that normalization keeps case and composes with all_caps."""
        assert normalize_enum_name("Cats & Dogs") == "Cats_AND_Dogs"
        assert all_caps(normalize_enum_name("Cats & Dogs")) == "CATS_AND_DOGS"

    def test_leading_and_trailing_runs(self) -> None:
        """Test that only runs followed by an alphanumeric leave an underscore."""
        assert normalize_enum_name(" leading") == "_leading"
        assert normalize_enum_name("trailing ") == "trailing"
        assert normalize_enum_name("!bang") == "bang"

    @pytest.mark.parametrize("label", ["", "!!!", "   ", "é"])
    def test_degenerate_labels(self, label: str) -> None:
        """Test that labels without alphanumerics normalize to an empty name."""
        assert normalize_enum_name(label) == ""


class TestEnumValueName:
    """Test class for prefixed enum constants."""

    def test_prefixes_with_enum_name(self) -> None:
        """Test that constants are prefixed with the enum name."""
        assert enum_value_name("PetStatus", "in stock") == "PETSTATUS_IN_STOCK"
        assert enum_value_name("pet status", "Cats & Dogs") == "PET_STATUS_CATS_AND_DOGS"

    def test_numeric_labels(self) -> None:
        """Test that integer labels become legal identifiers."""
        assert enum_value_name("code", "200") == "CODE_200"

    def test_empty_label(self) -> None:
        """Test that labels with nothing usable get a placeholder value."""
        assert enum_value_name("Status", "!!!") == "STATUS_UNKNOWN"


class TestEnumWhitespace:
    """Test class for the white space rule in enum labels."""

    def test_no_break_space_is_a_word_break(self) -> None:
        """Test that a no-break space collapses like a plain space."""
        assert normalize_enum_name("in\u00a0stock") == "in_stock"

    def test_information_separator_is_dropped(self) -> None:
        """Test that U+001F is punctuation and is removed."""
        assert normalize_enum_name("a\x1fb") == "ab"
