"""Unit tests for normalizers.py."""

import pytest

from amexynab.normalizers import (
    clean_amount,
    compose_location,
    compose_memo,
    invert_amount,
    normalize_date,
)


class TestNormalizeDate:
    """Tests for normalize_date function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("31-12-2023", "2023-12-31"),
            ("31/12/2023", "2023-12-31"),
            ("2023-12-31", "2023-12-31"),
            ("12/31/2023", "2023-12-31"),
            ("December 31, 2023", "2023-12-31"),
            ("31 December 2023", "2023-12-31"),
            ("05-03-2024", "2024-03-05"),
            ("March 5, 2024", "2024-03-05"),
            ("5 March 2024", "2024-03-05"),
        ],
    )
    def test_known_formats(self, value, expected):
        """Test that every supported format becomes YYYY-MM-DD."""
        result = normalize_date(value)
        assert result.text == expected
        assert result.parsed is True

    def test_ambiguous_date_is_day_first(self):
        """Test that 01/02/2024 is read as 1 February."""
        assert normalize_date("01/02/2024").text == "2024-02-01"

    def test_canonical_date_unchanged(self):
        """Test that an already canonical date stays the same."""
        assert normalize_date("2024-02-29").text == "2024-02-29"

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-date",
            "",
            "31-02-2024",
            "2024/12/31 10:00",
            "1-2-2024",
            " 1-02-2024",
            "31-12-23",
            "2024-1-05",
        ],
    )
    def test_unparseable_kept(self, value):
        """Test that unparseable dates keep their original text."""
        result = normalize_date(value)
        assert result.text == value
        assert result.parsed is False


class TestCleanAmount:
    """Tests for clean_amount function."""

    def test_decimal_comma(self):
        """Test that a single comma becomes the decimal point."""
        assert clean_amount("12,34") == "12.34"

    def test_thousands_period(self):
        """Test that a period next to a decimal comma is dropped."""
        assert clean_amount("1.234,56") == "1234.56"

    def test_currency_noise(self):
        """Test that currency symbols and spaces are removed."""
        assert clean_amount("€ -5,00 EUR") == "-5.00"

    def test_period_only(self):
        """Test that a plain decimal period is kept."""
        assert clean_amount("12.34") == "12.34"

    def test_several_commas_left_alone(self):
        """Test that several commas are not treated as a decimal mark."""
        assert clean_amount("1,234,567") == "1,234,567"


class TestInvertAmount:
    """Tests for invert_amount function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("-12,34", "12.34"),
            ("1.234,56", "-1234.56"),
            ("€ 5,00", "-5.00"),
            ("12.5", "-12.50"),
            ("-0,10", "0.10"),
            ("42", "-42.00"),
        ],
    )
    def test_inverts_and_formats(self, value, expected):
        """Test sign inversion with two decimals."""
        result = invert_amount(value)
        assert result.text == expected
        assert result.parsed is True

    def test_zero_keeps_sign_of_negation(self):
        """Test that zero amounts keep the sign produced by negation."""
        assert invert_amount("0,00").text == "-0.00"
        assert invert_amount("0,001").text == "-0.00"
        assert invert_amount("-0,00").text == "0.00"

    def test_overflow_kept(self):
        """Test that an amount too large for a float keeps its original text."""
        value = "9" * 400
        result = invert_amount(value)
        assert result.text == value
        assert result.parsed is False

    @pytest.mark.parametrize("value", ["N/A", "", "1,234,567.89", "1-2", "€"])
    def test_unparseable_kept(self, value):
        """Test that unparseable amounts keep their original text."""
        result = invert_amount(value)
        assert result.text == value
        assert result.parsed is False


class TestComposeLocation:
    """Tests for compose_location function."""

    def test_all_parts(self):
        """Test joining city, postcode and country."""
        assert compose_location("Amsterdam", "1000AA", "NL") == "Amsterdam, 1000AA, NL"

    def test_skips_empty_parts(self):
        """Test that empty parts leave no stray separators."""
        assert compose_location("", "1000AA", "") == "1000AA"
        assert compose_location("Amsterdam", "", "NL") == "Amsterdam, NL"

    def test_all_empty(self):
        """Test that no parts give an empty location."""
        assert compose_location("", "", "") == ""


class TestComposeMemo:
    """Tests for compose_memo function."""

    def test_all_parts(self):
        """Test memo with memo, reference and location."""
        location = compose_location("Amsterdam", "1000AA", "")
        assert compose_memo("Coffee", "REF1", location) == (
            "Coffee | Ref: REF1 | Location: Amsterdam, 1000AA"
        )

    def test_reference_only(self):
        """Test that a lone reference has no leading separator."""
        assert compose_memo("", "REF1", "") == "Ref: REF1"

    def test_memo_and_location(self):
        """Test memo and location without reference."""
        assert compose_memo("Lunch", "", "Utrecht") == "Lunch | Location: Utrecht"

    def test_all_empty(self):
        """Test that empty fields give an empty memo."""
        assert compose_memo("", "", "") == ""

    def test_cells_kept_verbatim(self):
        """Test that cell text is not trimmed."""
        assert compose_memo(" Koffie ", "", "") == " Koffie "
