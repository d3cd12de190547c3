"""
Tests for GTIN check digit functions.
"""

import pytest

from gs1_decoder.barcode.check_digit import (
    calculate_gtin_check_digit,
    validate_gtin_check_digit,
)


class TestCalculateCheckDigit:
    """Tests for modulo-10 check digit calculation."""

    def test_calculate_ean13_check_digit(self):
        """Test checksum calculation for known EAN-13 codes."""
        # 4006381333931 - known valid EAN-13
        assert calculate_gtin_check_digit("400638133393") == 1

        # 5901234123457 - known valid EAN-13
        assert calculate_gtin_check_digit("590123412345") == 7

        # 7501234567893 - the 750 prefix used across these tests
        assert calculate_gtin_check_digit("750123456789") == 3

    def test_calculate_ean8_check_digit(self):
        """Test checksum calculation for known EAN-8 codes."""
        assert calculate_gtin_check_digit("9638507") == 4
        assert calculate_gtin_check_digit("5512345") == 7

    def test_leading_zeros_do_not_change_digit(self):
        """Test that GTIN-14 padding keeps the EAN-13 check digit."""
        assert calculate_gtin_check_digit("0001234567890") == calculate_gtin_check_digit(
            "001234567890"
        )

    def test_invalid_body(self):
        """Test rejection of empty and non-numeric bodies."""
        with pytest.raises(ValueError):
            calculate_gtin_check_digit("")

        with pytest.raises(ValueError):
            calculate_gtin_check_digit("40063813339A")


class TestValidateCheckDigit:
    """Tests for GTIN validation."""

    def test_validate_valid(self):
        """Test validation of valid GTINs of every length."""
        valid_codes = [
            "96385074",  # GTIN-8
            "036000291452",  # GTIN-12 / UPC-A
            "012345678905",  # GTIN-12 / UPC-A
            "4006381333931",  # GTIN-13
            "9780201379624",  # ISBN
            "00012345678905",  # GTIN-14
            "07501234567893",  # GTIN-14
        ]
        for code in valid_codes:
            assert validate_gtin_check_digit(code), f"Expected {code} to be valid"

    def test_validate_invalid(self):
        """Test validation of invalid GTINs."""
        invalid_codes = [
            "4006381333932",  # Wrong checksum
            "7501234567890",  # Wrong checksum
            "96385075",  # Wrong checksum
            "40063813339",  # Unsupported length
            "123456789012345",  # Too long
            "400638133393A",  # Non-numeric
            "",
        ]
        for code in invalid_codes:
            assert not validate_gtin_check_digit(code), f"Expected {code} to be invalid"
