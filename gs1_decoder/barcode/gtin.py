"""
GTIN normalization between scanned codes, GTIN-14 and EAN-13.
"""

import re

from gs1_decoder.barcode.parser import parse_gs1

GTIN_LENGTH = 14
EAN13_LENGTH = 13

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_gtin(code: str) -> str:
    """
    Normalize a code to GTIN-14.

    - Drops every non-digit character
    - Left-pads with zeros to 14 digits

    Longer digit strings are returned as-is, never truncated.
    """
    return _NON_DIGITS.sub("", code).rjust(GTIN_LENGTH, "0")


def gtin_to_ean13(gtin14: str) -> str:
    """
    Convert a GTIN-14 to EAN-13 by keeping the last 13 characters.

    The leading indicator digit is dropped whatever its value. Inputs shorter
    than 13 characters are returned unchanged.
    """
    if len(gtin14) < EAN13_LENGTH:
        return gtin14
    return gtin14[-EAN13_LENGTH:]


def to_product_code(lookup_code: str) -> str:
    """Shorten a zero-led 14-character lookup code to its EAN-13 form."""
    if len(lookup_code) == GTIN_LENGTH and lookup_code.startswith("0"):
        return lookup_code[1:]
    return lookup_code


def extract_product_code(code: str) -> str:
    """
    Get the product lookup key for a scanned string.

    GS1 scans give their decoded GTIN; anything else is used as scanned. A
    14-character code with a leading zero is shortened to its EAN-13 form.

    Args:
        code: Raw scanner string

    Returns:
        Code to search the product catalog with
    """
    return to_product_code(parse_gs1(code).lookup_code)
