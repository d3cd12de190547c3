"""
GTIN check digit utilities.

Optional: the decoder and the GTIN normalizer never call these. Label
generation uses them only when asked to verify the GTIN.
"""

# GTIN-8, GTIN-12 (UPC-A), GTIN-13 (EAN-13) and GTIN-14
GTIN_LENGTHS = (8, 12, 13, 14)


def calculate_gtin_check_digit(body: str) -> int:
    """
    Calculate the GS1 modulo-10 check digit.

    Algorithm:
    1. Starting from the rightmost digit of the body, weight digits 3, 1, 3, ...
    2. Sum all results
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        body: GTIN digits without the check digit

    Raises:
        ValueError: If the body is empty or contains non-digit characters
    """
    if not body:
        raise ValueError("Code body must not be empty")

    total = 0
    for i, digit in enumerate(reversed(body)):
        if not ("0" <= digit <= "9"):
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def validate_gtin_check_digit(code: str) -> bool:
    """
    Validate the check digit of a GTIN.

    Args:
        code: 8, 12, 13 or 14 digit GTIN

    Returns:
        True if checksum is valid
    """
    if len(code) not in GTIN_LENGTHS:
        return False
    if not code.isascii() or not code.isdigit():
        return False

    expected_checksum = calculate_gtin_check_digit(code[:-1])
    actual_checksum = int(code[-1])

    return expected_checksum == actual_checksum
