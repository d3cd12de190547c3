"""
GS1 payload detection.
"""

from gs1_decoder.barcode.dictionary import AI_CODE_LENGTHS, AI_DICTIONARY
from gs1_decoder.barcode.symbology import find_symbology_marker

# Shortest payload routed as GS1 without a symbology marker: AI 01 + GTIN-14
MIN_GS1_LENGTH = 16


def is_gs1(code: str) -> bool:
    """
    Check whether a scanned string should be decoded as GS1.

    This is a routing heuristic, not validation:
    1. A recognized symbology marker means GS1.
    2. Strings shorter than ``MIN_GS1_LENGTH`` are plain product codes.
    3. Otherwise the string must start with a known Application Identifier.

    Args:
        code: Raw scanner string

    Returns:
        True if the string should go through the tokenizer
    """
    if find_symbology_marker(code) is not None:
        return True

    if len(code) < MIN_GS1_LENGTH:
        return False

    return any(code[:size] in AI_DICTIONARY for size in AI_CODE_LENGTHS)
