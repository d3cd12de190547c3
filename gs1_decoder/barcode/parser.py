"""
GS1-128 barcode parsing.
"""

import structlog

from gs1_decoder.barcode.detector import is_gs1
from gs1_decoder.barcode.fields import decode_fields
from gs1_decoder.barcode.symbology import strip_symbology
from gs1_decoder.barcode.tokenizer import tokenize
from gs1_decoder.models.barcode import ParsedBarcode

logger = structlog.get_logger(__name__)


def parse_gs1(code: str) -> ParsedBarcode:
    """
    Decode a scanned string into a parsed barcode record.

    Strings that are not routed as GS1 come back with ``is_gs1=False`` and
    the scan itself in ``gtin``. Malformed input never raises; unknown
    identifiers and bad dates only leave fields absent.

    Args:
        code: Raw scanner string, including any symbology prefix

    Returns:
        Immutable parsed record

    Examples:
        >>> parse_gs1("01000123456789051725123110LOT42").lot
        'LOT42'
    """
    payload, symbology = strip_symbology(code)

    if not is_gs1(code):
        return ParsedBarcode(is_gs1=False, raw=code, gtin=payload or None)

    values = tokenize(payload)
    decoded = decode_fields(values)

    logger.debug(
        "Parsed GS1 barcode",
        symbology=symbology,
        fields=[field.value for field in values],
    )

    return ParsedBarcode(
        is_gs1=True,
        raw=code,
        symbology=symbology,
        **{field.value: value for field, value in values.items()},
        **decoded,
    )
