"""
Conversion of raw GS1 values into normalized representations.
"""

from calendar import monthrange

from gs1_decoder.models.fields import DATE_FIELDS, FieldName, formatted_field

# Two-digit years below the pivot are 20YY, the rest 19YY
CENTURY_PIVOT = 50


def expand_year(yy: int) -> int:
    """Expand a two-digit year to four digits."""
    return 2000 + yy if yy < CENTURY_PIVOT else 1900 + yy


def format_gs1_date(raw: str | None) -> str | None:
    """
    Format a GS1 ``YYMMDD`` date as ``YYYY-MM-DD``.

    Day ``00`` is rejected like any other day outside the month.

    Args:
        raw: Raw captured value

    Returns:
        ISO date string, or None if the value is absent or malformed
    """
    if raw is None or len(raw) != 6 or not raw.isascii() or not raw.isdigit():
        return None

    year = expand_year(int(raw[0:2]))
    month = int(raw[2:4])
    day = int(raw[4:6])

    if month < 1 or month > 12:
        return None

    if day < 1 or day > monthrange(year, month)[1]:
        return None

    return f"{year:04d}-{month:02d}-{day:02d}"


def decode_fields(values: dict[FieldName, str]) -> dict[str, str]:
    """
    Build the derived values for a set of raw fields.

    Only the date fields have a derived form; weights and counts stay raw.

    Returns:
        Mapping of ``<field>_formatted`` attribute name to ISO date
    """
    decoded: dict[str, str] = {}
    for field in DATE_FIELDS:
        formatted = format_gs1_date(values.get(field))
        if formatted is not None:
            decoded[formatted_field(field)] = formatted
    return decoded
