"""
Symbology identifier handling.

Scanners configured to transmit AIM symbology identifiers (ISO/IEC 15424)
prepend a three-character marker that names the barcode type. The marker is
not part of the GS1 data.
"""

from types import MappingProxyType

SYMBOLOGY_MARKERS: MappingProxyType[str, str] = MappingProxyType(
    {
        "]C1": "GS1-128",
        "]e0": "GS1 DataBar",
        "]d2": "GS1 DataMatrix",
        "]Q3": "GS1 QR Code",
    }
)


def find_symbology_marker(code: str) -> str | None:
    """Get the marker the code starts with, if any."""
    for marker in SYMBOLOGY_MARKERS:
        if code.startswith(marker):
            return marker
    return None


def strip_symbology(code: str) -> tuple[str, str | None]:
    """
    Remove a leading symbology marker.

    Args:
        code: Raw scanner string

    Returns:
        Tuple of (payload, symbology_name). The payload is the input minus
        exactly the marker, or the input unchanged when no marker is present.
    """
    marker = find_symbology_marker(code)
    if marker is None:
        return code, None
    return code[len(marker):], SYMBOLOGY_MARKERS[marker]
