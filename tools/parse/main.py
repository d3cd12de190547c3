"""
CLI tool to decode scanned GS1-128 barcodes.

Terminals cannot type FNC1, so the configured placeholder (default "<GS>")
is replaced with ASCII 29 before decoding.

Usage:
    poetry run gs1-parse "010001234567890517251231<GS>10LOT42"
    poetry run gs1-parse --format table "]C1010001234567890517251231"
    poetry run gs1-parse --product-code 7501234567890
    poetry run gs1-parse --file scans.txt
"""

import json
import sys
from typing import Any, TextIO

import click
import structlog

from gs1_decoder.barcode import (
    FNC1,
    extract_product_code,
    parse_gs1,
    to_human_readable,
    to_product_code,
)
from gs1_decoder.barcode.dictionary import FIELD_DEFINITIONS
from gs1_decoder.config import get_settings
from gs1_decoder.log import configure_logging
from gs1_decoder.models import ParsedBarcode

logger = structlog.get_logger(__name__)


def read_scans(stream: TextIO) -> list[str]:
    """Read one scan per line, skipping blank lines."""
    scans = []
    for line in stream:
        # Only trim line endings and spaces: str.strip() would also drop FNC1
        scan = line.strip(" \t\r\n")
        if scan:
            scans.append(scan)
    return scans


def build_record(parsed: ParsedBarcode) -> dict[str, Any]:
    """Build the JSON record for one scan."""
    record = parsed.to_dict()
    record["productCode"] = to_product_code(parsed.lookup_code)
    record["humanReadable"] = to_human_readable(parsed)
    return record


def format_table(parsed: ParsedBarcode, placeholder: str) -> str:
    """Format a parsed barcode as an aligned two-column table."""
    lines = [
        f"Scan: {parsed.raw.replace(FNC1, placeholder)}",
        "-" * 60,
        f"{'GS1':<28} {'yes' if parsed.is_gs1 else 'no'}",
    ]
    if parsed.symbology:
        lines.append(f"{'Symbology':<28} {parsed.symbology}")

    for field, value in parsed.fields().items():
        definition = FIELD_DEFINITIONS[field]
        ai, _ = definition.split_element(value)
        label = f"({ai}) {definition.title}"
        lines.append(f"{label:<28} {value}")
        formatted = parsed.get_formatted(field)
        if formatted:
            lines.append(f"{label + ' ISO':<28} {formatted}")

    lines.append(f"{'Product code':<28} {to_product_code(parsed.lookup_code)}")
    lines.append("-" * 60)
    return "\n".join(lines)


@click.command()
@click.argument("codes", nargs=-1)
@click.option(
    "--file", "-i",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read scans from a file, one per line ('-' for stdin)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["json", "table"]),
    default=None,
    help="Output format (default: from GS1_OUTPUT_FORMAT)",
)
@click.option(
    "--product-code", "-p",
    is_flag=True,
    default=False,
    help="Print only the product lookup code for each scan",
)
@click.option(
    "--separator", "-s",
    default=None,
    help="Placeholder to replace with FNC1 (default: from GS1_GS_PLACEHOLDER)",
)
def main(
    codes: tuple[str, ...],
    input_file: TextIO | None,
    output_format: str | None,
    product_code: bool,
    separator: str | None,
) -> None:
    """Decode GS1-128 barcode scans into lot, serial, dates and product code."""
    settings = get_settings()
    configure_logging(settings)

    placeholder = separator or settings.gs_placeholder
    output_format = output_format or settings.output_format

    scans = list(codes)
    if input_file is not None:
        scans.extend(read_scans(input_file))
    elif not scans:
        scans = read_scans(click.get_text_stream("stdin"))

    if not scans:
        click.echo("No barcodes to parse", err=True)
        sys.exit(1)

    scans = [scan.replace(placeholder, FNC1) for scan in scans]
    logger.debug("Parsing scans", count=len(scans))

    if product_code:
        for scan in scans:
            click.echo(extract_product_code(scan))
        return

    results = [parse_gs1(scan) for scan in scans]

    if output_format == "table":
        click.echo("\n\n".join(format_table(parsed, placeholder) for parsed in results))
        return

    records = [build_record(parsed) for parsed in results]
    payload = records[0] if len(records) == 1 else records
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
