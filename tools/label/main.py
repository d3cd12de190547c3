"""
CLI tool to build GS1-128 element strings for product labels.

Usage:
    poetry run gs1-label --gtin 7501234567890 --lot LOT42 --expiration-date 2025-12-31
    poetry run gs1-label --template pharma --gtin 7501234567890 --lot L1 \
        --expiration-date 2026-03-31 --serial SN001 --format json
"""

import sys

import click
import structlog

from gs1_decoder.barcode import FNC1, GS1_TEMPLATES, generate_gs1_code, get_template
from gs1_decoder.config import get_settings
from gs1_decoder.log import configure_logging
from gs1_decoder.models import LabelParams

logger = structlog.get_logger(__name__)


@click.command()
@click.option("--gtin", "-g", default="", help="GTIN-8/12/13/14 of the product")
@click.option("--lot", "-l", default="", help="Batch or lot number (AI 10)")
@click.option("--serial", "-n", default="", help="Serial number (AI 21)")
@click.option("--expiration-date", "-e", default="", help="Expiration date YYYY-MM-DD (AI 17)")
@click.option("--production-date", "-d", default="", help="Production date YYYY-MM-DD (AI 11)")
@click.option("--count", "-c", default="", help="Count of contained items (AI 37)")
@click.option(
    "--template", "-t",
    type=click.Choice(list(GS1_TEMPLATES), case_sensitive=False),
    default=None,
    help="Label template (default: from GS1_LABEL_TEMPLATE)",
)
@click.option(
    "--verify-check-digit",
    is_flag=True,
    default=False,
    help="Reject GTINs with a wrong check digit (also enabled by GS1_VERIFY_CHECK_DIGIT)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def main(
    gtin: str,
    lot: str,
    serial: str,
    expiration_date: str,
    production_date: str,
    count: str,
    template: str | None,
    verify_check_digit: bool,
    output_format: str,
) -> None:
    """Generate a GS1-128 element string from product and traceability data."""
    settings = get_settings()
    configure_logging(settings)

    try:
        label_template = get_template(template or settings.label_template)
    except KeyError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        sys.exit(1)
    verify_check_digit = verify_check_digit or settings.verify_check_digit

    params = LabelParams(
        gtin=gtin,
        lot=lot,
        serial=serial,
        expiration_date=expiration_date,
        production_date=production_date,
        count=count,
    )
    result = generate_gs1_code(params, label_template, verify_check_digit)

    if not result.ok:
        for error in result.errors:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)

    logger.debug("Label code generated", template=label_template.key)

    if output_format == "json":
        click.echo(result.to_json())
    else:
        click.echo(f"Code: {result.code.replace(FNC1, settings.gs_placeholder)}")
        click.echo(f"Human readable: {result.human_readable}")


if __name__ == "__main__":
    main()
