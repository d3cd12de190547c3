"""
Tests for the command-line tools.
"""

import json

import pytest
import structlog
from click.testing import CliRunner

from gs1_decoder.barcode import parse_gs1
from gs1_decoder.config import get_settings
from tools.label.main import main as label_main
from tools.parse.main import build_record
from tools.parse.main import main as parse_main

COMPOSED = "0100012345678905" + "17251231" + "<GS>10LOT42" + "<GS>21SN001"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in (
        "GS1_OUTPUT_FORMAT",
        "GS1_GS_PLACEHOLDER",
        "GS1_LABEL_TEMPLATE",
        "GS1_LOG_LEVEL",
        "GS1_VERIFY_CHECK_DIGIT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def runner():
    return CliRunner()


class TestParseCommand:
    """Tests for the gs1-parse tool."""

    def test_parse_json(self, runner):
        """Test JSON output for a single scan."""
        result = runner.invoke(parse_main, [COMPOSED])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["isGs1"] is True
        assert data["gtin"] == "00012345678905"
        assert data["lot"] == "LOT42"
        assert data["serial"] == "SN001"
        assert data["expirationDateFormatted"] == "2025-12-31"
        assert data["productCode"] == "0012345678905"
        assert data["humanReadable"] == "(01)00012345678905(10)LOT42(17)251231(21)SN001"

    def test_parse_multiple(self, runner):
        """Test a JSON list for several scans."""
        result = runner.invoke(parse_main, [COMPOSED, "7501234567890"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["isGs1"] for item in data] == [True, False]
        assert data[1]["productCode"] == "7501234567890"

    def test_parse_table(self, runner):
        """Test table output."""
        result = runner.invoke(parse_main, ["--format", "table", COMPOSED])

        assert result.exit_code == 0
        assert "LOT42" in result.output
        assert "2025-12-31" in result.output
        assert "Scan: " + COMPOSED in result.output
        assert "(10) BATCH/LOT" in result.output
        assert "(17) USE BY ISO" in result.output
        assert "Product code" in result.output
        assert "0012345678905" in result.output

    def test_build_record_reuses_parsed_scan(self):
        """Test the JSON record built from an already parsed scan."""
        parsed = parse_gs1("0100012345678905" + "10LOT42")

        record = build_record(parsed)

        assert record["productCode"] == "0012345678905"
        assert record["humanReadable"] == "(01)00012345678905(10)LOT42"
        assert record["lot"] == "LOT42"

    def test_table_weight_label(self, runner):
        """Test the printed four-digit AI for a weight field."""
        result = runner.invoke(parse_main, ["-f", "table", "0100012345678905" + "3103001250"])

        assert result.exit_code == 0
        assert "(3103) NET WEIGHT (kg)" in result.output

    def test_product_code_only(self, runner):
        """Test printing lookup codes."""
        result = runner.invoke(parse_main, ["-p", "07501234567890", "7501234567890", COMPOSED])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "7501234567890",
            "7501234567890",
            "0012345678905",
        ]

    def test_custom_separator(self, runner):
        """Test a placeholder given on the command line."""
        result = runner.invoke(parse_main, ["-s", "|", "0100012345678905" + "10LOT42|21SN001"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["lot"] == "LOT42"
        assert data["serial"] == "SN001"

    def test_read_stdin(self, runner):
        """Test scans piped on stdin, one per line."""
        result = runner.invoke(parse_main, [], input=COMPOSED + "\n\n7501234567890\n")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 2

    def test_read_file(self, runner, tmp_path):
        """Test scans read from a file."""
        scans = tmp_path / "scans.txt"
        scans.write_text("0100012345678905\x1d\n", encoding="utf-8")

        result = runner.invoke(parse_main, ["--file", str(scans)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["gtin"] == "00012345678905"
        assert data["raw"] == "0100012345678905\x1d"

    def test_no_input(self, runner):
        """Test failure when there is nothing to parse."""
        result = runner.invoke(parse_main, [], input="")

        assert result.exit_code == 1
        assert "No barcodes to parse" in result.output

    def test_output_format_from_settings(self, runner, monkeypatch):
        """Test the default format read from the environment."""
        monkeypatch.setenv("GS1_OUTPUT_FORMAT", "table")

        result = runner.invoke(parse_main, [COMPOSED])

        assert result.exit_code == 0
        assert result.output.startswith("Scan: ")


class TestLabelCommand:
    """Tests for the gs1-label tool."""

    def test_generate_text(self, runner):
        """Test text output with the placeholder for FNC1."""
        result = runner.invoke(
            label_main,
            ["--gtin", "7501234567890", "--lot", "LOT42", "--serial", "SN001",
             "--expiration-date", "2025-12-31"],
        )

        assert result.exit_code == 0
        assert "Code: 0107501234567890" + "17251231" + "10LOT42<GS>21SN001" in result.output
        assert "Human readable: (01)07501234567890(17)251231(10)LOT42(21)SN001" in result.output

    def test_generate_json(self, runner):
        """Test JSON output."""
        result = runner.invoke(label_main, ["-g", "7501234567890", "-c", "24", "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["code"] == "0107501234567890" + "3724"
        assert data["humanReadable"] == "(01)07501234567890(37)24"
        assert data["errors"] == []

    def test_template_requirements(self, runner):
        """Test that a template's required fields are enforced."""
        result = runner.invoke(label_main, ["--template", "pharma", "--gtin", "7501234567890"])

        assert result.exit_code == 1
        assert "Lot is required for the Pharmaceutical template" in result.output

    def test_missing_gtin(self, runner):
        """Test failure without a GTIN."""
        result = runner.invoke(label_main, ["--lot", "LOT42"])

        assert result.exit_code == 1
        assert "Error: GTIN is required" in result.output

    def test_unknown_default_template(self, runner, monkeypatch):
        """Test a bad template key coming from the environment."""
        monkeypatch.setenv("GS1_LABEL_TEMPLATE", "nope")

        result = runner.invoke(label_main, ["--gtin", "7501234567890"])

        assert result.exit_code == 1
        assert "Unknown label template: nope" in result.output

    def test_verify_check_digit(self, runner):
        """Test the check digit flag."""
        args = ["--gtin", "7501234567890", "--verify-check-digit"]
        result = runner.invoke(label_main, args)

        assert result.exit_code == 1
        assert "Invalid GTIN check digit" in result.output

        result = runner.invoke(label_main, ["--gtin", "7501234567893", "--verify-check-digit"])
        assert result.exit_code == 0
