"""Tests for the decorator examples."""
import json

import pytest

from pattern_gallery.patterns._encoding import to_base36
from pattern_gallery.patterns.decorator.coffee.refactored import (
    CinnamonDecorator,
    Coffee,
    MilkDecorator,
    SugarDecorator,
    WhippedCreamDecorator,
)
from pattern_gallery.patterns.decorator.reports.refactored import (
    CompressedReportDecorator,
    CsvReport,
    EncryptedReportDecorator,
    HtmlReport,
    JsonReport,
    SignedReportDecorator,
    TextReport,
    TimestampedReportDecorator,
)
from pattern_gallery.patterns.decorator.reports.sample import SAMPLE_DATA, csv_escape


class TestCoffeeDecorators:
    """Test stacking extras on a coffee."""

    def test_plain_coffee(self):
        assert Coffee().get_cost() == 5
        assert Coffee().get_description() == "Simple coffee"

    def test_extras_stack_in_order(self):
        coffee = SugarDecorator(MilkDecorator(Coffee()))

        assert coffee.get_cost() == 6.5
        assert coffee.get_description() == "Simple coffee, with milk, with sugar"

    def test_every_extra(self):
        coffee = WhippedCreamDecorator(CinnamonDecorator(SugarDecorator(MilkDecorator(Coffee()))))

        assert coffee.get_cost() == pytest.approx(8.75)
        assert coffee.get_description().endswith("with cinnamon, with whipped cream")


class TestReports:
    """Test report formats and their decorations."""

    @pytest.fixture(autouse=True)
    def _clock(self, fixed_clock):
        self.clock = fixed_clock

    def test_text_report(self):
        content = TextReport(SAMPLE_DATA, self.clock).generate()

        assert "TEXT REPORT" in content
        assert "Generated on: 2024-03-15 10:30:00" in content
        assert "- Customers: 250" in content

    def test_html_report(self):
        content = HtmlReport(SAMPLE_DATA, self.clock).generate()

        assert "<title>HTML Report</title>" in content
        assert "<li><strong>Profit</strong>: 25,000 €</li>" in content

    def test_csv_report_quotes_commas(self):
        content = CsvReport(SAMPLE_DATA, self.clock).generate()

        assert 'Revenue,"120,000 €"' in content
        assert "Projects,15" in content

    def test_json_report(self):
        data = json.loads(JsonReport(SAMPLE_DATA, self.clock).generate())

        assert data["title"] == "JSON Report"
        assert data["generatedAt"] == "2024-03-15T10:30:00"
        assert data["data"] == SAMPLE_DATA

    def test_compression(self, console):
        report = CompressedReportDecorator(TextReport(SAMPLE_DATA, self.clock), console)
        original = TextReport(SAMPLE_DATA, self.clock).generate()

        content = report.generate()

        expected = f"[COMPRESSED] {len(original)} bytes compressed to {round(len(original) * 0.7)} bytes"
        assert content.startswith(expected)
        assert content.endswith(original)
        assert console.lines == ["Compressing report..."]

    def test_encryption_hides_content(self, console):
        content = EncryptedReportDecorator(JsonReport(SAMPLE_DATA, self.clock), console, "k1").generate()

        assert content.startswith("[ENCRYPTED with key: k1]")
        assert "Customers" not in content

    def test_timestamp_uses_clock(self):
        content = TimestampedReportDecorator(CsvReport(SAMPLE_DATA, self.clock)).generate()

        assert content.startswith("[TIMESTAMPED: 2024-03-15T10:30:00]")

    def test_signature(self, console):
        report = SignedReportDecorator(TextReport(SAMPLE_DATA, self.clock), console, "private-signing-key")

        millis = int(self.clock().timestamp() * 1000)
        assert report.signature() == f"SIG-{to_base36(millis)}-private-"
        assert report.generate().endswith(f"[DIGITALLY SIGNED: {report.signature()}]")

    def test_titles_accumulate_suffixes(self, console):
        report = SignedReportDecorator(
            EncryptedReportDecorator(CompressedReportDecorator(TextReport(SAMPLE_DATA, self.clock), console),
                                     console),
            console)

        assert report.title == "Text Report (Compressed) (Encrypted) (Signed)"

    def test_decorators_run_in_wrapping_order(self, console):
        report = SignedReportDecorator(
            EncryptedReportDecorator(CompressedReportDecorator(TextReport(SAMPLE_DATA, self.clock), console),
                                     console, "top-secret-key"),
            console, "private-signing-key-xyz")

        report.generate()

        assert console.lines == [
            "Compressing report...",
            "Encrypting report with key: top-secret-key...",
            "Signing report with key: private-signing-key-xyz...",
        ]


def test_csv_escape():
    assert csv_escape("a,b") == '"a,b"'
    assert csv_escape(15) == "15"


@pytest.mark.parametrize("number, expected", [(0, "0"), (35, "Z"), (36, "10"), (1295, "ZZ")])
def test_to_base36(number, expected):
    assert to_base36(number) == expected
