"""
Report formats decorated with optional treatments.

Formats are concrete :class:`Report` classes. Compression, encryption,
timestamping and signing are decorators that wrap any report, in any
order, and each appends a suffix to the wrapped report's title.
"""
import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns._encoding import timestamp_millis, to_base36
from pattern_gallery.patterns.decorator.reports.sample import SAMPLE_DATA, csv_escape

SEPARATOR = "=============================================="
Clock = Callable[[], datetime]


class Report(ABC):
    title = "Report"

    def __init__(self, data: List[Dict[str, Any]], clock: Clock = datetime.now):
        self.data = data
        self.clock = clock

    @abstractmethod
    def generate(self) -> str: ...


class TextReport(Report):
    title = "Text Report"

    def generate(self) -> str:
        lines = [SEPARATOR, self.title.upper(), SEPARATOR,
                 f"Generated on: {self.clock():%Y-%m-%d %H:%M:%S}"]
        lines.extend(f"- {item['name']}: {item['value']}" for item in self.data)
        lines.extend([SEPARATOR, "End of report", SEPARATOR])
        return "\n".join(lines)


class HtmlReport(Report):
    title = "HTML Report"

    def generate(self) -> str:
        items = "\n".join(f"      <li><strong>{item['name']}</strong>: {item['value']}</li>"
                          for item in self.data)
        return (
            "<!DOCTYPE html>\n<html>\n<head>\n"
            f"  <title>{self.title}</title>\n</head>\n<body>\n"
            f"  <div class=\"header\">\n    <h1>{self.title}</h1>\n"
            f"    <p>Generated on: {self.clock():%Y-%m-%d %H:%M:%S}</p>\n  </div>\n"
            f"  <div class=\"content\">\n    <ul>\n{items}\n    </ul>\n  </div>\n"
            "  <div class=\"footer\">\n    <p>End of report</p>\n  </div>\n</body>\n</html>"
        )


class CsvReport(Report):
    title = "CSV Report"

    def generate(self) -> str:
        lines = [f"# {self.title}", f"# Generated on: {self.clock():%Y-%m-%d %H:%M:%S}", "Name,Value"]
        lines.extend(f"{csv_escape(item['name'])},{csv_escape(item['value'])}" for item in self.data)
        return "\n".join(lines) + "\n"


class JsonReport(Report):
    title = "JSON Report"

    def generate(self) -> str:
        return json.dumps({
            "title": self.title,
            "generatedAt": self.clock().isoformat(),
            "data": self.data,
        }, indent=2, ensure_ascii=False)


class ReportDecorator(Report):
    """Wraps a report and delegates to it."""

    suffix = ""

    def __init__(self, report: Report):
        super().__init__(report.data, report.clock)
        self.wrapped_report = report
        self.title = f"{report.title} ({self.suffix})" if self.suffix else report.title

    def generate(self) -> str:
        return self.wrapped_report.generate()


class CompressedReportDecorator(ReportDecorator):
    suffix = "Compressed"

    def __init__(self, report: Report, console: ConsolePort, compression_rate: float = 0.7):
        super().__init__(report)
        self.console = console
        self.compression_rate = compression_rate

    def generate(self) -> str:
        content = self.wrapped_report.generate()
        self.console.print("Compressing report...")
        original_size = len(content)
        compressed_size = round(original_size * self.compression_rate)
        return f"[COMPRESSED] {original_size} bytes compressed to {compressed_size} bytes\n---\n{content}"


class EncryptedReportDecorator(ReportDecorator):
    suffix = "Encrypted"

    def __init__(self, report: Report, console: ConsolePort, encryption_key: str = "default-key"):
        super().__init__(report)
        self.console = console
        self.encryption_key = encryption_key

    def generate(self) -> str:
        content = self.wrapped_report.generate()
        self.console.print(f"Encrypting report with key: {self.encryption_key}...")
        return (f"[ENCRYPTED with key: {self.encryption_key}] {len(content)} bytes\n"
                f"Preview: {content[:20]}...")


class TimestampedReportDecorator(ReportDecorator):
    suffix = "Timestamped"

    def generate(self) -> str:
        content = self.wrapped_report.generate()
        return f"[TIMESTAMPED: {self.clock().isoformat()}]\n---\n{content}"


class SignedReportDecorator(ReportDecorator):
    suffix = "Signed"

    def __init__(self, report: Report, console: ConsolePort, private_key: str = "default-private-key"):
        super().__init__(report)
        self.console = console
        self.private_key = private_key

    def signature(self) -> str:
        millis = timestamp_millis(self.clock())
        return f"SIG-{to_base36(millis)}-{self.private_key[:8]}"

    def generate(self) -> str:
        content = self.wrapped_report.generate()
        self.console.print(f"Signing report with key: {self.private_key}...")
        return f"{content}\n\n[DIGITALLY SIGNED: {self.signature()}]"


def run(context: DemoContext) -> None:
    console = context.console
    clock = context.clock

    console.print("--- Standard text report ---")
    console.print(TextReport(SAMPLE_DATA, clock).generate())

    console.print("--- Compressed HTML report ---")
    console.print(CompressedReportDecorator(HtmlReport(SAMPLE_DATA, clock), console).generate())

    console.print("--- Encrypted JSON report ---")
    console.print(EncryptedReportDecorator(JsonReport(SAMPLE_DATA, clock), console, "secret-key-123").generate())

    console.print("--- Timestamped CSV report ---")
    console.print(TimestampedReportDecorator(CsvReport(SAMPLE_DATA, clock)).generate())

    console.print("--- Compressed, encrypted and signed text report ---")
    complex_report = SignedReportDecorator(
        EncryptedReportDecorator(
            CompressedReportDecorator(TextReport(SAMPLE_DATA, clock), console),
            console, "top-secret-key"),
        console, "private-signing-key-xyz")
    console.print(complex_report.title)
    console.print(complex_report.generate())

    console.print("--- Adding decorations at run time ---")
    report: Report = HtmlReport(SAMPLE_DATA, clock)
    report = EncryptedReportDecorator(report, console, "runtime-key")
    report = SignedReportDecorator(report, console, "runtime-signature-key")
    console.print(report.title)
    console.print(report.generate())


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
