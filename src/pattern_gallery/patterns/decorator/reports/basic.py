"""
Report generator steered by flags.

Format and every optional treatment are switches on a single class, so
each new option touches ``generate`` and multiplies its branches.
"""
import json
from datetime import datetime
from typing import Any, Callable, Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns._encoding import timestamp_millis, to_base36
from pattern_gallery.patterns.decorator.reports.sample import SAMPLE_DATA, csv_escape

SEPARATOR = "=============================================="


class Report:
    def __init__(self, data: List[Dict[str, Any]], console: ConsolePort, clock: Callable[[], datetime],
                 fmt: str = "text", compress: bool = False, encrypt: bool = False,
                 timestamp: bool = False, sign: bool = False,
                 encryption_key: str = "default-key", private_key: str = "default-private-key"):
        self.data = data
        self.console = console
        self.clock = clock
        self.format = fmt
        self.compress = compress
        self.encrypt = encrypt
        self.timestamp = timestamp
        self.sign = sign
        self.encryption_key = encryption_key
        self.private_key = private_key

    def generate(self) -> str:
        now = self.clock()
        if self.format == "text":
            content = f"{SEPARATOR}\nTEXT REPORT\n{SEPARATOR}\nGenerated on: {now:%Y-%m-%d %H:%M:%S}\n"
            for item in self.data:
                content += f"- {item['name']}: {item['value']}\n"
            content += f"{SEPARATOR}\nEnd of report\n{SEPARATOR}"
        elif self.format == "html":
            content = "<html><head><title>HTML Report</title></head><body><h1>HTML Report</h1><ul>"
            for item in self.data:
                content += f"<li><strong>{item['name']}</strong>: {item['value']}</li>"
            content += "</ul></body></html>"
        elif self.format == "csv":
            content = f"# CSV Report\n# Generated on: {now:%Y-%m-%d %H:%M:%S}\nName,Value\n"
            for item in self.data:
                content += f"{csv_escape(item['name'])},{csv_escape(item['value'])}\n"
        elif self.format == "json":
            content = json.dumps({"title": "JSON Report", "generatedAt": now.isoformat(),
                                  "data": self.data}, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"Unknown report format: {self.format}")

        if self.compress:
            self.console.print("Compressing report...")
            size = len(content)
            content = f"[COMPRESSED] {size} bytes compressed to {round(size * 0.7)} bytes\n---\n{content}"
            if self.encrypt:
                self.console.print(f"Encrypting report with key: {self.encryption_key}...")
                content = (f"[ENCRYPTED with key: {self.encryption_key}] {len(content)} bytes\n"
                           f"Preview: {content[:20]}...")
        elif self.encrypt:
            self.console.print(f"Encrypting report with key: {self.encryption_key}...")
            content = (f"[ENCRYPTED with key: {self.encryption_key}] {len(content)} bytes\n"
                       f"Preview: {content[:20]}...")

        if self.timestamp:
            content = f"[TIMESTAMPED: {now.isoformat()}]\n---\n{content}"

        if self.sign:
            self.console.print(f"Signing report with key: {self.private_key}...")
            millis = timestamp_millis(now)
            content += f"\n\n[DIGITALLY SIGNED: SIG-{to_base36(millis)}-{self.private_key[:8]}]"
        return content


def run(context: DemoContext) -> None:
    console = context.console

    console.print("--- Standard text report ---")
    console.print(Report(SAMPLE_DATA, console, context.clock).generate())

    console.print("--- Compressed HTML report ---")
    console.print(Report(SAMPLE_DATA, console, context.clock, fmt="html", compress=True).generate())

    console.print("--- Compressed, encrypted and signed text report ---")
    console.print(Report(SAMPLE_DATA, console, context.clock, compress=True, encrypt=True, sign=True,
                         encryption_key="top-secret-key", private_key="private-signing-key-xyz").generate())


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
