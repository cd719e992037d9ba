"""Output reporters for check results."""

from .stdout import StdoutReporter
from .writer import build_report_payload, render_json_report, write_report

__all__ = ["StdoutReporter", "build_report_payload", "render_json_report", "write_report"]
