"""Run reporting - the test reporter and its terminal/JSON output."""

from formcheck.reporting.output import output_json, render_result, render_summary
from formcheck.reporting.reporter import TestReporter

__all__ = ["TestReporter", "output_json", "render_result", "render_summary"]
