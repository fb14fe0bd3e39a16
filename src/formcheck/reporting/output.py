"""Rich terminal output for run summaries and submission results.

Provides the headline summary table, per-test detail sections, and
JSON output for CI consumption.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich import box
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pydantic import BaseModel
    from rich.console import Console

    from formcheck.models.report import TestSummary
    from formcheck.models.result import SubmissionResult

# Number of most recent detail entries shown per test
RECENT_DETAILS = 3

_RESULT_STYLES: dict[bool, tuple[str, str]] = {
    True: ("✓ PASS", "bold green"),
    False: ("✗ FAIL", "bold red"),
}


def render_summary(summary: TestSummary, console: Console) -> None:
    """Render the run summary headline and per-test details.

    Args:
        summary: The TestSummary to display.
        console: Rich Console for output.
    """
    table = Table(
        title="Test Execution Summary",
        box=box.SIMPLE,
        show_header=False,
        padding=(0, 2),
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Total Tests", str(summary.total_tests))
    table.add_row("Passed Tests", str(summary.passed_tests))
    table.add_row("Failed Tests", str(summary.failed_tests))
    table.add_row("Total Executions", str(summary.total_executions))
    table.add_row("Pass Rate", f"{summary.pass_rate}%")

    console.print()
    console.print(table)

    if not summary.test_details:
        return

    console.print("[bold]Test Details[/bold]")
    for detail in summary.test_details:
        symbol, style = _RESULT_STYLES[detail.last_result]
        console.print()
        console.print(f"[bold]Test:[/bold] {escape(detail.name)} ({escape(detail.id)})", highlight=False)
        console.print(f"  Passed: {detail.passed} | Failed: {detail.failed}", highlight=False)
        console.print(f"  Last Result: [{style}]{symbol}[/{style}]")
        if detail.details:
            console.print("  Recent Details:")
            for entry in detail.details[-RECENT_DETAILS:]:
                console.print(f"    - {entry}", markup=False, highlight=False)
    console.print()


def render_result(result: SubmissionResult, console: Console) -> None:
    """Render a single SubmissionResult as a key-value table."""
    symbol, style = _RESULT_STYLES[result.is_success]
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Result", f"[{style}]{symbol}[/{style}]")
    table.add_row("Outcome", result.outcome.value)
    table.add_row("Validation errors", "yes" if result.has_validation_errors else "no")
    table.add_row("Details", escape(result.details))
    console.print(table)


def output_json(model: BaseModel) -> None:
    """Write a model as pure JSON to stdout.

    No Rich markup, no color, no extra text. Suitable for
    CI pipeline consumption and machine parsing.
    """
    sys.stdout.write(model.model_dump_json(indent=2))
    sys.stdout.write("\n")
