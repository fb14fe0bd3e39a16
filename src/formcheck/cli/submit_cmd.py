"""formcheck submit -- run the contact form flow once against the live site.

Loads formcheck.yaml, opens a browser, fills and submits the contact
form through HomePage, records the outcome in a TestReporter, renders
the result and run summary, and exits 0 on success or 1 otherwise.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from formcheck.drivers.playwright_driver import open_browser
from formcheck.log import configure_logging
from formcheck.models.config import ProjectConfig, load_project_config
from formcheck.models.contact import ContactFormData, get_contact_data
from formcheck.models.result import SubmissionResult
from formcheck.pages.home_page import HomePage
from formcheck.reporting.output import output_json, render_result
from formcheck.reporting.reporter import TestReporter

console = Console(stderr=True)


def submit(
    data: str = typer.Option("valid:0", "--data", help="Data set entry, e.g. valid:0 or invalid:0"),
    name: Optional[str] = typer.Option(None, "--name", help="Override the name field"),
    email: Optional[str] = typer.Option(None, "--email", help="Override the email field"),
    phone: Optional[str] = typer.Option(None, "--phone", help="Override the phone field"),
    subject: Optional[str] = typer.Option(None, "--subject", help="Override the subject field"),
    message: Optional[str] = typer.Option(None, "--message", help="Override the message field"),
    expect_errors: bool = typer.Option(False, "--expect-errors", help="Treat validation errors as success"),
    test_id: str = typer.Option("CLI-SUBMIT", "--test-id", help="Test id for screenshots and report"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the configured site URL"),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window"),
    format_json: bool = typer.Option(False, "--json", help="Output pure JSON to stdout"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
) -> None:
    """Fill and submit the contact form once and report the outcome."""
    configure_logging(log_level, console=console)

    try:
        config = load_project_config()
    except ValidationError as exc:
        console.print("[bold red]Configuration errors in formcheck.yaml:[/bold red]")
        for err in exc.errors():
            loc = ".".join(str(part) for part in err["loc"])
            console.print(f"  {loc}: {err['msg']}")
        raise typer.Exit(code=1)

    updates: dict[str, object] = {}
    if base_url is not None:
        updates["base_url"] = base_url
    if headed:
        updates["headless"] = False
    if updates:
        config = config.model_copy(update=updates)

    try:
        form_data = get_contact_data(data)
    except ValueError as exc:
        console.print(f"[bold red]Data error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    overrides = {
        key: value
        for key, value in {
            "name": name,
            "email": email,
            "phone": phone,
            "subject": subject,
            "message": message,
        }.items()
        if value is not None
    }
    if overrides:
        form_data = form_data.model_copy(update=overrides)

    reporter = TestReporter()
    test_name = f"Contact form submission ({data})"
    try:
        result = asyncio.run(
            _submit_async(config, form_data, expect_errors=expect_errors, test_id=test_id)
        )
    except Exception as exc:
        reporter.record_test(test_id, test_name, False, f"Failed with error: {exc}")
        console.print(f"[bold red]Submission failed:[/bold red] {exc}")
        _finish(reporter, format_json)
        raise typer.Exit(code=1)

    reporter.record_test(test_id, test_name, result.is_success, result.details)

    if format_json:
        output_json(result)
    else:
        render_result(result, Console())
    _finish(reporter, format_json)

    if not result.is_success:
        raise typer.Exit(code=1)


async def _submit_async(
    config: ProjectConfig,
    form_data: ContactFormData,
    *,
    expect_errors: bool,
    test_id: str,
) -> SubmissionResult:
    """Open the browser and run HomePage.complete_contact_form_process."""
    async with open_browser(config) as driver:
        home_page = HomePage(driver, config)
        await home_page.navigate_to_home_page()
        return await home_page.complete_contact_form_process(
            form_data.name,
            form_data.email,
            form_data.phone,
            form_data.subject,
            form_data.message,
            expect_validation_errors=expect_errors,
            test_id=test_id,
        )


def _finish(reporter: TestReporter, format_json: bool) -> None:
    # JSON mode keeps stdout machine-readable; the summary goes to stderr
    reporter.print_summary(console if format_json else Console())
