"""formcheck CLI entry point."""

import typer

from formcheck import __version__
from formcheck.cli.init_cmd import init
from formcheck.cli.submit_cmd import submit

app = typer.Typer(
    name="formcheck",
    help="End-to-end checks for a website contact form",
    no_args_is_help=True,
)

# Register subcommands
app.command()(init)
app.command()(submit)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"formcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """End-to-end checks for a website contact form."""
