"""formcheck init -- write formcheck.yaml and ignore screenshots/."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from formcheck.models.config import CONFIG_FILENAME
from formcheck.scaffold.init import ProjectExistsError, scaffold_project

console = Console()
err_console = Console(stderr=True)


def init(
    directory: str = typer.Argument(".", help="Project directory to set up"),
    force: bool = typer.Option(
        False, "--force", "-f", help=f"Overwrite an existing {CONFIG_FILENAME}"
    ),
) -> None:
    """Set up a formcheck project.

    Writes formcheck.yaml with the default site, browser, timing and
    selector settings, and ignores screenshots/ in .gitignore.
    """
    target = Path(directory).resolve()

    try:
        created = scaffold_project(target, force=force)
    except ProjectExistsError as exc:
        err_console.print(
            f"[bold red]Error:[/bold red] {escape(', '.join(exc.conflicting_files))} "
            f"already exists in {escape(str(target))}"
        )
        err_console.print("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    console.print(f"[bold green]formcheck project ready in {escape(str(target))}[/bold green]")
    for path in created:
        console.print(f"  [green]✓[/green] {escape(path)}")
    console.print()
    console.print(f"Edit {CONFIG_FILENAME} to point at your site, then run [bold]formcheck submit[/bold].")
