"""Project scaffolding for `formcheck init`.

Writes a default formcheck.yaml and ignores the screenshots directory
in .gitignore. Non-interactive.
"""

from __future__ import annotations

from pathlib import Path

from formcheck.models.config import CONFIG_FILENAME

_SCREENSHOTS_ENTRY = "screenshots/"


class ProjectExistsError(Exception):
    """Raised when scaffold_project would overwrite existing files."""

    def __init__(self, conflicting_files: list[str]) -> None:
        self.conflicting_files = conflicting_files
        files_str = ", ".join(conflicting_files)
        super().__init__(f"Files already exist: {files_str}")


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def scaffold_project(directory: Path, force: bool = False) -> list[str]:
    """Write formcheck.yaml and update .gitignore in directory.

    Args:
        directory: Target project directory. Created if missing.
        force: If True, overwrite an existing formcheck.yaml.

    Returns:
        List of created or updated file paths (relative to directory).

    Raises:
        ProjectExistsError: If formcheck.yaml exists and force is False.
    """
    directory = directory.resolve()
    config_path = directory / CONFIG_FILENAME
    if config_path.exists() and not force:
        raise ProjectExistsError([CONFIG_FILENAME])

    directory.mkdir(parents=True, exist_ok=True)
    template = _get_templates_dir() / CONFIG_FILENAME
    config_path.write_text(template.read_text(encoding="utf-8"), encoding="utf-8")
    created = [CONFIG_FILENAME]

    gitignore_path = directory / ".gitignore"
    if gitignore_path.exists():
        content = gitignore_path.read_text(encoding="utf-8")
        if _SCREENSHOTS_ENTRY not in content.splitlines():
            if content and not content.endswith("\n"):
                content += "\n"
            content += _SCREENSHOTS_ENTRY + "\n"
            gitignore_path.write_text(content, encoding="utf-8")
            created.append(".gitignore (updated)")
    else:
        gitignore_path.write_text(_SCREENSHOTS_ENTRY + "\n", encoding="utf-8")
        created.append(".gitignore")

    return created
