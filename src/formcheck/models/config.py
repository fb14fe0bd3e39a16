"""Project configuration model for formcheck.

Captures formcheck.yaml fields with defaults matching the contact form
on the target site: base URL, browser launch, screenshot location,
polling timings, and the page selectors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONFIG_FILENAME = "formcheck.yaml"


class PollConfig(BaseModel):
    """Timing for waiting on post-submission indicators.

    All durations are milliseconds. settle_ms is waited once before the
    first probe; interval_ms between probe attempts.
    """

    model_config = {"extra": "forbid"}

    max_attempts: int = Field(default=3, ge=1)
    interval_ms: int = Field(default=500, ge=0)
    settle_ms: int = Field(default=1000, ge=0)
    post_submit_ms: int = Field(default=1000, ge=0)
    post_screenshot_ms: int = Field(default=1500, ge=0)


class ContactFormSelectors(BaseModel):
    """CSS selectors for the contact form and its response banners."""

    model_config = {"extra": "forbid"}

    name_input: str = "#name"
    email_input: str = "#email"
    phone_input: str = "#phone"
    subject_input: str = "#subject"
    message_textarea: str = "#description"
    submit_button: str = "#contact > div > div > div > div > div > form > div.d-grid > button"
    success_message: str = "#root div.alert.alert-success"
    error_message: str = "#contact div.alert.alert-danger"
    validation_errors: str = "#contact > div > div > div > div > div > div > p"


class ProjectConfig(BaseModel):
    """Project-level configuration loaded from formcheck.yaml."""

    model_config = {"extra": "forbid"}

    base_url: str = "https://automationintesting.online"
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    screenshots_dir: str = "screenshots"
    poll: PollConfig = Field(default_factory=PollConfig)
    selectors: ContactFormSelectors = Field(default_factory=ContactFormSelectors)


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for formcheck.yaml.

    Returns:
        The directory containing formcheck.yaml, or cwd if none is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_project_config(project_root: Path | None = None) -> ProjectConfig:
    """Load ProjectConfig from formcheck.yaml. Returns defaults if not found.

    Raises:
        pydantic.ValidationError: If the file contains unknown or invalid fields.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ProjectConfig()
    return ProjectConfig.model_validate(raw)
