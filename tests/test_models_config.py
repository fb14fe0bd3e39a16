"""Tests for formcheck.models.config and formcheck.models.contact."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from formcheck.models.config import (
    ContactFormSelectors,
    PollConfig,
    ProjectConfig,
    find_project_root,
    load_project_config,
)
from formcheck.models.contact import (
    INVALID_CONTACT_DATA,
    VALID_CONTACT_DATA,
    ContactFormData,
    get_contact_data,
)


class TestProjectConfigDefaults:
    def test_defaults(self):
        config = ProjectConfig()
        assert config.base_url == "https://automationintesting.online"
        assert config.browser == "chromium"
        assert config.headless is True
        assert config.screenshots_dir == "screenshots"

    def test_poll_defaults(self):
        poll = PollConfig()
        assert (poll.max_attempts, poll.interval_ms, poll.settle_ms) == (3, 500, 1000)
        assert (poll.post_submit_ms, poll.post_screenshot_ms) == (1000, 1500)

    def test_selector_defaults(self):
        selectors = ContactFormSelectors()
        assert selectors.name_input == "#name"
        assert selectors.message_textarea == "#description"
        assert selectors.success_message == "#root div.alert.alert-success"
        assert selectors.error_message == "#contact div.alert.alert-danger"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            ProjectConfig.model_validate({"unknown_key": 1})

    def test_invalid_browser_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig.model_validate({"browser": "ie6"})

    def test_zero_attempts_rejected(self):
        with pytest.raises(ValidationError):
            PollConfig(max_attempts=0)


class TestLoadProjectConfig:
    def test_missing_file_returns_defaults(self, tmp_path: Path):
        assert load_project_config(tmp_path) == ProjectConfig()

    def test_empty_file_returns_defaults(self, tmp_path: Path):
        (tmp_path / "formcheck.yaml").write_text("", encoding="utf-8")
        assert load_project_config(tmp_path) == ProjectConfig()

    def test_partial_file_overrides(self, tmp_path: Path):
        (tmp_path / "formcheck.yaml").write_text(
            "base_url: http://localhost:3000\n"
            "headless: false\n"
            "poll:\n"
            "  max_attempts: 5\n"
            "selectors:\n"
            "  submit_button: 'button#submitContact'\n",
            encoding="utf-8",
        )
        config = load_project_config(tmp_path)

        assert config.base_url == "http://localhost:3000"
        assert config.headless is False
        assert config.poll.max_attempts == 5
        assert config.poll.interval_ms == 500
        assert config.selectors.submit_button == "button#submitContact"
        assert config.selectors.name_input == "#name"

    def test_invalid_file_raises(self, tmp_path: Path):
        (tmp_path / "formcheck.yaml").write_text("poll:\n  max_attempts: 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_project_config(tmp_path)


class TestFindProjectRoot:
    def test_walks_up_to_config(self, tmp_path: Path):
        (tmp_path / "formcheck.yaml").write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_file_start_uses_parent(self, tmp_path: Path):
        (tmp_path / "formcheck.yaml").write_text("", encoding="utf-8")
        some_file = tmp_path / "notes.txt"
        some_file.write_text("x", encoding="utf-8")
        assert find_project_root(some_file) == tmp_path.resolve()

    def test_falls_back_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert find_project_root(tmp_path) == Path.cwd()


class TestContactData:
    def test_valid_sets(self):
        assert [d.name for d in VALID_CONTACT_DATA] == ["John Doe", "Jane Smith"]

    def test_invalid_set(self):
        entry = INVALID_CONTACT_DATA[0]
        assert entry.name == ""
        assert entry.email == "invalid-email"

    @pytest.mark.parametrize(
        ("reference", "expected_name"),
        [("valid:0", "John Doe"), ("valid:1", "Jane Smith"), ("valid", "John Doe"), ("invalid:0", "")],
    )
    def test_get_contact_data(self, reference: str, expected_name: str):
        assert get_contact_data(reference).name == expected_name

    @pytest.mark.parametrize(
        ("reference", "message"),
        [("bogus:0", "Unknown data set"), ("valid:9", "out of range"), ("valid:x", "Invalid index")],
    )
    def test_get_contact_data_errors(self, reference: str, message: str):
        with pytest.raises(ValueError, match=message):
            get_contact_data(reference)

    def test_contact_data_rejects_extra_fields(self):
        with pytest.raises(ValidationError):
            ContactFormData(name="a", email="b", phone="c", subject="d", message="e", extra="f")
