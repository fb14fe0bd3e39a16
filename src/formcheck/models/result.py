"""Submission result model produced by the form verification step.

A SubmissionResult is created fresh for every verification call and is
immutable once returned.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SubmissionOutcome(str, Enum):
    """Which branch of the classifier produced a result."""

    validation_error = "validation_error"
    success = "success"
    no_response = "no_response"
    error = "error"


class SubmissionResult(BaseModel):
    """Outcome of verifying a single contact form submission.

    is_success is relative to what the caller expected: a validation
    error counts as success only when errors were expected.
    """

    model_config = {"extra": "forbid", "frozen": True}

    is_success: bool
    has_validation_errors: bool
    details: str
    outcome: SubmissionOutcome
    error_message: str | None = None
