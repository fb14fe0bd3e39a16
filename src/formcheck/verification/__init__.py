"""Submission verification - classify post-submit page state."""

from formcheck.verification.classifier import (
    NO_CONFIRMATION_DETAILS,
    FormIndicators,
    SubmissionClassifier,
)

__all__ = ["FormIndicators", "NO_CONFIRMATION_DETAILS", "SubmissionClassifier"]
