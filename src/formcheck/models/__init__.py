"""formcheck data models - re-exports all public model classes."""

from formcheck.models.config import ContactFormSelectors, PollConfig, ProjectConfig
from formcheck.models.contact import INVALID_CONTACT_DATA, VALID_CONTACT_DATA, ContactFormData
from formcheck.models.report import TestDetail, TestRecord, TestSummary
from formcheck.models.result import SubmissionOutcome, SubmissionResult

__all__ = [
    "ContactFormData",
    "ContactFormSelectors",
    "INVALID_CONTACT_DATA",
    "PollConfig",
    "ProjectConfig",
    "SubmissionOutcome",
    "SubmissionResult",
    "TestDetail",
    "TestRecord",
    "TestSummary",
    "VALID_CONTACT_DATA",
]
