"""Submission result classifier for post-submit page state.

Classification is priority-ordered and the first match wins:

1. Validation-error indicator visible -> validation_error
2. Success indicator visible -> success
3. Neither visible within the poll window -> no_response
4. Any exception while reading the page -> error

Each indicator is polled with a bounded PollPolicy.

Side effects such as screenshots are attached as observers. Observers
run after the decision; their failures are logged and never change
the returned result.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from formcheck.execution.poll import PollPolicy, poll_until
from formcheck.models.result import SubmissionOutcome, SubmissionResult

if TYPE_CHECKING:
    from formcheck.drivers.base import BaseDriver
    from formcheck.models.config import ContactFormSelectors

logger = logging.getLogger(__name__)

NO_CONFIRMATION_DETAILS = "Form was submitted but no explicit confirmation was displayed"

ResultObserver = Callable[[SubmissionResult], Awaitable[None]]


@dataclass(frozen=True)
class FormIndicators:
    """Selectors for the page elements that signal a submission outcome."""

    error: str
    success: str
    validation_messages: str

    @classmethod
    def from_selectors(cls, selectors: ContactFormSelectors) -> FormIndicators:
        return cls(
            error=selectors.error_message,
            success=selectors.success_message,
            validation_messages=selectors.validation_errors,
        )


class SubmissionClassifier:
    """Inspect the rendered page after a submit and classify the outcome."""

    def __init__(
        self,
        driver: BaseDriver,
        indicators: FormIndicators,
        policy: PollPolicy | None = None,
        settle_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._driver = driver
        self._indicators = indicators
        self._policy = policy or PollPolicy()
        self._settle_delay = settle_delay
        self._sleep = sleep

    async def classify(
        self,
        expect_validation_errors: bool = False,
        observers: Iterable[ResultObserver] = (),
    ) -> SubmissionResult:
        """Classify the current page state.

        Args:
            expect_validation_errors: If True, a validation error is the
                outcome the caller wants, so it counts as success.
            observers: Async callbacks notified with the final result.

        Returns:
            A new SubmissionResult.
        """
        try:
            result = await self._decide(expect_validation_errors)
        except Exception as exc:
            logger.exception("Error verifying form submission")
            result = SubmissionResult(
                is_success=False,
                has_validation_errors=False,
                details=f"Error: {exc}",
                outcome=SubmissionOutcome.error,
                error_message=str(exc),
            )

        await self._notify(result, observers)
        return result

    async def _decide(self, expect_validation_errors: bool) -> SubmissionResult:
        if self._settle_delay > 0:
            await self._sleep(self._settle_delay)

        if await self._poll_visible(self._indicators.error):
            errors = await self._driver.all_text_contents(self._indicators.validation_messages)
            details = f"Validation errors: {', '.join(errors)}"
            logger.info("Form has validation errors: %s", details)
            return SubmissionResult(
                is_success=expect_validation_errors,
                has_validation_errors=True,
                details=details,
                outcome=SubmissionOutcome.validation_error,
            )

        if await self._poll_visible(self._indicators.success):
            message_text = await self._driver.text_content(self._indicators.success)
            details = f"Success message: {message_text}"
            logger.info("Form submission successful: %s", details)
            return SubmissionResult(
                is_success=not expect_validation_errors,
                has_validation_errors=False,
                details=details,
                outcome=SubmissionOutcome.success,
            )

        logger.info("No standard success or error message found after submission")
        return SubmissionResult(
            is_success=not expect_validation_errors,
            has_validation_errors=False,
            details=NO_CONFIRMATION_DETAILS,
            outcome=SubmissionOutcome.no_response,
        )

    async def _poll_visible(self, selector: str) -> bool:
        return await poll_until(
            lambda: self._driver.is_visible(selector),
            self._policy,
            sleep=self._sleep,
        )

    async def _notify(self, result: SubmissionResult, observers: Iterable[ResultObserver]) -> None:
        for observer in observers:
            try:
                await observer(result)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Observer failed for %s result: %s: %s",
                    result.outcome.value,
                    type(exc).__name__,
                    exc,
                )
