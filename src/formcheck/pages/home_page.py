"""HomePage: the site's landing page and its 'Send Us a Message' form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from formcheck.execution.poll import PollPolicy
from formcheck.models.result import SubmissionOutcome, SubmissionResult
from formcheck.pages.base_page import BasePage
from formcheck.storage.screenshots import error_info
from formcheck.verification.classifier import FormIndicators, SubmissionClassifier

if TYPE_CHECKING:
    from formcheck.drivers.base import BaseDriver
    from formcheck.models.config import ProjectConfig
    from formcheck.storage.screenshots import ScreenshotStore

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Page object for the home page contact form."""

    def __init__(
        self,
        driver: BaseDriver,
        config: ProjectConfig | None = None,
        store: ScreenshotStore | None = None,
    ) -> None:
        super().__init__(driver, config, store)
        self.selectors = self.config.selectors

    async def navigate_to_home_page(self) -> None:
        await self.navigate("/")
        await self.wait_for_page_load()

    async def scroll_to_contact_form(self) -> None:
        """Bring the form into view before interacting with it."""
        await self.driver.scroll_into_view(self.selectors.name_input)

    async def fill_contact_form(
        self,
        name: str,
        email: str,
        phone: str,
        subject: str,
        message: str,
    ) -> None:
        await self.fill_text(self.selectors.name_input, name)
        await self.fill_text(self.selectors.email_input, email)
        await self.fill_text(self.selectors.phone_input, phone)
        await self.fill_text(self.selectors.subject_input, subject)
        await self.fill_text(self.selectors.message_textarea, message)
        logger.info(
            "Filled contact form with: Name=%s, Email=%s, Phone=%s, Subject=%s",
            name,
            email,
            phone,
            subject,
        )

    async def submit_contact_form(self) -> None:
        await self.click_element(self.selectors.submit_button)
        logger.info("Contact form submitted")

    def build_classifier(self) -> SubmissionClassifier:
        poll = self.config.poll
        return SubmissionClassifier(
            self.driver,
            FormIndicators.from_selectors(self.selectors),
            policy=PollPolicy.from_config(poll),
            settle_delay=poll.settle_ms / 1000,
            sleep=self._sleep_seconds,
        )

    async def verify_form_submission(
        self,
        expect_validation_errors: bool = False,
        test_id: str = "UNKNOWN",
    ) -> SubmissionResult:
        """Classify the page after a submit and capture a labeled screenshot.

        Args:
            expect_validation_errors: Whether the caller expects the form
                to reject the input.
            test_id: Test identifier used in screenshot filenames.

        Returns:
            SubmissionResult for the current page state.
        """

        async def capture(result: SubmissionResult) -> None:
            step, status, info = _screenshot_label(result)
            await self.take_screenshot(test_id, step, status, info)

        return await self.build_classifier().classify(
            expect_validation_errors, observers=[capture]
        )

    async def verify_form_submission_success(self, test_id: str = "UNKNOWN") -> bool:
        """Boolean shorthand for verify_form_submission with no errors expected."""
        result = await self.verify_form_submission(False, test_id)
        return result.is_success

    async def complete_contact_form_process(
        self,
        name: str,
        email: str,
        phone: str,
        subject: str,
        message: str,
        expect_validation_errors: bool = False,
        test_id: str = "UNKNOWN",
    ) -> SubmissionResult:
        """Run the whole contact flow: scroll, fill, submit, verify.

        Captures a screenshot at each step and a final pass/fail
        screenshot. Screenshot failures are logged and the flow carries
        on. On an unexpected error a failure screenshot is attempted and
        the original exception is re-raised.
        """
        poll = self.config.poll
        try:
            await self.scroll_to_contact_form()
            await self.try_screenshot(self.screenshot_step(test_id, "before-fill"))

            await self.fill_contact_form(name, email, phone, subject, message)
            await self.try_screenshot(self.screenshot_step(test_id, "after-fill"))

            await self.submit_contact_form()
            await self.wait_ms(poll.post_submit_ms)
            await self.try_screenshot(self.screenshot_step(test_id, "after-submit"))
            await self.wait_ms(poll.post_screenshot_ms)

            result = await self.verify_form_submission(expect_validation_errors, test_id)

            if result.is_success:
                await self.try_screenshot(self.screenshot_success(test_id, "test-complete"))
            else:
                await self.try_screenshot(self.screenshot_failure(test_id, "test-complete"))

            return result
        except Exception as exc:
            await self.try_screenshot(self.screenshot_failure(test_id, "unexpected-error", exc))
            raise

    async def _sleep_seconds(self, seconds: float) -> None:
        await self.wait_ms(seconds * 1000)


def _screenshot_label(result: SubmissionResult) -> tuple[str, str, str]:
    """Map a classification to (step, status, additional_info) for its screenshot."""
    if result.outcome is SubmissionOutcome.validation_error:
        return ("validation-errors", "fail", "form-errors-detected")
    if result.outcome is SubmissionOutcome.success:
        return ("form-success", "pass", "success-message-visible")
    if result.outcome is SubmissionOutcome.no_response:
        return ("form-submitted", "pass" if result.is_success else "fail", "no-standard-response")
    return ("verification-error", "fail", error_info(result.error_message))
