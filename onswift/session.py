"""Form session: owns one Application and coordinates submission.

The caller mutates fields through update(), which re-runs the validator and
the qualification evaluator and hands back a fresh FormState to render.
submit() runs the final validation, posts the frozen payload, and resolves
to one of the terminal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from onswift import qualification, validator
from onswift.client import ApplicationClient, SubmissionError
from onswift.models import (
    Application,
    FailureKind,
    QualificationSignal,
    SubmitResult,
)

logger = logging.getLogger("onswift")

# Fields that show a live "used/limit" character counter
CHARACTER_LIMITS = {
    "project1": validator.MAX_PROJECT_LENGTH,
    "project2": validator.MAX_PROJECT_LENGTH,
    "project3": validator.MAX_PROJECT_LENGTH,
    "why_on_swift": validator.MAX_ANSWER_LENGTH,
}


@dataclass(frozen=True)
class FormState:
    """Everything the presentation layer needs to render the form."""

    errors: dict[str, str]
    signal: QualificationSignal
    char_counts: dict[str, tuple[int, int]] = field(default_factory=dict)
    submitting: bool = False
    result: SubmitResult = SubmitResult.NONE

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def word_count(self) -> int:
        return self.signal.word_count


class FormSession:
    """One applicant's pass through the form."""

    def __init__(
        self,
        client: ApplicationClient,
        application: Application | None = None,
        clear_on_return: bool = False,
    ):
        self._client = client
        self.application = application or Application()
        self.clear_on_return = clear_on_return
        self.submitting = False
        self.result = SubmitResult.NONE
        self.last_failure: FailureKind | None = None

    def state(self) -> FormState:
        app = self.application
        return FormState(
            errors=validator.validate(app),
            signal=qualification.evaluate(app),
            char_counts={
                name: (len(getattr(app, name)), limit)
                for name, limit in CHARACTER_LIMITS.items()
            },
            submitting=self.submitting,
            result=self.result,
        )

    def update(self, name: str, value: str) -> FormState:
        self.application.set_field(name, value)
        return self.state()

    async def submit(self) -> SubmitResult:
        if self.submitting:
            logger.warning("Submission already in progress. Ignoring.")
            return self.result

        errors = validator.validate(self.application)
        if errors:
            logger.info("Submission blocked: %d invalid field(s): %s",
                        len(errors), ", ".join(errors))
            return self.result

        self.submitting = True
        self.result = SubmitResult.NONE
        self.last_failure = None
        submitted = self.application.freeze()

        try:
            await self._client.submit(submitted)
            if qualification.check_auto_rejection(submitted):
                logger.info("Application from %s did not meet the criteria.",
                            submitted.email)
                self.last_failure = FailureKind.QUALIFICATION
                self.result = SubmitResult.REJECTED
            else:
                logger.info("Application from %s accepted for review.", submitted.email)
                self.result = SubmitResult.SUCCESS
        except SubmissionError as e:
            logger.error("Error submitting application: %s", e)
            self.last_failure = e.kind
            self.result = SubmitResult.REJECTED
        except Exception as e:
            logger.error("Unexpected error submitting application: %s", e)
            self.last_failure = FailureKind.TRANSPORT
            self.result = SubmitResult.REJECTED
        finally:
            self.submitting = False

        return self.result

    def return_to_form(self) -> FormState:
        """Leave the terminal screen. Field values survive unless clear_on_return."""
        self.result = SubmitResult.NONE
        self.last_failure = None
        if self.clear_on_return:
            self.application = Application()
        return self.state()
