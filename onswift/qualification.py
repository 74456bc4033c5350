"""Qualification heuristics: live pass criteria and the auto-reject gate.

There are two bars on purpose. The hard gate (portfolio present, 3+ years,
at least MIN_WORD_COUNT words) decides accept/reject after submission. The
softer THOUGHTFUL_WORD_COUNT bar only drives the "thoughtful response"
criterion shown while the form is being filled in and never blocks anything.
"""

from __future__ import annotations

from onswift.models import Application, Experience, QualificationSignal
from onswift.validator import MIN_WORD_COUNT, count_words, is_valid_url

THOUGHTFUL_WORD_COUNT = 50

QUALIFYING_EXPERIENCE = frozenset(
    {Experience.MID.value, Experience.SENIOR.value, Experience.EXPERT.value}
)

CRITERIA_LABELS = (
    "Portfolio link provided",
    "3+ years of experience",
    "Thoughtful response (50+ words)",
)


def word_count(text: str | None) -> int:
    return count_words(text or "")


def has_portfolio(portfolio: str | None) -> bool:
    return bool(portfolio) and is_valid_url(portfolio)


def has_experience(experience: str | None) -> bool:
    return experience in QUALIFYING_EXPERIENCE


def evaluate(application: Application) -> QualificationSignal:
    """Compute the pass-criteria flags for a possibly incomplete Application."""
    words = word_count(application.why_on_swift)
    return QualificationSignal(
        has_portfolio=has_portfolio(application.portfolio),
        has_experience=has_experience(application.experience),
        has_thoughtful_answer=words >= THOUGHTFUL_WORD_COUNT,
        word_count=words,
    )


def check_auto_rejection(application) -> bool:
    """Hard gate applied to submitted data.

    Accepts an Application or its frozen SubmittedApplication snapshot.
    """
    if not application.portfolio:
        return True
    if application.experience == Experience.JUNIOR.value:
        return True
    if word_count(application.why_on_swift) < MIN_WORD_COUNT:
        return True
    return False


def pass_criteria(signal: QualificationSignal) -> list[tuple[str, bool]]:
    """Labelled criteria in display order."""
    flags = (signal.has_portfolio, signal.has_experience, signal.has_thoughtful_answer)
    return list(zip(CRITERIA_LABELS, flags))
