"""Field-level validation rules for an Application.

Each field has an ordered list of checks. A check is a predicate over the
field's raw string plus the message shown when the predicate fails. The first
failing check wins, so a field reports at most one message at a time.

Everything here is pure: the same Application always yields the same error
map, which is what lets callers re-run validation on every keystroke.
"""

from __future__ import annotations

import re
from typing import Callable
from urllib.parse import urlparse

from onswift.models import CHOICE_FIELDS, FORM_ALIASES, Application

MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10
MIN_PROJECT_LENGTH = 10
MAX_PROJECT_LENGTH = 100
MAX_ANSWER_LENGTH = 500
MIN_WORD_COUNT = 20

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]+$")

Check = tuple[Callable[[str], bool], str]


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens; empty or blank text has none."""
    return len(text.split())


def is_valid_url(value: str) -> bool:
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if not parsed.scheme or not parsed.netloc:
        return False
    return " " not in value.strip()


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def _one_of(field_name: str) -> Callable[[str], bool]:
    allowed = set(CHOICE_FIELDS[field_name].values())
    return lambda v: v in allowed


def _project_checks() -> list[Check]:
    return [
        (lambda v: len(v) <= MAX_PROJECT_LENGTH, "Maximum 100 characters"),
        (lambda v: len(v) >= MIN_PROJECT_LENGTH, "Please describe your project"),
    ]


RULES: dict[str, list[Check]] = {
    "full_name": [
        (lambda v: len(v) >= MIN_NAME_LENGTH, "Name must be at least 2 characters"),
    ],
    "email": [
        (is_valid_email, "Please enter a valid email address"),
    ],
    "phone": [
        (lambda v: len(v) >= MIN_PHONE_LENGTH, "Please enter a valid phone number"),
    ],
    "category": [
        (_one_of("category"), "Please select a category"),
    ],
    "experience": [
        (_one_of("experience"), "Please select your experience level"),
    ],
    "portfolio": [
        (lambda v: len(v) > 0, "Portfolio link is required"),
        (is_valid_url, "Please enter a valid URL"),
    ],
    "project1": _project_checks(),
    "project2": _project_checks(),
    "project3": _project_checks(),
    "hourly_rate": [
        (_one_of("hourly_rate"), "Please select your hourly rate"),
    ],
    "availability": [
        (_one_of("availability"), "Please select your weekly availability"),
    ],
    "why_on_swift": [
        (lambda v: len(v) > 0, "This field is required"),
        (lambda v: len(v) <= MAX_ANSWER_LENGTH, "Maximum 500 characters"),
        (lambda v: count_words(v) >= MIN_WORD_COUNT, "Please write at least 20 words"),
    ],
}


def validate_field(name: str, value: str | None) -> str | None:
    """Return the first violated rule's message for one field, or None."""
    name = FORM_ALIASES.get(name, name)
    if name not in RULES:
        raise KeyError(f"No validation rules for field: {name}")
    value = value or ""
    for predicate, message in RULES[name]:
        if not predicate(value):
            return message
    return None


def validate(application: Application) -> dict[str, str]:
    """Map each invalid field to its message. Valid fields are omitted."""
    errors: dict[str, str] = {}
    for name in RULES:
        message = validate_field(name, getattr(application, name))
        if message is not None:
            errors[name] = message
    return errors


def is_valid(application: Application) -> bool:
    return not validate(application)
