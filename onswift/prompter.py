"""Terminal front end for the application form.

Walks the applicant through every field, re-validating after each answer,
and renders the pass criteria, counters and terminal screens.
"""

from __future__ import annotations

from enum import Enum

from onswift.models import CHOICE_FIELDS, SubmitResult
from onswift.qualification import pass_criteria
from onswift.session import FormSession, FormState


class ScreenChoice(Enum):
    RETURN = "return"
    QUIT = "quit"


# ANSI color helpers
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"

FIELD_PROMPTS = [
    ("full_name", "Full Name", "John Doe"),
    ("email", "Email", "john@example.com"),
    ("phone", "Phone", "+1 (555) 123-4567"),
    ("category", "Primary Category", ""),
    ("experience", "Years of Experience", ""),
    ("portfolio", "Portfolio Link", "https://behance.net/yourname or https://yourportfolio.com"),
    ("project1", "Project 1", "Brief description of the project, your role, and impact..."),
    ("project2", "Project 2", "Brief description of the project, your role, and impact..."),
    ("project3", "Project 3", "Brief description of the project, your role, and impact..."),
    ("hourly_rate", "Hourly Rate (USD)", ""),
    ("availability", "Weekly Availability", ""),
    ("why_on_swift", "Why OnSwift?", "Tell us why you want to join OnSwift..."),
]

SUCCESS_MESSAGE = (
    "Thanks for applying to OnSwift! We'll review your application within "
    "48 hours and email you next steps."
)
REJECTED_MESSAGE = (
    "Unfortunately, your application doesn't meet our current criteria. "
    "You're welcome to reapply once you have more experience or a stronger portfolio."
)


class FormPrompter:
    """Interactive terminal UI driving a FormSession."""

    def __init__(self, session: FormSession):
        self._session = session

    def fill(self) -> FormState:
        """Prompt for each field until it validates. Returns the final state."""
        print(f"\n{'=' * 60}")
        print(f"{BOLD}{CYAN} Join OnSwift{RESET}")
        print(f"{DIM}Apply to work with top-tier clients. We're looking for experienced "
              f"freelancers who deliver exceptional quality.{RESET}")
        print(f"{'=' * 60}")

        state = self._session.state()
        for name, label, placeholder in FIELD_PROMPTS:
            state = self._ask_field(name, label, placeholder)
        self.show_pass_criteria(state)
        return state

    def _ask_field(self, name: str, label: str, placeholder: str) -> FormState:
        current = getattr(self._session.application, name)
        while True:
            if name in CHOICE_FIELDS:
                value = self._ask_choice(name, label, current)
            else:
                hint = f" {DIM}({placeholder}){RESET}" if placeholder else ""
                shown = f" [{current}]" if current else ""
                value = input(f"{BOLD}{label} *{RESET}{hint}{shown} > ").strip() or current

            state = self._session.update(name, value)
            self._show_counter(name, state)
            error = state.errors.get(name)
            if error is None:
                return state
            print(f"  {RED}{error}{RESET}")
            current = value

    def _ask_choice(self, name: str, label: str, current: str) -> str:
        options = list(CHOICE_FIELDS[name])
        print(f"\n{BOLD}{label} *{RESET}")
        for idx, option in enumerate(options, start=1):
            marker = f" {GREEN}(current){RESET}" if option.value == current else ""
            print(f"    {BOLD}{CYAN}{idx}.{RESET} {option.label}{marker}")

        choice = input(f"{BOLD}Pick 1-{len(options)}{RESET} > ").strip()
        if not choice:
            return current
        try:
            idx = int(choice)
        except ValueError:
            return choice
        if 1 <= idx <= len(options):
            return options[idx - 1].value
        return ""

    def _show_counter(self, name: str, state: FormState) -> None:
        if name not in state.char_counts:
            return
        used, limit = state.char_counts[name]
        colour = RED if used > limit else DIM
        counter = f"{used}/{limit}"
        if name == "why_on_swift":
            counter += f" characters, {state.word_count} words"
        print(f"  {colour}{counter}{RESET}")

    def show_errors(self, state: FormState) -> None:
        for name, message in state.errors.items():
            print(f"  {RED}{name}: {message}{RESET}")

    def show_pass_criteria(self, state: FormState) -> None:
        print(f"\n{BOLD}PASS CRITERIA{RESET}")
        for label, met in pass_criteria(state.signal):
            if met:
                print(f"  {GREEN}[x] {label}{RESET}")
            else:
                print(f"  {DIM}[ ] {label}{RESET}")

    def render_result(self, result: SubmitResult) -> None:
        """Print the terminal screen for a submission result. Never reads input."""
        if result == SubmitResult.SUCCESS:
            print(f"\n{BOLD}{GREEN}Application Submitted!{RESET}")
            print(SUCCESS_MESSAGE)
        else:
            print(f"\n{BOLD}{YELLOW}Application Not Accepted{RESET}")
            print(REJECTED_MESSAGE)

    def show_result(self, result: SubmitResult) -> ScreenChoice:
        """Render a terminal screen and ask what to do next."""
        self.render_result(result)
        if result == SubmitResult.SUCCESS:
            prompt = "[R] Submit Another Application  [Q]uit"
        else:
            prompt = "[R]eturn to Form  [Q]uit"

        while True:
            choice = input(f"\n{BOLD}{prompt}{RESET} > ").strip().lower()
            if choice in ("r", "return", ""):
                return ScreenChoice.RETURN
            elif choice in ("q", "quit"):
                return ScreenChoice.QUIT
            else:
                print("Invalid choice. Use R/Q.")
