#!/usr/bin/env python3
"""OnSwift - Freelancer application intake.

Usage:
    python main.py                              # Fill in the form interactively
    python main.py --answers answers.yaml       # Submit answers from a file
    python main.py --answers answers.yaml --check   # Validate only, don't submit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml

from onswift.client import ApplicationClient
from onswift.config_loader import Config, load_config
from onswift.models import Application, SubmitResult
from onswift.prompter import FormPrompter, ScreenChoice
from onswift.session import FormSession
from onswift.utils import setup_logging

logger = logging.getLogger("onswift")


def load_answers(path: Path) -> Application:
    """Read an Application from a YAML mapping of field names to answers."""
    if not path.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Answers file must be a mapping of field names: {path}")
    return Application.from_dict(raw)


def run_check(session: FormSession, prompter: FormPrompter) -> bool:
    """Validate the loaded answers and show the pass criteria. No network call."""
    state = session.state()
    if state.is_valid:
        print("All fields valid.")
    else:
        print(f"{len(state.errors)} field(s) need attention:")
        prompter.show_errors(state)
    prompter.show_pass_criteria(state)
    return state.is_valid


async def run_main(
    args: argparse.Namespace,
    config: Config,
    client: ApplicationClient | None = None,
) -> int:
    """Form loop: fill -> submit -> terminal screen -> maybe return to form.

    Exit codes: 0 accepted, 1 blocked by invalid answers (batch mode) or
    failed check, 2 rejected.
    """
    application = load_answers(Path(args.answers)) if args.answers else None

    if client is None:
        client = ApplicationClient(config.api_base_url)

    async with client:
        session = FormSession(
            client,
            application=application,
            clear_on_return=config.clear_on_return,
        )
        prompter = FormPrompter(session)
        logger.debug("Applications endpoint: %s", client.endpoint)

        if args.check:
            return 0 if run_check(session, prompter) else 1

        interactive = application is None
        while True:
            if interactive:
                prompter.fill()

            result = await session.submit()
            if result == SubmitResult.NONE:
                state = session.state()
                print(f"Please fix {len(state.errors)} field(s) before submitting:")
                prompter.show_errors(state)
                if not interactive:
                    return 1
                continue

            exit_code = 0 if result == SubmitResult.SUCCESS else 2
            if not interactive:
                prompter.render_result(result)
                return exit_code

            choice = prompter.show_result(result)
            session.return_to_form()
            if choice == ScreenChoice.QUIT:
                return exit_code


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="OnSwift freelancer application intake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Set ONSWIFT_API_BASE_URL in .env or api.base_url in config.yaml.",
    )
    parser.add_argument(
        "--answers",
        type=str,
        default=None,
        help="YAML file with the application's answers (skips prompting).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the answers and show pass criteria, but don't submit.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml if present).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    config = load_config(Path(args.config) if args.config else None)
    setup_logging(verbose=args.verbose, log_file=config.log_file or None)
    sys.exit(asyncio.run(run_main(args, config)))


if __name__ == "__main__":
    main()
