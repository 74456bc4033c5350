"""Load the YAML configuration file and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = Path("config.yaml")
API_BASE_URL_ENV = "ONSWIFT_API_BASE_URL"


@dataclass
class Config:
    api_base_url: str = ""
    clear_on_return: bool = False
    log_file: str = ""


def load_config(config_path: Path | None = None) -> Config:
    """Load config.yaml and .env, return Config.

    An explicitly named config file must exist. When no path is given the
    default config.yaml is optional and missing settings fall back to defaults.
    The API base URL comes from the environment first, then the file.
    """
    load_dotenv()

    explicit = config_path is not None
    path = Path(config_path) if explicit else DEFAULT_CONFIG_PATH

    raw: dict = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(
            f"Config not found: {path}\n"
            "Copy config.example.yaml to config.yaml and fill in your details."
        )

    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {path}")

    sections = {}
    for name in ("api", "session", "logging"):
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a mapping, got: {section!r}")
        sections[name] = section
    api = sections["api"]
    session = sections["session"]
    logging_settings = sections["logging"]

    # Not validated: a bad URL surfaces as a failed submission
    base_url = os.getenv(API_BASE_URL_ENV) or api.get("base_url") or ""

    clear_on_return = session.get("clear_on_return", False)
    if not isinstance(clear_on_return, bool):
        raise ValueError(
            f"session.clear_on_return must be true or false, got: {clear_on_return!r}"
        )

    return Config(
        api_base_url=str(base_url).rstrip("/"),
        clear_on_return=clear_on_return,
        log_file=logging_settings.get("file", "") or "",
    )
