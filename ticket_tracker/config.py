"""Configuration constants and credential loading for the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = "./config.yaml"

# Polling behaviour
WAIT_INTERVAL_SECS = 4  # Also the age window: only issues newer than this are reported
MAX_SEARCH_RESULTS = 20  # Max number of issues returned by one search

# Which JQL field ties an issue to the tracked user
TRACKING_METHOD = "reporter"
TRACKING_FIELDS = ("reporter", "assignee")

REQUIRED_KEYS = ("login", "password", "url")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Credentials:
    login: str
    password: str
    url: str  # e.g. https://jira.whatever.com/rest/api/2


def load_credentials(path: str | Path) -> Credentials:
    """Read login/password/url from a YAML file.

    Raises ConfigError if the file cannot be read or does not hold the
    expected mapping.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Error reading config file {p}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Error parsing yaml in {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {p}, got {type(data).__name__}")

    missing = [key for key in REQUIRED_KEYS if not data.get(key)]
    if missing:
        raise ConfigError(f"Missing {', '.join(missing)} in {p}")

    return Credentials(
        login=str(data["login"]),
        password=str(data["password"]),
        url=str(data["url"]).rstrip("/"),
    )
