"""Parsing and filtering of Jira search results."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Callable

from .models import Issue

logger = logging.getLogger(__name__)

# 2006-01-02T15:04:05.000-0700
DATE_LAYOUT = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_PATTERN = re.compile(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}[+-]\d{4}")

Clock = Callable[[], datetime]
IssuePredicate = Callable[[Issue], bool]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_created(value: str) -> datetime:
    # strptime alone also takes 1-6 fractional digits, "Z" and "+HH:MM"
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} does not match YYYY-MM-DDTHH:MM:SS.sss+HHMM")
    return datetime.strptime(value, DATE_LAYOUT)


def issue_filter(project: str, max_age: float, now: Clock | None = None) -> IssuePredicate:
    """Return a predicate matching issues in ``project`` younger than ``max_age`` seconds."""
    clock = now or utc_now

    def is_match(issue: Issue) -> bool:
        try:
            created = parse_created(issue.created)
        except (TypeError, ValueError) as exc:
            logger.warning("Error parsing time %s of %s: %s", issue.created, issue.key, exc)
            return False
        age = (clock() - created).total_seconds()
        return age < max_age and issue.project == project

    return is_match


def parse_issues(raw: bytes | str) -> list[Issue]:
    """Decode a search response body into issues, in response order."""
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Error parsing json: %s", exc)
        return []

    items = payload.get("issues") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        logger.warning("Error parsing json: no issue list in search response")
        return []

    issues: list[Issue] = []
    for item in items:
        try:
            issues.append(Issue.from_api(item))
        except (AttributeError, KeyError, TypeError) as exc:
            logger.warning("Skipping malformed issue %r: %s", item, exc)
    return issues


def extract_matches(
    raw: bytes | str,
    project: str,
    max_age: float,
    now: Clock | None = None,
) -> list[Issue]:
    is_match = issue_filter(project, max_age, now=now)
    return [issue for issue in parse_issues(raw) if is_match(issue)]
