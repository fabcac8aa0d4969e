from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from ticket_tracker.config import Credentials

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def jira_time(moment: datetime) -> str:
    """Format a datetime the way Jira reports ``created``."""
    local = moment.astimezone(timezone(timedelta(hours=-7)))
    return local.strftime("%Y-%m-%dT%H:%M:%S.") + f"{local.microsecond // 1000:03d}" + local.strftime("%z")


def issue_payload(key: str, project: str, created: datetime | str, summary: str = "Something broke") -> dict:
    return {
        "key": key,
        "fields": {
            "summary": summary,
            "created": created if isinstance(created, str) else jira_time(created),
            "project": {"key": project},
        },
    }


def search_body(*issues: dict) -> bytes:
    return json.dumps({"startAt": 0, "maxResults": 20, "total": len(issues), "issues": list(issues)}).encode()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(login="bot", password="secret", url="https://jira.example.com/rest/api/2")
