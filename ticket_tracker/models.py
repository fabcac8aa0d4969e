from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Issue:
    key: str
    summary: str
    created: str
    project: str

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Issue":
        """Build an issue from one element of a search response.

        Raises KeyError or TypeError when a required field is missing.
        """
        fields = payload["fields"]
        return cls(
            key=payload["key"],
            summary=fields.get("summary") or "",
            created=fields["created"],
            project=fields["project"]["key"],
        )
