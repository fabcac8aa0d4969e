"""Jira REST client for the search endpoint."""

from __future__ import annotations

import logging

import requests

from .config import Credentials

logger = logging.getLogger(__name__)

SEARCH_URI = "/search?jql={field}={value}+order+by+created&startAt=0&maxResults={max_results}"


def build_search_uri(field: str, value: str, max_results: int) -> str:
    return SEARCH_URI.format(field=field, value=value, max_results=max_results)


class JiraClient:
    """Issues basic-auth requests against the configured Jira API root."""

    def __init__(self, credentials: Credentials, timeout: float | None = None):
        self.credentials = credentials
        self.timeout = timeout
        self.session = requests.Session()
        self.session.auth = (credentials.login, credentials.password)
        self.session.headers.update({"Accept": "application/json"})

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def query(self, uri: str) -> bytes:
        """GET ``credentials.url + uri`` and return the raw body.

        Failures are logged and turned into an empty body; nothing is retried.
        """
        url = f"{self.credentials.url}{uri}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning("Error calling %s: %s", url, exc)
            return b""

        if not response.ok:
            logger.warning("Jira returned %d for %s: %s", response.status_code, url, response.text[:200])
            return b""

        return response.content

    def search(self, field: str, value: str, max_results: int) -> bytes:
        return self.query(build_search_uri(field, value, max_results))
