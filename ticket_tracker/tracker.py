"""Poller and consumer threads joined by a single handoff queue."""

from __future__ import annotations

import logging
import queue
import threading
from functools import partial
from typing import Callable

from .config import MAX_SEARCH_RESULTS, TRACKING_FIELDS, TRACKING_METHOD, WAIT_INTERVAL_SECS
from .filters import Clock, extract_matches
from .jira_client import JiraClient
from .models import Issue

log = logging.getLogger(__name__)

IssueAction = Callable[[Issue], None]

# How long blocking queue calls wait before rechecking the stop flag
_QUEUE_POLL_SECS = 0.1


def log_issue(issue: Issue, logger: logging.Logger | None = None) -> None:
    """Default action: report the issue key and summary."""
    (logger or log).info("Found: [%s] %s", issue.key, issue.summary)


def make_log_action(logger: logging.Logger) -> IssueAction:
    return partial(log_issue, logger=logger)


class IssueTracker:
    """Polls Jira for recent issues and hands each match to ``action``.

    The poller waits ``interval`` seconds, searches, and puts every match on
    the queue in creation order. The consumer takes issues off one at a time
    and runs the action on each. Both loops run until ``stop()``.
    """

    def __init__(
        self,
        client: JiraClient,
        user: str,
        project: str,
        *,
        field: str = TRACKING_METHOD,
        interval: float = WAIT_INTERVAL_SECS,
        max_results: int = MAX_SEARCH_RESULTS,
        action: IssueAction | None = None,
        logger: logging.Logger | None = None,
        queue_size: int = 1,
        now: Clock | None = None,
    ) -> None:
        if field not in TRACKING_FIELDS:
            raise ValueError(f"field must be one of {TRACKING_FIELDS}, got {field!r}")
        self.client = client
        self.user = user
        self.project = project
        self.field = field
        self.interval = interval
        self.max_results = max_results
        self.logger = logger or log
        self.action = action or make_log_action(self.logger)
        self.now = now
        self.issues: queue.Queue[Issue] = queue.Queue(maxsize=queue_size)
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []

    # ── Poller ──────────────────────────────────────────────────

    def poll_once(self) -> list[Issue]:
        contents = self.client.search(self.field, self.user, self.max_results)
        matches = extract_matches(contents, self.project, self.interval, now=self.now)
        self.logger.debug("Poll for %s=%s returned %d match(es)", self.field, self.user, len(matches))
        return matches

    def run_poller(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                matches = self.poll_once()
            except Exception:
                self.logger.exception("Poll for %s=%s failed", self.field, self.user)
                continue
            for issue in matches:
                if not self._put(issue):
                    return

    def _put(self, issue: Issue) -> bool:
        while not self._stop.is_set():
            try:
                self.issues.put(issue, timeout=_QUEUE_POLL_SECS)
                return True
            except queue.Full:
                continue
        return False

    # ── Consumer ────────────────────────────────────────────────

    def run_consumer(self) -> None:
        while not self._stop.is_set():
            try:
                issue = self.issues.get(timeout=_QUEUE_POLL_SECS)
            except queue.Empty:
                continue
            try:
                self.action(issue)
            except Exception:
                self.logger.exception("Action failed for %s", issue.key)
            finally:
                self.issues.task_done()

    # ── Lifecycle ───────────────────────────────────────────────

    def start(self) -> None:
        self._stop.clear()
        self._threads = [
            threading.Thread(target=self.run_poller, name="issue-poller", daemon=True),
            threading.Thread(target=self.run_consumer, name="issue-consumer", daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        self._stop.set()

    def join(self, timeout: float | None = None) -> None:
        for thread in self._threads:
            thread.join(timeout)

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def run_forever(self) -> None:
        """Start both loops and block until Ctrl-C or ``stop()``."""
        self.start()
        try:
            while not self._stop.wait(1.0):
                pass
        except KeyboardInterrupt:
            self.logger.info("Interrupted, stopping")
        finally:
            self.stop()
            self.join(timeout=self.interval + 1)
