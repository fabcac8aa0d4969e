from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import (
    DEFAULT_CONFIG_PATH,
    MAX_SEARCH_RESULTS,
    TRACKING_FIELDS,
    TRACKING_METHOD,
    WAIT_INTERVAL_SECS,
    ConfigError,
    load_credentials,
)
from .jira_client import JiraClient
from .tracker import IssueTracker

logger = logging.getLogger("ticket_tracker")


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    console = console or Console(stderr=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%Y/%m/%d %H:%M:%S]",
        handlers=[RichHandler(console=console, show_path=False, markup=False, omit_repeated_times=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ticket-tracker",
        description=(
            "Continuously search Jira for tickets created by a user in a project"
            " and act on every new one."
        ),
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="The path to the jira config to connect to.",
    )
    parser.add_argument("--project", default="", help="The jira project to search for tickets in.")
    parser.add_argument("--user", default="", help="The user to search for tickets for.")
    parser.add_argument(
        "--field",
        choices=TRACKING_FIELDS,
        default=TRACKING_METHOD,
        help="Track tickets reported by the user or assigned to them.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=WAIT_INTERVAL_SECS,
        help="Seconds between searches; only tickets newer than this are reported.",
    )
    parser.add_argument("--max-results", type=int, default=MAX_SEARCH_RESULTS)
    parser.add_argument(
        "--queue-size",
        type=int,
        default=1,
        help="Bound on undelivered tickets (0 = unbounded).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout per jira request in seconds.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval must be greater than 0")
    if args.queue_size < 0:
        parser.error("--queue-size must not be negative")
    configure_logging(args.verbose)

    if not args.project:
        logger.error("Please specify a project")
        return 1
    if not args.user:
        logger.error("Please specify a user")
        return 1

    try:
        credentials = load_credentials(args.config)
    except ConfigError as error:
        logger.error("%s", error)
        return 1

    logger.info("Searching in [%s] for %s", args.project, args.user)

    with JiraClient(credentials, timeout=args.timeout) as client:
        tracker = IssueTracker(
            client,
            args.user,
            args.project,
            field=args.field,
            interval=args.interval,
            max_results=args.max_results,
            queue_size=args.queue_size,
            logger=logger,
        )
        tracker.run_forever()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
