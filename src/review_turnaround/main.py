"""Entry point orchestration for the review turnaround report."""

from __future__ import annotations

import logging
import sys
import time
from typing import List, Optional, Sequence

from .cli import parse_args
from .config import load_config
from .errors import ApiError, AuthenticationError, ConfigurationError
from .github_client import GitHubClient
from .report import ReportWriter
from .review import build_report_rows, extract_review_intervals
from .stats import generate_summary

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_AUTHENTICATION_ERROR = 3
EXIT_API_ERROR = 4


def orchestrate_review_report(argv: Optional[Sequence[str]] = None) -> int:
    """Run the report end to end and map failures to process exit codes.

    Rows are streamed to stdout as each pull request is processed, so rows
    written before a failure stay in the output.
    """
    try:
        args = parse_args(argv)
        logging.basicConfig(
            level=args.log_level,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        config = load_config(repository=args.repository, delay_seconds=args.delay)
        github_client = GitHubClient(config=config)
        pull_requests = github_client.list_merged_pull_requests()

        writer = ReportWriter(sys.stdout)
        writer.write_header()

        business_days: List[Optional[float]] = []
        for pr in pull_requests:
            events = github_client.list_timeline_events(pr.number)
            rows = build_report_rows(pr, extract_review_intervals(pr, events))
            writer.write_rows(rows)
            business_days.extend(row.business_days for row in rows)
            time.sleep(config.delay_seconds)

        logger.info(
            "Review turnaround report complete",
            extra={
                "repository": config.repository,
                "prs_total": len(pull_requests),
                "rows_written": writer.rows_written,
            },
        )

        if args.summary:
            print(generate_summary(config.repository, len(pull_requests), business_days), file=sys.stderr)

        return EXIT_SUCCESS
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION_ERROR
    except AuthenticationError as exc:
        logger.error("Authentication error: %s", exc)
        return EXIT_AUTHENTICATION_ERROR
    except ApiError as exc:
        logger.error("GitHub API error: %s", exc)
        return EXIT_API_ERROR
    except Exception:
        logger.exception("Unexpected error while generating the review turnaround report")
        return EXIT_UNEXPECTED_ERROR


def main() -> None:
    sys.exit(orchestrate_review_report())


if __name__ == "__main__":
    main()
