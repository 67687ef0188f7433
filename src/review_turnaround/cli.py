"""Command-line argument parsing for the review turnaround report."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import split_repository
from .errors import ConfigurationError


def _repository(value: str) -> str:
    """Validate an ``owner/name`` repository argument.

    Raises:
        argparse.ArgumentTypeError: If value is not of the ``owner/name`` form.
    """
    try:
        owner, name = split_repository(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError("must be of the form OWNER/NAME") from exc

    return f"{owner}/{name}"


def _non_negative_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a number") from exc

    if parsed < 0:
        raise argparse.ArgumentTypeError("must be greater than or equal to 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for report generation.

    Returns:
        Parsed CLI arguments containing the repository, the delay between
        pull requests, the summary flag and the log level.
    """
    parser = argparse.ArgumentParser(
        prog="gh-review-turnaround",
        description=(
            "Report review turnaround (review request to review, weekends excluded) "
            "for the merged pull requests of a GitHub repository as CSV."
        ),
    )

    parser.add_argument(
        "repository",
        type=_repository,
        help="GitHub repository to analyze, as OWNER/NAME.",
    )
    parser.add_argument(
        "--delay",
        type=_non_negative_float,
        default=1.0,
        help="Seconds to wait after each pull request (default: 1.0).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print P50/P75/P90 review turnaround to stderr after the report.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING).",
    )

    return parser.parse_args(argv)
