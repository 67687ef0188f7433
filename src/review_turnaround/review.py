"""Review interval extraction and weekend-adjusted duration computation.

This module turns a pull request timeline into review rounds:
- Each ``reviewed`` event closes one interval.
- The interval starts at the most recent review request, or at the most recent
  commit once that request has been consumed by an earlier review.
- Durations subtract one full day for every Saturday or Sunday touched by the
  interval, so short intervals touching a weekend can come out negative.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from .models import (
    CommittedEvent,
    PullRequest,
    ReportRow,
    ReviewedEvent,
    ReviewInterval,
    ReviewRequestedEvent,
    TimelineEvent,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400
_WEEKEND_WEEKDAYS = (5, 6)


def extract_review_intervals(pr: PullRequest, events: Sequence[TimelineEvent]) -> List[ReviewInterval]:
    """Rebuild the request-to-review intervals of one pull request.

    Events are consumed in the order given, which the timeline source returns
    chronologically. Both the pending request and the last commit start at the
    pull request's creation time. A request without a timestamp is carried
    through as ``None`` rather than replaced by the last commit.
    """
    requested_at: Optional[datetime] = pr.created_at
    committed_at: Optional[datetime] = pr.created_at
    request_consumed = False
    intervals: List[ReviewInterval] = []

    for event in events:
        if isinstance(event, CommittedEvent):
            committed_at = event.committed_at
        elif isinstance(event, ReviewRequestedEvent):
            requested_at = event.created_at
            request_consumed = False
        elif isinstance(event, ReviewedEvent):
            intervals.append(
                ReviewInterval(
                    pr_number=pr.number,
                    requested_at=committed_at if request_consumed else requested_at,
                    reviewed_at=event.submitted_at,
                )
            )
            # a later review without a re-request is measured from the last commit
            request_consumed = True

    logger.debug(
        "Extracted review intervals",
        extra={"pr_number": pr.number, "events": len(events), "intervals": len(intervals)},
    )
    return intervals


def count_weekend_days(start: datetime, end: datetime) -> int:
    """Count Saturdays and Sundays among the calendar days of ``[start, end]``.

    Both endpoint days are included. Returns ``0`` when ``end`` falls on an
    earlier day than ``start``.
    """
    day = start.date()
    last_day = end.date()
    weekend_days = 0

    while day <= last_day:
        if day.weekday() in _WEEKEND_WEEKDAYS:
            weekend_days += 1
        day += timedelta(days=1)

    return weekend_days


def compute_business_seconds(start: datetime, end: datetime) -> int:
    """Compute whole elapsed seconds minus a full day per weekend day touched."""
    total_seconds = int((end - start).total_seconds())
    return total_seconds - count_weekend_days(start, end) * SECONDS_PER_DAY


def compute_business_days(start: Optional[datetime], end: Optional[datetime]) -> Optional[float]:
    """Compute the weekend-adjusted duration in fractional days.

    Returns ``None`` when either instant is missing, for example when a
    ``reviewed`` event carried no ``submitted_at`` timestamp.
    """
    if start is None or end is None:
        return None

    return compute_business_seconds(start, end) / SECONDS_PER_DAY


def build_report_rows(pr: PullRequest, intervals: Sequence[ReviewInterval]) -> List[ReportRow]:
    """Combine pull request metadata with each interval's weekend-adjusted duration."""
    return [
        ReportRow(
            number=pr.number,
            author_login=pr.author_login,
            title=pr.title,
            requested_at=interval.requested_at,
            reviewed_at=interval.reviewed_at,
            business_days=compute_business_days(interval.requested_at, interval.reviewed_at),
        )
        for interval in intervals
    ]
