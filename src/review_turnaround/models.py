"""Domain models for GitHub pull request review metrics.

These dataclasses model only the subset of API payload fields required to
rebuild review intervals. Timeline events are a small tagged union: the three
kinds the extractor acts on carry their decoded timestamp, and every other
kind collapses into ``UnrecognizedEvent``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Union


@dataclass(slots=True)
class PullRequest:
    """Represents a merged pull request as returned by the pull request source."""

    number: int
    title: str
    author_login: str
    author_name: Optional[str]
    created_at: datetime


@dataclass(slots=True)
class CommittedEvent:
    """A commit pushed to the pull request branch."""

    kind: ClassVar[str] = "committed"

    committed_at: Optional[datetime]


@dataclass(slots=True)
class ReviewRequestedEvent:
    """A review explicitly requested from a user or team."""

    kind: ClassVar[str] = "review_requested"

    created_at: Optional[datetime]


@dataclass(slots=True)
class ReviewedEvent:
    """A submitted review (approval, change request or comment review)."""

    kind: ClassVar[str] = "reviewed"

    submitted_at: Optional[datetime]


@dataclass(slots=True)
class UnrecognizedEvent:
    """Any timeline entry the extractor ignores, such as ``merged`` or ``commented``."""

    kind: Optional[str]


TimelineEvent = Union[CommittedEvent, ReviewRequestedEvent, ReviewedEvent, UnrecognizedEvent]


@dataclass(slots=True)
class ReviewInterval:
    """Represents one request-to-review round of a pull request."""

    pr_number: int
    requested_at: Optional[datetime]
    reviewed_at: Optional[datetime]


@dataclass(slots=True)
class ReportRow:
    """Represents one output row of the review turnaround report."""

    number: int
    author_login: str
    title: str
    requested_at: Optional[datetime]
    reviewed_at: Optional[datetime]
    business_days: Optional[float]
