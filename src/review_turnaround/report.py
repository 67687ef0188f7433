"""CSV report emission for review turnaround rows."""

from __future__ import annotations

import csv
from datetime import datetime, timezone
from typing import Iterable, Optional, TextIO

from .models import ReportRow

HEADER = (
    "PR番号",
    "ログイン",
    "タイトル",
    "レビュー依頼日時",
    "レビュー日時",
    "土日を除くレビュー日数",
)


def format_timestamp(value: Optional[datetime]) -> str:
    """Format a datetime as UTC ISO8601 with a ``Z`` suffix, or ``""`` when missing."""
    if value is None:
        return ""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def format_business_days(value: Optional[float]) -> str:
    if value is None:
        return ""
    return repr(float(value))


class ReportWriter:
    """Streams report rows as RFC 4180 style CSV.

    Every ``write_*`` call flushes the underlying stream so rows reach the
    consumer as soon as each pull request has been processed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self.rows_written = 0

    def write_header(self) -> None:
        self._writer.writerow(HEADER)
        self._stream.flush()

    def write_rows(self, rows: Iterable[ReportRow]) -> None:
        for row in rows:
            self._writer.writerow(
                (
                    row.number,
                    row.author_login,
                    row.title,
                    format_timestamp(row.requested_at),
                    format_timestamp(row.reviewed_at),
                    format_business_days(row.business_days),
                )
            )
            self.rows_written += 1
        self._stream.flush()
