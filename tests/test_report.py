"""Tests for CSV report emission."""

import csv
import io
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import Mock

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from review_turnaround.models import ReportRow
from review_turnaround.report import HEADER, ReportWriter, format_business_days, format_timestamp


def _row(title: str = "Add widget", business_days: float | None = 3.0) -> ReportRow:
    return ReportRow(
        number=42,
        author_login="octocat",
        title=title,
        requested_at=datetime(2024, 1, 4, tzinfo=timezone.utc),
        reviewed_at=datetime(2024, 1, 9, tzinfo=timezone.utc),
        business_days=business_days,
    )


def test_write_header_only_when_no_rows():
    """Verify a report without review rounds contains only the header row."""
    stream = io.StringIO()
    writer = ReportWriter(stream)

    writer.write_header()
    writer.write_rows([])
    writer.write_rows([])

    assert stream.getvalue() == ",".join(HEADER) + "\n"
    assert writer.rows_written == 0


def test_write_rows_formats_columns_in_order():
    """Verify each row carries number, login, title, both instants, and the duration."""
    stream = io.StringIO()
    writer = ReportWriter(stream)

    writer.write_header()
    writer.write_rows([_row()])

    lines = stream.getvalue().splitlines()
    assert lines[1] == "42,octocat,Add widget,2024-01-04T00:00:00Z,2024-01-09T00:00:00Z,3.0"
    assert writer.rows_written == 1


def test_write_rows_quotes_title_with_comma_and_round_trips():
    """Verify titles containing delimiters or quotes are quoted and parse back unchanged."""
    title = 'Fix "parser", lexer\nand docs'
    stream = io.StringIO()
    writer = ReportWriter(stream)

    writer.write_header()
    writer.write_rows([_row(title=title)])

    assert '"Fix ""parser"", lexer' in stream.getvalue()
    parsed = list(csv.reader(io.StringIO(stream.getvalue())))
    assert parsed[0] == list(HEADER)
    assert parsed[1][2] == title


def test_write_rows_leaves_missing_values_empty():
    """Verify missing timestamps and durations are written as empty fields."""
    stream = io.StringIO()
    writer = ReportWriter(stream)
    row = _row(business_days=None)
    row.reviewed_at = None

    writer.write_rows([row])

    assert stream.getvalue() == "42,octocat,Add widget,2024-01-04T00:00:00Z,,\n"


def test_write_rows_flushes_stream_per_call():
    """Verify rows are flushed as soon as they are written."""
    stream = Mock()
    writer = ReportWriter(stream)

    writer.write_header()
    writer.write_rows([_row()])

    assert stream.flush.call_count == 2


def test_format_timestamp_converts_to_utc():
    """Verify timestamps with offsets are rendered in UTC with a Z suffix."""
    value = datetime(2024, 1, 4, 9, 0, tzinfo=timezone(timedelta(hours=9)))

    assert format_timestamp(value) == "2024-01-04T00:00:00Z"
    assert format_timestamp(None) == ""


def test_format_business_days_keeps_sign_and_precision():
    """Verify durations are written as plain decimals, including negative ones."""
    assert format_business_days(3) == "3.0"
    assert format_business_days(-0.9166666666666666) == "-0.9166666666666666"
    assert format_business_days(None) == ""
