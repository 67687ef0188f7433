"""Tests for summary statistics over business-day durations."""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from review_turnaround.stats import calculate_percentile, compute_statistics, format_days, generate_summary


def test_calculate_percentile_empty_returns_none():
    """Verify percentile calculation returns None when sample list is empty."""
    assert calculate_percentile([], 50) is None


def test_calculate_percentile_multiple_values_p50_p75_p90():
    """Verify linear interpolation percentile values for a multi-value sorted sample."""
    values = [1.0, 2.0, 3.0, 4.0]
    assert calculate_percentile(values, 50) == pytest.approx(2.5)
    assert calculate_percentile(values, 75) == pytest.approx(3.25)
    assert calculate_percentile(values, 90) == pytest.approx(3.7)


def test_calculate_percentile_out_of_range_raises():
    """Verify percentiles outside [0, 100] are rejected."""
    with pytest.raises(ValueError):
        calculate_percentile([1.0], 101)


def test_compute_statistics_keeps_negative_and_drops_missing_samples():
    """Verify negative weekend-adjusted durations are kept while None and NaN are ignored."""
    stats = compute_statistics([3.0, None, -0.5, float("nan"), 1.0])

    assert stats["count"] == 3
    assert stats["p50"] == pytest.approx(1.0)
    assert stats["p90"] == pytest.approx(2.6)


def test_format_days_handles_none_and_values():
    """Verify day formatting renders two decimals or n/a."""
    assert format_days(None) == "n/a"
    assert format_days(3.0) == "3.00d"
    assert format_days(-0.25) == "-0.25d"


def test_generate_summary_contains_counts_and_percentiles():
    """Verify the summary lists the repository, counts, and formatted percentiles."""
    summary = generate_summary("octo/widgets", 2, [1.0, 2.0, 3.0])

    assert "Repository: octo/widgets" in summary
    assert "Pull requests: 2" in summary
    assert "Review rounds: 3" in summary
    assert "P50: 2.00d" in summary
    assert "P75: 2.50d" in summary
    assert "P90: 2.80d" in summary


def test_generate_summary_without_samples():
    """Verify the summary reports n/a percentiles when there are no review rounds."""
    summary = generate_summary("octo/widgets", 1, [])

    assert "Review rounds: 0" in summary
    assert "P50: n/a" in summary
