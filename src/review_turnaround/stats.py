"""Statistics helpers for the optional review turnaround summary.

This module provides utilities for:
- Computing linear-interpolation percentiles from pre-sorted samples.
- Aggregating P50, P75, P90 and count over business-day durations.
- Rendering a short human-readable summary for standard error.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence


def calculate_percentile(sorted_values: Sequence[float], p: float) -> Optional[float]:
    """Interpolate the ``p``-th percentile (0-100) of ascending samples; ``None`` if empty."""
    if not 0 <= p <= 100:
        raise ValueError("Percentile 'p' must be in the range [0, 100].")

    if not sorted_values:
        return None

    rank = (len(sorted_values) - 1) * (p / 100.0)
    below = math.floor(rank)
    fraction = rank - below
    if fraction == 0:
        return sorted_values[below]

    return sorted_values[below] + (sorted_values[below + 1] - sorted_values[below]) * fraction


def compute_statistics(samples: Sequence[Optional[float]]) -> Dict[str, Optional[float]]:
    """Compute P50, P75, P90, and sample count for business-day durations.

    ``None`` and NaN samples are ignored. Negative samples are kept: they are
    a known outcome of the whole-day weekend subtraction.
    """
    clean_samples: List[float] = sorted(
        sample for sample in samples if sample is not None and not math.isnan(sample)
    )

    return {
        "p50": calculate_percentile(clean_samples, 50),
        "p75": calculate_percentile(clean_samples, 75),
        "p90": calculate_percentile(clean_samples, 90),
        "count": float(len(clean_samples)),
    }


def format_days(days: Optional[float]) -> str:
    """Format a business-day duration with two decimals, or ``"n/a"``."""
    if days is None:
        return "n/a"
    return f"{days:.2f}d"


def generate_summary(repository: str, pull_request_count: int, business_days: Sequence[Optional[float]]) -> str:
    """Generate a human-readable review turnaround summary for a repository."""
    stats = compute_statistics(business_days)

    lines = [
        f"Repository: {repository}",
        "Review Turnaround Summary (weekends excluded)",
        f"   Pull requests: {pull_request_count}",
        f"   Review rounds: {int(stats['count'] or 0)}",
        f"   P50: {format_days(stats['p50'])}",
        f"   P75: {format_days(stats['p75'])}",
        f"   P90: {format_days(stats['p90'])}",
    ]

    return "\n".join(lines)
