"""Custom exception types for the review turnaround report."""


class ReviewMetricsError(Exception):
    """Base exception for all expected review report failures."""


class ConfigurationError(ReviewMetricsError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(ReviewMetricsError):
    """Raised when GitHub credentials are unavailable or rejected."""


class ApiError(ReviewMetricsError):
    """Raised when a GitHub API request fails or returns an unexpected response."""
