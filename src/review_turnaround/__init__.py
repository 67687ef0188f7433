"""Review turnaround metrics for merged GitHub pull requests."""
