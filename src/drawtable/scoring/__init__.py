"""Draw quality metrics."""
