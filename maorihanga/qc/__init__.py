"""Input quality checks."""
