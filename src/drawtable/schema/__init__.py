"""Table definitions, defaults and validation."""
