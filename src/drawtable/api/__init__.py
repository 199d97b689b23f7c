"""Import-first API models and helpers."""
