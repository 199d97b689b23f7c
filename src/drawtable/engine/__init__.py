"""Sequence-level selection helpers."""
