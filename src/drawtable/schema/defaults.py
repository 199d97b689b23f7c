"""
Default settings shared by the table, config loader and sampling report.
"""

WEIGHT_MIN = 0
WEIGHT_MAX = 2**32 - 1

DEFAULT_SEED = 42
DEFAULT_DRAWS = 10_000
DEFAULT_TOLERANCE = 0.02
DEFAULT_TABLE_NAME = "table"

DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = ("info", "quiet")
