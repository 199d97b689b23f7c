"""``python -m drawtable`` prints a usage hint; the package is import-only."""

from __future__ import annotations

import sys

USAGE = """\
drawtable does not provide a CLI. Build tables from Python instead:

    from drawtable import WeightedTable
    table = WeightedTable([("common", 90), ("rare", 10)])
    table.weighted_random()

Or run sample_run.py for a sampled report of the bundled loot table."""


def main(argv=None) -> int:
    print(USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
