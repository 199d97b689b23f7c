"""Quick local sample run for drawtable."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from drawtable import build_table, get_sample_config, sample_table  # noqa: E402
from drawtable.runtime.logging_utils import setup_run_logger  # noqa: E402
from drawtable.schema.validation import parse_table_config  # noqa: E402


def main() -> int:
    try:
        logger, log_path = setup_run_logger(name="drawtable_sample")
        config = parse_table_config(get_sample_config("loot"))
        table = build_table(config, logger=logger)
        report = sample_table(
            table,
            n_draws=20_000,
            seed=config.seed,
            name=config.name,
            logger=logger,
        )
    except Exception as exc:
        print(f"[SAMPLE RUN ERROR] {exc}", file=sys.stderr)
        print("Tip: install dependencies with `pip install -e .`", file=sys.stderr)
        return 1

    status = "OK" if report.success else "DRIFT"
    print(report.frequencies.to_string(index=False))
    print(
        f"[SAMPLE RUN] status={status} draws={report.n_draws} "
        f"max_error={report.max_error:.4f} log={log_path}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
