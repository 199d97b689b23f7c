"""
Benchmark weighted selection across table sizes.

The bucket walk is linear in the number of entries; this prints the
per-draw cost for a few sizes so regressions show up.

Run:
    python -m drawtable.benchmarks.benchmark_selection

Optional env overrides:
    BENCH_SIZES, BENCH_DRAWS, BENCH_REPEATS, BENCH_BASE_SEED

Examples:
    BENCH_SIZES=10,1000 BENCH_DRAWS=5000 python -m drawtable.benchmarks.benchmark_selection
"""

import os
import statistics
import time

from drawtable.runtime.rng import RNG
from drawtable.table.weighted import WeightedTable


def _env_int(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_sizes(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    out = []
    for part in raw.split(","):
        token = part.strip()
        if not token:
            continue
        try:
            size = int(token)
        except ValueError:
            continue
        if size > 0:
            out.append(size)
    return out or default


BENCH_SIZES = _env_sizes("BENCH_SIZES", [10, 100, 1000])
BENCH_DRAWS = _env_int("BENCH_DRAWS", 20_000)
BENCH_REPEATS = _env_int("BENCH_REPEATS", 3)
BENCH_BASE_SEED = _env_int("BENCH_BASE_SEED", 42)


def _build_table(size, seed):
    rng = RNG(RNG.derive_seed(seed, "benchmark", "weights", size))
    return WeightedTable.from_sequence(
        (f"item_{idx}", rng.uniform_int_inclusive(1, 100)) for idx in range(size)
    )


def _run_once(size, seed):
    table = _build_table(size, seed)
    rng = RNG(RNG.derive_seed(seed, "benchmark", "draws", size))
    started = time.perf_counter()
    for _ in range(BENCH_DRAWS):
        table.weighted_random(rng=rng)
    elapsed = time.perf_counter() - started
    return {
        "elapsed_sec": elapsed,
        "per_draw_us": elapsed / max(1, BENCH_DRAWS) * 1e6,
        "size": int(size),
    }


def main():
    seeds = [BENCH_BASE_SEED + idx for idx in range(BENCH_REPEATS)]

    print("[BENCHMARK] weighted selection")
    print(f"sizes={BENCH_SIZES} draws={BENCH_DRAWS} repeats={BENCH_REPEATS}")

    print("\n[SUMMARY]")
    for size in BENCH_SIZES:
        rows = [_run_once(size, seed) for seed in seeds]
        per_draw = [row["per_draw_us"] for row in rows]
        print(
            f"  size={size:<6} avg={statistics.mean(per_draw):.2f}us "
            f"median={statistics.median(per_draw):.2f}us "
            f"min={min(per_draw):.2f}us max={max(per_draw):.2f}us"
        )


if __name__ == "__main__":
    main()
