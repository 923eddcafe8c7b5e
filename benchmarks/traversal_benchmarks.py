"""Time the traversal engine over generated square nested arrays."""

from __future__ import annotations

import argparse
import json
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from _bench_utils import host_metadata, mean, percentile

from nested_array import build_shape, nested_fill, nested_includes_from_last, nested_map, shape
from nested_array.arrays import to_jax


@dataclass(frozen=True)
class Case:
    name: str
    run: Callable[[list[Any]], object]
    repeats: int


@dataclass(frozen=True)
class Row:
    name: str
    n: int
    depth: int
    mean_ms: float
    p50_ms: float
    p95_ms: float
    min_ms: float
    max_ms: float
    repeats: int
    samples: int


CASES = (
    Case("shape", lambda grid: shape(grid), repeats=20),
    Case("nested_map", lambda grid: nested_map(grid, lambda v: v + 1), repeats=10),
    Case("nested_fill", lambda grid: nested_fill(grid, 0, [1], [-1]), repeats=10),
    Case("includes_from_last_miss", lambda grid: nested_includes_from_last(grid, -1), repeats=10),
    Case("to_jax", lambda grid: to_jax(grid).block_until_ready(), repeats=5),
)


def _run_case(case: Case, n: int, depth: int, *, samples: int) -> Row:
    grid = build_shape([n] * depth, lambda *coords: sum(coords))
    rows: list[float] = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(case.repeats):
            case.run(grid)
        end = time.perf_counter()
        rows.append((end - start) * 1e3 / case.repeats)
    return Row(
        name=case.name,
        n=n,
        depth=depth,
        mean_ms=mean(rows),
        p50_ms=percentile(rows, 0.50),
        p95_ms=percentile(rows, 0.95),
        min_ms=min(rows),
        max_ms=max(rows),
        repeats=case.repeats,
        samples=samples,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ns", default="8,16,32", help="comma-separated axis lengths")
    parser.add_argument("--depth", type=int, default=3, help="number of axes in each generated array")
    parser.add_argument("--samples", type=int, default=3, help="timing samples")
    parser.add_argument("--json-out", default="", help="optional output JSON")
    args = parser.parse_args()

    ns = [int(x.strip()) for x in args.ns.split(",") if x.strip()]

    rows: list[Row] = []
    print("Traversal benchmark")
    for n in ns:
        for case in CASES:
            row = _run_case(case, n, args.depth, samples=args.samples)
            rows.append(row)
            print(f"{case.name:24} n={n:4d} mean={row.mean_ms:8.3f}ms p95={row.p95_ms:8.3f}ms")

    if args.json_out:
        outpath = Path(args.json_out)
        outpath.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "timestamp_utc": datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ"),
            "host": host_metadata(),
            "sizes": ns,
            "depth": args.depth,
            "samples": args.samples,
            "rows": [asdict(row) for row in rows],
        }
        outpath.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote JSON: {outpath}")


if __name__ == "__main__":
    main()
