"""
Time union and find across the disjoint set representations.

Usage:
    python benchmarks/run_benchmarks.py

Prints a markdown table of median timings per backend and size.
"""

from __future__ import annotations

import random
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from disjoint_set.core.assoc import AssocDisjointSet
from disjoint_set.core.disjoint_set import DisjointSet
from disjoint_set.core.mutable import MutableDisjointSet

SIZES = [100, 1_000, 5_000]
ASSOC_LIMIT = 1_000  # linear lookups make larger sizes impractical
REPEATS = 5


# ── Workloads ─────────────────────────────────────────────────────────────────


def random_pairs(n: int, seed: int = 42) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(n)]


def persistent_unions(pairs: list[tuple[int, int]]) -> DisjointSet[int]:
    dset: DisjointSet[int] = DisjointSet.empty()
    for x, y in pairs:
        dset = dset.union(x, y)
    return dset


def assoc_unions(pairs: list[tuple[int, int]]) -> AssocDisjointSet[int]:
    return AssocDisjointSet.from_list(pairs)


def mutable_unions(pairs: list[tuple[int, int]]) -> MutableDisjointSet[int]:
    uf: MutableDisjointSet[int] = MutableDisjointSet()
    for x, y in pairs:
        uf.union(x, y)
    return uf


def median_ms(fn, *args) -> float:  # type: ignore[no-untyped-def]
    samples = []
    for _ in range(REPEATS):
        start = time.perf_counter()
        fn(*args)
        samples.append((time.perf_counter() - start) * 1000)
    return statistics.median(samples)


# ── Report ────────────────────────────────────────────────────────────────────


def main() -> None:
    rows: list[str] = []
    for n in SIZES:
        pairs = random_pairs(n)
        built = DisjointSet.from_list(pairs)
        elements = list(built)

        rows.append(f"| persistent union | {n} | {median_ms(persistent_unions, pairs):.2f} |")
        rows.append(f"| bulk from_list | {n} | {median_ms(DisjointSet.from_list, pairs):.2f} |")
        rows.append(f"| mutable union | {n} | {median_ms(mutable_unions, pairs):.2f} |")
        rows.append(
            f"| find (all elements) | {n} | "
            f"{median_ms(lambda: [built.find(x) for x in elements]):.2f} |"
        )
        if n <= ASSOC_LIMIT:
            rows.append(f"| assoc union | {n} | {median_ms(assoc_unions, pairs):.2f} |")

    print("| Operation | Pairs | Median (ms) |")
    print("|---|---|---|")
    for row in rows:
        print(row)


if __name__ == "__main__":
    main()
