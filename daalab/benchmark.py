"""Time the sorting algorithms on sorted, reversed and random inputs."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from daalab.sorting import heap_sort, insertion_sort, merge_sort, quick_sort

ALGORITHMS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}

DEFAULT_SIZE = 10000


@dataclass(frozen=True)
class CaseTiming:
    """CPU time spent sorting one kind of input."""

    case: str
    seconds: float


def case_inputs(n: int, seed: Optional[int] = None) -> list[tuple[str, list[int]]]:
    """Build the best, worst and average case inputs of size ``n``."""
    if n < 1:
        raise ValueError("size must be at least 1")
    rng = random.Random(seed)
    return [
        ("Best Case", list(range(n))),
        ("Worst Case", list(range(n - 1, -1, -1))),
        ("Average Case", [rng.randrange(n) for _ in range(n)]),
    ]


def time_sort(
    sort: Callable[[Iterable[int]], list[int]], n: int, seed: Optional[int] = None
) -> list[CaseTiming]:
    """Measure the processor time ``sort`` takes on each case input."""
    timings = []
    for name, data in case_inputs(n, seed):
        start = time.process_time()
        sort(data)
        timings.append(CaseTiming(name, time.process_time() - start))
    return timings


def format_timings(timings: Iterable[CaseTiming]) -> str:
    """Render timings one per line."""
    return "\n".join(f"{t.case}: {t.seconds:f} seconds" for t in timings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark for one algorithm and print its timings."""
    parser = argparse.ArgumentParser(
        prog="daalab-benchmark", description="Time a sorting algorithm."
    )
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("size must be at least 1")

    print(format_timings(time_sort(ALGORITHMS[args.algorithm], args.size, args.seed)))
    return 0