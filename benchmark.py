"""
Benchmark: naive recursion vs tabulation vs memoization.

All three strategies return the same distance; this script shows what
each one pays for it:
    1. Agreement on a batch of random string pairs
    2. Growth of running time with input length
    3. How much of the table memoization actually fills

The point is NOT the absolute numbers — it is the SHAPE of the curves:
exponential for the naive strategy, quadratic for the other two.
"""

import logging
import os
import random
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from editdist.core import (
    Strategy, get_strategy,
    naive_distance, tabulated_distance, memoized_distance,
)


ALPHABET = "ACGT"
NAIVE_MAX_LENGTH = 9


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def _timed(fn, s1, s2):
    start = time.perf_counter()
    result = fn(s1, s2)
    return result, time.perf_counter() - start


# ═══════════════════════════════════════════════════════════════════
#  §1  AGREEMENT
# ═══════════════════════════════════════════════════════════════════

def benchmark_agreement(rng: random.Random, pairs: int = 300):
    print("=" * 70)
    print("  §1  AGREEMENT (naive == tabulation == memoization)")
    print("=" * 70)
    print()

    mismatches = 0
    for _ in range(pairs):
        s1 = _random_string(rng, rng.randint(0, 7))
        s2 = _random_string(rng, rng.randint(0, 7))
        results = {get_strategy(s)(s1, s2) for s in Strategy}
        if len(results) != 1:
            mismatches += 1
            print(f"  ✗ MISMATCH on {s1!r}, {s2!r}: {sorted(results)}")

    if mismatches == 0:
        print(f"  ✓ All strategies agree on {pairs} random pairs.")
    else:
        print(f"  ✗ {mismatches} disagreements in {pairs} pairs!")
    print()


# ═══════════════════════════════════════════════════════════════════
#  §2  SCALING
# ═══════════════════════════════════════════════════════════════════

def benchmark_scaling(rng: random.Random):
    print("=" * 70)
    print("  §2  SCALING WITH INPUT LENGTH")
    print("=" * 70)
    print()
    print(f"  {'len':>5}  {'naive':>12}  {'tabulation':>12}  {'memoization':>12}")

    for length in (2, 4, 6, 8, 9, 50, 100, 200):
        s1 = _random_string(rng, length)
        s2 = _random_string(rng, length)

        if length <= NAIVE_MAX_LENGTH:
            _, dt_naive = _timed(naive_distance, s1, s2)
            naive_col = f"{dt_naive * 1000:10.2f}ms"
        else:
            naive_col = f"{'—':>12}"

        d_tab, dt_tab = _timed(tabulated_distance, s1, s2)
        d_memo, dt_memo = _timed(memoized_distance, s1, s2)
        assert d_tab == d_memo

        print(f"  {length:>5}  {naive_col}  {dt_tab * 1000:10.2f}ms  {dt_memo * 1000:10.2f}ms")
    print()


# ═══════════════════════════════════════════════════════════════════
#  §3  MEMOIZATION COVERAGE
# ═══════════════════════════════════════════════════════════════════

class _CoverageHandler(logging.Handler):
    """Picks the 'filled N of M cells' records out of editdist.core."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record):
        msg = record.getMessage()
        if msg.startswith("memoized distance filled"):
            self.messages.append(msg)


def benchmark_memo_coverage():
    print("=" * 70)
    print("  §3  MEMOIZATION COVERAGE (cells actually computed)")
    print("=" * 70)
    print()

    core_logger = logging.getLogger("editdist.core")
    handler = _CoverageHandler()
    core_logger.addHandler(handler)
    previous = core_logger.level
    core_logger.setLevel(logging.DEBUG)
    try:
        cases = [
            ("ACGTACGTACGT", "ACGTACGTACGT"),
            ("ACGTACGTACGT", "ACGTTCGTACGA"),
            ("AAAAAAAAAAAA", "CCCCCCCCCCCC"),
        ]
        for s1, s2 in cases:
            d = memoized_distance(s1, s2)
            print(f"  d({s1}, {s2}) = {d:>2}   {handler.messages[-1]}")
    finally:
        core_logger.removeHandler(handler)
        core_logger.setLevel(previous)
    print()


def main():
    rng = random.Random(42)
    benchmark_agreement(rng)
    benchmark_scaling(rng)
    benchmark_memo_coverage()


if __name__ == "__main__":
    main()
