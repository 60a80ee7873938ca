"""
editdist.core — Edit distance, three ways
=========================================

§1  THE RECURRENCE
──────────────────

The edit distance between two sequences is the minimum number of
single-element insertions, deletions and substitutions needed to turn
one into the other.  Writing D(i, j) for the distance between the
first i elements of s₁ and the first j elements of s₂:

    D(i, j) = max(i, j)                       if min(i, j) = 0
    D(i, j) = D(i-1, j-1)                     if s₁[i-1] = s₂[j-1]
    D(i, j) = 1 + min( D(i-1, j),             # delete s₁[i-1]
                       D(i, j-1),             # insert s₂[j-1]
                       D(i-1, j-1) )          # substitute

The second line is what separates this from the textbook three-way
branch: a matching trailing pair never needs to be considered for
deletion or insertion, because D(i-1, j-1) ≤ D(i-1, j) + 1 and
D(i-1, j-1) ≤ D(i, j-1) + 1 always hold.

Elements are opaque.  Anything indexable whose items support `==`
works: str, bytes, lists of tokens, tuples of tree nodes.


§2  THREE STRATEGIES
────────────────────

    naive_distance        direct recursion, no memory.   O(3^(m+n))
    tabulated_distance    bottom-up table fill.          O(m·n) time/space
    memoized_distance     top-down recursion + cache.    O(m·n), only the
                                                         cells it needs

All three return the same number for every pair of finite sequences.
The only legitimate difference between them is cost.


§3  THE DISTANCE TABLE
──────────────────────

Tabulation and memoization share DistanceTable: an (m+1) × (n+1) grid
whose border is seeded by a rule index ↦ value (here index ↦ index,
the cost of inserting or deleting a whole prefix).  For memoization,
interior cells start as None ("not computed yet") rather than a magic
number, so there is no upper bound on a representable distance.
"""

import logging
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE TABLE
# ═══════════════════════════════════════════════════════════════════

def _identity(index: int) -> int:
    return index


class DistanceTable(Generic[V]):
    """
    A rectangular (m+1) × (n+1) grid indexed by (row, column) pairs.

    Row 0 and column 0 hold init(index); every other cell holds `fill`
    until it is overwritten.  Built fresh for each distance call.

    Examples:
        t = DistanceTable.build(2, 3)
        t[0, 3]      # 3
        t[2, 0]      # 2
        t[1, 1]      # 0
    """
    __slots__ = ("_rows",)

    def __init__(self, rows: list[list[V]]):
        self._rows = rows

    @classmethod
    def build(
        cls,
        m: int,
        n: int,
        init: Callable[[int], V] = _identity,
        fill: V = 0,
    ) -> "DistanceTable[V]":
        """Allocate a table for sequences of lengths m and n."""
        rows: list[list[V]] = [[init(j) for j in range(n + 1)]]
        for i in range(1, m + 1):
            row = [fill] * (n + 1)
            row[0] = init(i)
            rows.append(row)
        return cls(rows)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, key: tuple[int, int]) -> V:
        i, j = key
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: V) -> None:
        i, j = key
        self._rows[i][j] = value

    def rows(self) -> list[list[V]]:
        """A copy of the cells, row by row."""
        return [list(row) for row in self._rows]

    def filled(self) -> int:
        """Number of cells holding a value (i.e. not None)."""
        return sum(1 for row in self._rows for cell in row if cell is not None)

    def render(self) -> str:
        """Space-separated grid, one line per row.  Unset cells print as '.'."""
        return "\n".join(
            " ".join("." if cell is None else str(cell) for cell in row)
            for row in self._rows
        )

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"DistanceTable({rows}x{cols})"


# ═══════════════════════════════════════════════════════════════════
#  NAIVE RECURSION
# ═══════════════════════════════════════════════════════════════════

# Extra frames allowed on top of the caller's stack for the recursive strategies.
RECURSION_MARGIN = 100


@contextmanager
def _recursion_headroom(depth: int):
    """Make room for `depth` more nested calls, restoring the limit afterwards."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + depth + RECURSION_MARGIN)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


# Above this combined length the naive strategy logs a warning.
NAIVE_WARN_LENGTH = 16


def naive_distance(s1: Sequence[T], s2: Sequence[T]) -> int:
    """
    Edit distance by direct recursion on the recurrence in §1.

    Nothing is remembered between branches, so the same subproblem is
    solved over and over: exponential in len(s1) + len(s2) in the
    worst case.  Useful as an oracle for the other two strategies.
    """
    if len(s1) + len(s2) > NAIVE_WARN_LENGTH:
        logger.warning(
            "naive_distance on inputs of length %d and %d; this is exponential",
            len(s1), len(s2),
        )
    with _recursion_headroom(len(s1) + len(s2)):
        return _naive(s1, s2, len(s1), len(s2))


def _naive(s1: Sequence[T], s2: Sequence[T], i: int, j: int) -> int:
    # Base case: one prefix is empty, the rest must be inserted/deleted
    if min(i, j) == 0:
        return max(i, j)

    if s1[i - 1] == s2[j - 1]:
        return _naive(s1, s2, i - 1, j - 1)

    delete = _naive(s1, s2, i - 1, j)
    insert = _naive(s1, s2, i, j - 1)
    substitute = _naive(s1, s2, i - 1, j - 1)
    return 1 + min(delete, insert, substitute)


# ═══════════════════════════════════════════════════════════════════
#  TABULATION (bottom-up)
# ═══════════════════════════════════════════════════════════════════

def tabulated_distance(s1: Sequence[T], s2: Sequence[T]) -> int:
    """
    Edit distance by filling the whole DistanceTable bottom-up.

    Rows are filled in increasing order and columns in increasing
    order within a row, so (i-1, j), (i, j-1) and (i-1, j-1) are always
    ready when (i, j) is computed.  The answer is the bottom-right cell.
    """
    m, n = len(s1), len(s2)
    table: DistanceTable[int] = DistanceTable.build(m, n)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                table[i, j] = table[i - 1, j - 1]
            else:
                table[i, j] = 1 + min(
                    table[i - 1, j],        # deletion
                    table[i, j - 1],        # insertion
                    table[i - 1, j - 1],    # substitution
                )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tabulated distance table:\n%s", table.render())

    return table[m, n]


# ═══════════════════════════════════════════════════════════════════
#  MEMOIZATION (top-down)
# ═══════════════════════════════════════════════════════════════════

def memoized_distance(s1: Sequence[T], s2: Sequence[T]) -> int:
    """
    Edit distance by the naive recursion plus a cache.

    The cache is a DistanceTable of Optional[int]: None means "not
    computed yet".  The border is seeded exactly as for tabulation, so
    every base case is a cache hit.  Each (i, j) is computed at most
    once; only the cells the recursion actually reaches get filled.
    """
    m, n = len(s1), len(s2)
    table: DistanceTable[Optional[int]] = DistanceTable.build(m, n, fill=None)

    # The recursion nests at most m + n calls deep
    with _recursion_headroom(m + n):
        result = _memoized(s1, s2, m, n, table)

    rows, cols = table.shape
    logger.debug(
        "memoized distance filled %d of %d cells", table.filled(), rows * cols
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("memoized distance table:\n%s", table.render())

    return result


def _memoized(
    s1: Sequence[T],
    s2: Sequence[T],
    i: int,
    j: int,
    table: DistanceTable[Optional[int]],
) -> int:
    cached = table[i, j]
    if cached is not None:
        return cached

    if s1[i - 1] == s2[j - 1]:
        result = _memoized(s1, s2, i - 1, j - 1, table)
    else:
        delete = _memoized(s1, s2, i - 1, j, table)
        insert = _memoized(s1, s2, i, j - 1, table)
        substitute = _memoized(s1, s2, i - 1, j - 1, table)
        result = 1 + min(delete, insert, substitute)

    table[i, j] = result
    return result


# ═══════════════════════════════════════════════════════════════════
#  STRATEGY REGISTRY
# ═══════════════════════════════════════════════════════════════════

class Strategy(Enum):
    """The interchangeable ways to compute an edit distance."""
    NAIVE = "naive"
    TABULATION = "tabulation"
    MEMOIZATION = "memoization"


DistanceFn = Callable[[Sequence[T], Sequence[T]], int]

STRATEGIES: dict[Strategy, DistanceFn] = {
    Strategy.NAIVE: naive_distance,
    Strategy.TABULATION: tabulated_distance,
    Strategy.MEMOIZATION: memoized_distance,
}

DEFAULT_STRATEGY = Strategy.TABULATION


def get_strategy(strategy: Union[Strategy, str]) -> DistanceFn:
    """
    Look up a distance function by Strategy member or by its value.

    Raises ValueError for an unknown name.
    """
    if not isinstance(strategy, Strategy):
        try:
            strategy = Strategy(strategy)
        except ValueError:
            names = ", ".join(s.value for s in Strategy)
            raise ValueError(
                f"Unknown strategy {strategy!r} (expected one of: {names})"
            ) from None
    return STRATEGIES[strategy]


def edit_distance(
    s1: Sequence[T],
    s2: Sequence[T],
    strategy: Union[Strategy, str] = DEFAULT_STRATEGY,
) -> int:
    """Edit distance between s1 and s2 using the chosen strategy."""
    return get_strategy(strategy)(s1, s2)
