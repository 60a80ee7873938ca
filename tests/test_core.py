"""
Test suite for editdist.core — edit distance, three ways.

Tests are organized around the claims in the module docstring:
    §1  Known distances (all strategies)
    §2  Agreement between strategies
    §3  Metric properties (identity, symmetry, empty base case, triangle)
    §4  Non-string elements
    §5  Distance table
    §6  Memoization only touches the cells it needs
    §7  Strategy registry
"""

import itertools
import logging
import os
import sys

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from editdist.core import (
    DistanceTable,
    naive_distance, tabulated_distance, memoized_distance,
    Strategy, STRATEGIES, DEFAULT_STRATEGY, NAIVE_WARN_LENGTH,
    get_strategy, edit_distance,
)


ALL_STRATEGIES = [naive_distance, tabulated_distance, memoized_distance]


# ═══════════════════════════════════════════════════════════════════
#  §1  KNOWN DISTANCES
# ═══════════════════════════════════════════════════════════════════

class TestKnownDistances:

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    @pytest.mark.parametrize("s1,s2,expected", [
        ("SATURDAY", "SUNDAY", 3),
        ("LAWN", "FLAW", 2),
        ("kitten", "sitting", 3),
        ("intention", "execution", 5),
        ("", "", 0),
        ("a", "", 1),
        ("", "abc", 3),
        ("abc", "abc", 0),
        ("abc", "axc", 1),
        ("abc", "abcd", 1),
        ("ab", "ba", 2),
        ("a", "aa", 1),
        ("NOHELLO", "HELLGO", 3),
    ])
    def test_distance(self, fn, s1, s2, expected):
        assert fn(s1, s2) == expected

    def test_tabulated_is_reproducible(self):
        """The tabulated strategy gives the same answer on every call."""
        results = {tabulated_distance("NOHELLO", "HELLGO") for _ in range(5)}
        assert results == {3}


# ═══════════════════════════════════════════════════════════════════
#  §2  AGREEMENT
#      The whole point: three algorithms, one answer.
# ═══════════════════════════════════════════════════════════════════

def _all_strings(alphabet: str, max_len: int) -> list[str]:
    out = [""]
    for length in range(1, max_len + 1):
        out.extend("".join(p) for p in itertools.product(alphabet, repeat=length))
    return out


class TestAgreement:

    def test_exhaustive_small_strings(self):
        """Every pair of strings of length ≤ 4 over {a, b}."""
        strings = _all_strings("ab", 4)
        for s1 in strings:
            for s2 in strings:
                naive = naive_distance(s1, s2)
                tab = tabulated_distance(s1, s2)
                memo = memoized_distance(s1, s2)
                assert naive == tab == memo, (
                    f"d({s1!r}, {s2!r}): naive={naive} tab={tab} memo={memo}"
                )

    @pytest.mark.parametrize("s1,s2", [
        ("horse", "ros"),
        ("abcdefgh", "hgfedcba"),
        ("aaaaaaa", "bbb"),
        ("the quick", "quick the"),
    ])
    def test_longer_strings(self, s1, s2):
        assert naive_distance(s1, s2) == tabulated_distance(s1, s2) == memoized_distance(s1, s2)

    def test_dp_strategies_on_long_input(self):
        """Too long for the naive strategy, fine for the other two."""
        s1 = "ACGT" * 50
        s2 = "AGCT" * 45 + "TTTT"
        assert tabulated_distance(s1, s2) == memoized_distance(s1, s2)

    @pytest.mark.parametrize("s1,s2", [
        ("a" * 600, "b" * 600),
        ("ACGT" * 160, "AGCT" * 150 + "TTTTTTTTTT"),
    ])
    def test_memoized_deeper_than_default_recursion_limit(self, s1, s2):
        """m + n well above the interpreter's default limit of 1000."""
        limit = sys.getrecursionlimit()
        assert memoized_distance(s1, s2) == tabulated_distance(s1, s2)
        assert sys.getrecursionlimit() == limit

    def test_naive_on_long_identical_input(self):
        # Equal elements recurse straight down the diagonal
        s = "x" * 700
        limit = sys.getrecursionlimit()
        assert naive_distance(s, s) == 0
        assert sys.getrecursionlimit() == limit


# ═══════════════════════════════════════════════════════════════════
#  §3  METRIC PROPERTIES
# ═══════════════════════════════════════════════════════════════════

class TestMetricProperties:

    VALUES = ["", "a", "ab", "ba", "abc", "cab", "SUNDAY", "MONDAY", "LAWN", "FLAW"]

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_identity(self, fn):
        for s in self.VALUES:
            assert fn(s, s) == 0

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_symmetry(self, fn):
        for s1, s2 in itertools.product(self.VALUES, repeat=2):
            assert fn(s1, s2) == fn(s2, s1), f"asymmetric on {s1!r}, {s2!r}"

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_empty_base_case(self, fn):
        for s in self.VALUES:
            assert fn("", s) == len(s)
            assert fn(s, "") == len(s)

    @pytest.mark.parametrize("d", ALL_STRATEGIES)
    def test_triangle_inequality(self, d):
        for x, y, z in itertools.product(self.VALUES, repeat=3):
            assert d(x, z) <= d(x, y) + d(y, z), f"violated on {x!r}, {y!r}, {z!r}"

    def test_positive_for_different_values(self):
        for s1, s2 in itertools.product(self.VALUES, repeat=2):
            if s1 != s2:
                assert memoized_distance(s1, s2) > 0


# ═══════════════════════════════════════════════════════════════════
#  §4  NON-STRING ELEMENTS
# ═══════════════════════════════════════════════════════════════════

class TestElementTypes:

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_bytes(self, fn):
        assert fn(b"SATURDAY", b"SUNDAY") == 3

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_token_lists(self, fn):
        assert fn(["a", "b", "c"], ["a", "c"]) == 1
        assert fn(["the", "cat", "sat"], ["a", "cat", "sat", "down"]) == 2

    @pytest.mark.parametrize("fn", ALL_STRATEGIES)
    def test_tuples_of_numbers(self, fn):
        assert fn((1, 2, 3, 4), (1, 3, 4, 5)) == 2

    def test_unicode_characters(self):
        # Characters, not encoded bytes, are the elements
        assert tabulated_distance("naïve", "naive") == 1


# ═══════════════════════════════════════════════════════════════════
#  §5  DISTANCE TABLE
# ═══════════════════════════════════════════════════════════════════

class TestDistanceTable:

    def test_default_border(self):
        t = DistanceTable.build(2, 3)
        assert t.shape == (3, 4)
        assert t.rows() == [
            [0, 1, 2, 3],
            [1, 0, 0, 0],
            [2, 0, 0, 0],
        ]

    def test_degenerate_sizes(self):
        assert DistanceTable.build(0, 0).rows() == [[0]]
        assert DistanceTable.build(0, 2).rows() == [[0, 1, 2]]
        assert DistanceTable.build(2, 0).rows() == [[0], [1], [2]]

    def test_custom_init_and_fill(self):
        t = DistanceTable.build(2, 2, init=lambda i: i * 10, fill=None)
        assert t.rows() == [
            [0, 10, 20],
            [10, None, None],
            [20, None, None],
        ]
        assert t.filled() == 5

    def test_get_and_set(self):
        t = DistanceTable.build(1, 1, fill=None)
        assert t[1, 1] is None
        t[1, 1] = 7
        assert t[1, 1] == 7
        assert t.filled() == 4

    def test_rows_is_a_copy(self):
        t = DistanceTable.build(1, 1)
        t.rows()[1][1] = 99
        assert t[1, 1] == 0

    def test_render(self):
        t = DistanceTable.build(1, 2, fill=None)
        t[1, 2] = 5
        assert t.render() == "0 1 2\n1 . 5"

    def test_repr(self):
        assert repr(DistanceTable.build(2, 3)) == "DistanceTable(3x4)"


# ═══════════════════════════════════════════════════════════════════
#  §6  LOGGING / MEMOIZATION COVERAGE
# ═══════════════════════════════════════════════════════════════════

class TestLogging:

    def test_memoized_fills_only_needed_cells(self, caplog):
        """Identical inputs only walk the diagonal: border + 4 cells."""
        caplog.set_level(logging.DEBUG, logger="editdist.core")
        assert memoized_distance("abcd", "abcd") == 0
        assert "memoized distance filled 13 of 25 cells" in caplog.text

    def test_tabulated_logs_table_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="editdist.core")
        tabulated_distance("ab", "b")
        assert "tabulated distance table:\n0 1\n1 1\n2 1" in caplog.text

    def test_no_table_rendering_above_debug(self, caplog):
        caplog.set_level(logging.INFO, logger="editdist.core")
        tabulated_distance("ab", "b")
        assert "table" not in caplog.text

    def test_naive_warns_on_long_input(self, caplog):
        caplog.set_level(logging.WARNING, logger="editdist.core")
        s = "a" * (NAIVE_WARN_LENGTH // 2 + 1)
        assert naive_distance(s, s) == 0
        assert "exponential" in caplog.text

    def test_naive_quiet_on_short_input(self, caplog):
        caplog.set_level(logging.WARNING, logger="editdist.core")
        naive_distance("abc", "abd")
        assert caplog.text == ""


# ═══════════════════════════════════════════════════════════════════
#  §7  STRATEGY REGISTRY
# ═══════════════════════════════════════════════════════════════════

class TestStrategyRegistry:

    def test_every_strategy_registered(self):
        assert set(STRATEGIES) == set(Strategy)

    def test_default_is_tabulation(self):
        assert DEFAULT_STRATEGY is Strategy.TABULATION
        assert get_strategy(DEFAULT_STRATEGY) is tabulated_distance

    @pytest.mark.parametrize("name,fn", [
        ("naive", naive_distance),
        ("tabulation", tabulated_distance),
        ("memoization", memoized_distance),
    ])
    def test_lookup_by_name(self, name, fn):
        assert get_strategy(name) is fn
        assert get_strategy(Strategy(name)) is fn

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown strategy 'greedy'"):
            get_strategy("greedy")

    def test_edit_distance_dispatch(self):
        assert edit_distance("kitten", "sitting") == 3
        assert edit_distance("kitten", "sitting", "memoization") == 3
        assert edit_distance("kitten", "sitting", Strategy.NAIVE) == 3
