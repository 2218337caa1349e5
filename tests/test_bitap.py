"""Tests for the bit-parallel search core."""

import pytest

from fuzzy_locate.core.alphabet import build_alphabet
from fuzzy_locate.core.bitap import SearchState, match_bitap
from fuzzy_locate.core.exceptions import UnsupportedPatternLength
from fuzzy_locate.core.options import MatchOptions


def _index(text, pattern, loc, threshold=0.5, distance=100):
    options = MatchOptions(threshold=threshold, distance=distance)
    return match_bitap(text, pattern, loc, options).index


class TestExactMatches:
    """Exact occurrences found by the zero-error pass."""

    def test_exact_at_location(self, alphabet_text):
        assert _index(alphabet_text, "fgh", 5) == 5

    def test_exact_away_from_location(self, alphabet_text):
        assert _index(alphabet_text, "fgh", 0) == 5

    def test_exact_scores_zero_at_location(self):
        options = MatchOptions(threshold=0.0)
        result = match_bitap("hello world", "world", 6, options)

        assert result.index == 6
        assert result.score == 0.0

    def test_strict_threshold(self, alphabet_text):
        assert _index(alphabet_text, "bcdef", 1, threshold=0.0) == 1

    def test_seeded_occurrence_returned(self):
        """An exact occurrence that only just meets the threshold is still found."""
        options = MatchOptions(threshold=0.5, distance=4)
        result = match_bitap("xxabcxx", "abc", 0, options)

        assert result.index == 2
        assert result.score == 0.5


class TestFuzzyMatches:
    """Matches that need one or more errors."""

    def test_substitution(self, alphabet_text):
        assert _index(alphabet_text, "efxhi", 0) == 4

    def test_two_substitutions(self, alphabet_text):
        assert _index(alphabet_text, "cdefxyhijk", 5) == 2

    def test_too_many_errors(self, alphabet_text):
        assert _index(alphabet_text, "bxy", 1) is None

    def test_insertion_in_pattern(self):
        assert _index("123456789xx0", "3456789x0", 2) == 2

    def test_overhang_left(self):
        assert _index("abcdef", "xxabc", 4) == 0

    def test_overhang_right(self):
        assert _index("abcdef", "defyy", 4) == 3

    def test_pattern_longer_than_text(self):
        assert _index("abcdef", "xabcdefy", 0) == 0

    def test_threshold_admits_errors(self, alphabet_text):
        assert _index(alphabet_text, "efxyhi", 1, threshold=0.4) == 4

    def test_threshold_rejects_errors(self, alphabet_text):
        assert _index(alphabet_text, "efxyhi", 1, threshold=0.3) is None

    def test_deletion(self):
        """A pattern with an extra character still matches with one error."""
        options = MatchOptions(threshold=0.5, distance=10)
        result = match_bitap("the quick brown fox", "quikc", 4, options)

        assert result.index == 4
        assert result.score == pytest.approx(0.2)


class TestLocationBias:
    """Candidates closer to the expected location win."""

    def test_multiple_candidates_near_start(self):
        assert _index("abcdexyzabcde", "abccde", 3) == 0

    def test_multiple_candidates_near_end(self):
        assert _index("abcdexyzabcde", "abccde", 5) == 8

    def test_distance_rejects_far_match(self):
        text = "abcdefghijklmnopqrstuvwxyz"
        assert _index(text, "abcdefg", 24, distance=10) is None

    def test_distance_allows_near_fuzzy_match(self):
        text = "abcdefghijklmnopqrstuvwxyz"
        assert _index(text, "abcdxxefg", 1, distance=10) == 0

    def test_large_distance_allows_far_match(self):
        text = "abcdefghijklmnopqrstuvwxyz"
        assert _index(text, "abcdefg", 24, distance=1000) == 0

    def test_equidistant_tie_prefers_earliest(self):
        """Two identical occurrences equally far from loc: the earlier wins."""
        assert _index("abcxabc", "abc", 2, distance=1000) == 0


class TestAlphabetHandling:
    """Tests for alphabet input."""

    def test_precomputed_alphabet(self, alphabet_text):
        options = MatchOptions()
        alphabet = build_alphabet("fgh")

        assert match_bitap(alphabet_text, "fgh", 0, options, alphabet).index == 5

    def test_builds_alphabet_when_missing(self):
        options = MatchOptions(max_bits=2)
        with pytest.raises(UnsupportedPatternLength):
            match_bitap("abcdef", "abc", 0, options)


class TestSearchState:
    """Tests for SearchState."""

    def test_accept_tightens_threshold(self):
        state = SearchState(score_threshold=0.5)
        state.accept(7, 0.2)

        assert state.best_loc == 7
        assert state.score_threshold == 0.2

    def test_defaults(self):
        state = SearchState(score_threshold=0.5)
        assert state.best_loc == -1
        assert state.last_rd == []
