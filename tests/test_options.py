"""Tests for MatchOptions and MatchResult."""

import pytest

from fuzzy_locate.core.exceptions import FuzzyLocateError, InvalidParameter
from fuzzy_locate.core.options import (
    DEFAULT_DISTANCE,
    DEFAULT_MAX_BITS,
    DEFAULT_THRESHOLD,
    MatchOptions,
    MatchResult,
)


class TestMatchOptions:
    """Tests for MatchOptions."""

    def test_defaults(self):
        options = MatchOptions()

        assert options.threshold == DEFAULT_THRESHOLD == 0.5
        assert options.distance == DEFAULT_DISTANCE == 1000.0
        assert options.max_bits == DEFAULT_MAX_BITS == 32

    @pytest.mark.parametrize("threshold", [-0.1, 1.01])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(InvalidParameter) as exc_info:
            MatchOptions(threshold=threshold)
        assert exc_info.value.field == "threshold"

    def test_negative_distance(self):
        with pytest.raises(InvalidParameter) as exc_info:
            MatchOptions(distance=-1)
        assert exc_info.value.field == "distance"

    def test_zero_max_bits(self):
        with pytest.raises(InvalidParameter):
            MatchOptions(max_bits=0)

    def test_invalid_parameter_hierarchy(self):
        with pytest.raises(ValueError):
            MatchOptions(threshold=2.0)
        with pytest.raises(FuzzyLocateError):
            MatchOptions(threshold=2.0)

    def test_boundaries_accepted(self):
        MatchOptions(threshold=0.0, distance=0)
        MatchOptions(threshold=1.0, max_bits=1)

    def test_clamped(self):
        options = MatchOptions.clamped(threshold=1.5, distance=-20, max_bits=0)

        assert options.threshold == 1.0
        assert options.distance == 0.0
        assert options.max_bits == 1

    def test_clamped_keeps_valid_values(self):
        assert MatchOptions.clamped(0.3, 25) == MatchOptions(threshold=0.3, distance=25)

    def test_frozen(self):
        options = MatchOptions()
        with pytest.raises(AttributeError):
            options.threshold = 0.9


class TestMatchResult:
    """Tests for MatchResult."""

    def test_found(self):
        result = MatchResult.found(12, 0.25)

        assert result.is_found
        assert bool(result)
        assert result.index == 12
        assert result.score == 0.25
        assert result.label == "12"

    def test_found_at_zero_is_truthy(self):
        assert MatchResult.found(0)

    def test_not_found(self):
        result = MatchResult.not_found()

        assert not result.is_found
        assert not result
        assert result.index is None
        assert result.label == "no match"
