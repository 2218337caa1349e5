"""Core fuzzy location: alphabet masks, scoring, Bitap search."""

from fuzzy_locate.core.alphabet import AlphabetCache, build_alphabet
from fuzzy_locate.core.bitap import SearchState, match_bitap
from fuzzy_locate.core.exceptions import (
    FuzzyLocateError,
    InvalidParameter,
    UnsupportedPatternLength,
)
from fuzzy_locate.core.locator import find_nearest_exact, locate
from fuzzy_locate.core.options import (
    DEFAULT_DISTANCE,
    DEFAULT_MAX_BITS,
    DEFAULT_THRESHOLD,
    NO_MATCH_LABEL,
    MatchOptions,
    MatchResult,
)
from fuzzy_locate.core.ranking import confidence_score, sort_by_fuzzy_match
from fuzzy_locate.core.scoring import bitap_score

__all__ = [
    "locate",
    "find_nearest_exact",
    "match_bitap",
    "SearchState",
    "build_alphabet",
    "AlphabetCache",
    "bitap_score",
    "MatchOptions",
    "MatchResult",
    "DEFAULT_THRESHOLD",
    "DEFAULT_DISTANCE",
    "DEFAULT_MAX_BITS",
    "NO_MATCH_LABEL",
    # Ranking
    "confidence_score",
    "sort_by_fuzzy_match",
    # Errors
    "FuzzyLocateError",
    "InvalidParameter",
    "UnsupportedPatternLength",
]
