"""
fuzzy-locate: approximate substring location

Finds the best fuzzy occurrence of a pattern in a text near an expected
location, using a Bitap search with a distance-weighted score.
"""

__version__ = "1.0.0"

from fuzzy_locate.core.alphabet import AlphabetCache, build_alphabet
from fuzzy_locate.core.exceptions import (
    FuzzyLocateError,
    InvalidParameter,
    UnsupportedPatternLength,
)
from fuzzy_locate.core.locator import locate
from fuzzy_locate.core.options import MatchOptions, MatchResult
from fuzzy_locate.core.ranking import confidence_score, sort_by_fuzzy_match
from fuzzy_locate.core.scoring import bitap_score

__all__ = [
    "locate",
    "MatchOptions",
    "MatchResult",
    "AlphabetCache",
    "build_alphabet",
    "bitap_score",
    "confidence_score",
    "sort_by_fuzzy_match",
    "FuzzyLocateError",
    "InvalidParameter",
    "UnsupportedPatternLength",
]
