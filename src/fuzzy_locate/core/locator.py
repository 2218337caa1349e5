"""Public entry point for fuzzy location."""

import time
from typing import Optional

from fuzzy_locate.core.alphabet import AlphabetCache, build_alphabet
from fuzzy_locate.core.bitap import match_bitap
from fuzzy_locate.core.exceptions import UnsupportedPatternLength
from fuzzy_locate.core.options import MatchOptions, MatchResult
from fuzzy_locate.core.scoring import bitap_score
from fuzzy_locate.logging.setup import get_logger
from fuzzy_locate.metrics.collectors import LOCATE_DURATION, LOCATE_TOTAL

logger = get_logger(__name__)

_DEFAULT_OPTIONS = MatchOptions()


def locate(
    text: str,
    pattern: str,
    expected_location: int = 0,
    options: Optional[MatchOptions] = None,
    *,
    cache: Optional[AlphabetCache] = None,
) -> MatchResult:
    """Locate the best match of ``pattern`` in ``text`` near ``expected_location``.

    Args:
        text: The text to search.
        pattern: The pattern to search for.
        expected_location: Where the pattern is expected to start. Clamped
            into ``[0, len(text)]``.
        options: Threshold, distance and bit width. Defaults to
            ``MatchOptions()``.
        cache: Optional caller-owned alphabet cache.

    Returns:
        ``MatchResult`` with the match index and score, or a not-found result.

    Examples:
        >>> locate("the quick brown fox", "quikc", 4,
        ...        MatchOptions(threshold=0.5, distance=10)).index
        4
        >>> locate("abcdefg", "xyz", 0, MatchOptions(threshold=0.3)).is_found
        False
    """
    options = options or _DEFAULT_OPTIONS
    loc = max(0, min(expected_location, len(text)))

    started = time.perf_counter()
    strategy, result = _dispatch(text, pattern, loc, options, cache)
    LOCATE_DURATION.observe(time.perf_counter() - started)
    LOCATE_TOTAL.labels(
        strategy=strategy,
        outcome="found" if result.is_found else "not_found",
    ).inc()

    logger.debug(
        "Locate finished",
        extra={
            "event": "locate_finished",
            "strategy": strategy,
            "expected_location": loc,
            "index": result.index,
            "score": result.score,
        },
    )
    return result


def _dispatch(
    text: str,
    pattern: str,
    loc: int,
    options: MatchOptions,
    cache: Optional[AlphabetCache],
) -> tuple[str, MatchResult]:
    if not pattern:
        return "empty", MatchResult.found(loc, 0.0)
    if not text:
        return "empty", MatchResult.not_found()
    if text[loc:loc + len(pattern)] == pattern:
        return "exact", MatchResult.found(loc, 0.0)

    try:
        if cache is not None:
            alphabet = cache.get(pattern, options.max_bits)
        else:
            alphabet = build_alphabet(pattern, options.max_bits)
    except UnsupportedPatternLength as e:
        logger.debug(
            "Falling back to exact substring search",
            extra={"event": "locate_fallback", "reason": str(e)},
        )
        return "fallback", find_nearest_exact(text, pattern, loc, options)

    return "bitap", match_bitap(text, pattern, loc, options, alphabet)


def find_nearest_exact(
    text: str,
    pattern: str,
    loc: int,
    options: MatchOptions,
) -> MatchResult:
    """Find the exact occurrence of ``pattern`` nearest to ``loc``.

    Used for patterns too wide for the bit-parallel search. No character
    errors are tolerated, but the location penalty still applies and a
    candidate scoring above ``options.threshold`` is rejected. On a tie the
    earlier occurrence wins.
    """
    # Last occurrence starting at or before loc, first one after it
    left = text.rfind(pattern, 0, loc + len(pattern))
    right = text.find(pattern, loc + 1)

    candidates = [i for i in (left, right) if i != -1]
    if not candidates:
        return MatchResult.not_found()

    best = min(candidates, key=lambda i: (abs(i - loc), i))
    score = bitap_score(0, best, loc, len(pattern), options.distance)
    if score > options.threshold:
        return MatchResult.not_found()
    return MatchResult.found(best, score)
