"""Ranking helpers built on top of ``locate``.

Both helpers probe ``locate`` at increasing thresholds: the strictest
threshold at which a pattern is still found says how well it matches.
"""

from typing import Iterable, Optional

from fuzzy_locate.core.alphabet import AlphabetCache
from fuzzy_locate.core.locator import locate
from fuzzy_locate.core.options import DEFAULT_DISTANCE, MatchOptions

# Threshold grid for confidence_score: 0.001, 0.002, ... 0.999
_CONFIDENCE_STEPS = 1000

# Threshold tiers for sort_by_fuzzy_match: 0.1, 0.2, ... 0.9
_SORT_TIERS = [tier / 10 for tier in range(1, 10)]


def confidence_score(
    text: str,
    pattern: str,
    loc: int = 0,
    distance: float = DEFAULT_DISTANCE,
) -> Optional[float]:
    """Return the strictest threshold at which ``pattern`` is found in ``text``.

    Low values (0.001) mean the pattern is almost certainly there, high
    values (0.999) mean it barely is.

    Args:
        text: Text to search.
        pattern: Pattern to search for.
        loc: Expected location of the pattern.
        distance: Location tolerance, see ``MatchOptions.distance``.

    Returns:
        Threshold on the 0.001 grid, or None if no threshold below 1.0 finds
        the pattern.
    """
    cache = AlphabetCache(maxsize=1)

    def matches(step: int) -> bool:
        options = MatchOptions(threshold=step / _CONFIDENCE_STEPS, distance=distance)
        return locate(text, pattern, loc, options, cache=cache).is_found

    lo, hi = 1, _CONFIDENCE_STEPS - 1
    if not matches(hi):
        return None

    # Tolerance is monotonic, so bisect for the first matching step
    while lo < hi:
        mid = (lo + hi) // 2
        if matches(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo / _CONFIDENCE_STEPS


def sort_by_fuzzy_match(
    texts: Iterable[str],
    pattern: str,
    loc: int = 0,
    distance: float = DEFAULT_DISTANCE,
) -> list[str]:
    """Order ``texts`` by how strict a threshold still finds ``pattern``.

    Elements found at threshold 0.1 come first, then those first found at
    0.2, and so on up to 0.9. Order within a tier follows the input.
    Elements never found are appended last in their original order.
    """
    items = list(texts)
    cache = AlphabetCache(maxsize=1)
    placed = [False] * len(items)
    ordered: list[str] = []

    for threshold in _SORT_TIERS:
        if len(ordered) == len(items):
            break
        options = MatchOptions(threshold=threshold, distance=distance)
        for i, item in enumerate(items):
            if placed[i]:
                continue
            if locate(item, pattern, loc, options, cache=cache).is_found:
                ordered.append(item)
                placed[i] = True

    ordered.extend(item for i, item in enumerate(items) if not placed[i])
    return ordered
