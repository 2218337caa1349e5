"""Manual test harness: raw text fields in, one result label out.

The harness mirrors a form with five inputs (sample text, pattern,
location, distance, threshold). Numeric fields arrive as free text, are
parsed and clamped here once, and only the validated values reach the core.
"""

import math
from dataclasses import dataclass
from typing import Optional

from fuzzy_locate.core.alphabet import AlphabetCache
from fuzzy_locate.core.exceptions import InvalidParameter
from fuzzy_locate.core.locator import locate
from fuzzy_locate.core.options import DEFAULT_MAX_BITS, MatchOptions, MatchResult


@dataclass(frozen=True)
class HarnessRequest:
    """Validated harness inputs."""

    sample: str
    pattern: str
    location: int
    options: MatchOptions


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        raise InvalidParameter(
            f"{field} must be a whole number, got {value!r}", field=field
        ) from None


def _parse_float(value: str, field: str) -> float:
    try:
        parsed = float(value.strip())
    except (AttributeError, ValueError):
        raise InvalidParameter(
            f"{field} must be a number, got {value!r}", field=field
        ) from None
    if math.isnan(parsed):
        raise InvalidParameter(f"{field} must be a number, got {value!r}", field=field)
    return parsed


def parse_fields(
    sample: str,
    pattern: str,
    location: str,
    distance: str,
    threshold: str,
    max_bits: int = DEFAULT_MAX_BITS,
) -> HarnessRequest:
    """Parse and clamp raw field values.

    Args:
        sample: Text to search.
        pattern: Pattern to look for.
        location: Expected location, as typed.
        distance: Location tolerance, as typed (whole number).
        threshold: Score threshold, as typed.
        max_bits: Bit width of the search core.

    Returns:
        Validated ``HarnessRequest``. Negative location and distance are
        clamped to 0 and threshold is clamped into [0, 1].

    Raises:
        InvalidParameter: If a numeric field does not parse.
    """
    loc = _parse_int(location, "location")
    dist = _parse_int(distance, "distance")
    thr = _parse_float(threshold, "threshold")

    return HarnessRequest(
        sample=sample,
        pattern=pattern,
        location=max(0, loc),
        options=MatchOptions.clamped(threshold=thr, distance=dist, max_bits=max_bits),
    )


def run_request(
    request: HarnessRequest,
    cache: Optional[AlphabetCache] = None,
) -> MatchResult:
    return locate(
        request.sample,
        request.pattern,
        request.location,
        request.options,
        cache=cache,
    )


def run_harness(
    sample: str,
    pattern: str,
    location: str,
    distance: str,
    threshold: str,
) -> str:
    """Parse the fields, run the search and return the result label.

    Examples:
        >>> run_harness("abcabcabc", "abc", "6", "0", "0.0")
        '6'
        >>> run_harness("abcdefg", "xyz", "0", "1000", "0.3")
        'no match'
    """
    request = parse_fields(sample, pattern, location, distance, threshold)
    return run_request(request).label
