"""Bit-parallel approximate search (Bitap) with a location bias.

The search runs once per allowed error count ``d = 0, 1, 2, ...``. At each
level it scans a window around the expected location from right to left,
keeping one bit-vector per text position. Bit ``i`` of ``rd[j]`` is set when
``pattern[i:]`` matches the text starting at ``j - 1`` with at most ``d``
errors, so bit 0 marks a full match starting at ``j - 1``.

Shifting right and injecting the top bit keeps every vector within
``len(pattern)`` bits.
"""

from dataclasses import dataclass, field
from typing import Optional

from fuzzy_locate.core.alphabet import build_alphabet
from fuzzy_locate.core.options import MatchOptions, MatchResult
from fuzzy_locate.core.scoring import bitap_score
from fuzzy_locate.logging.setup import get_logger

logger = get_logger(__name__)


@dataclass
class SearchState:
    """Working state of one search, discarded on return."""

    score_threshold: float
    best_loc: int = -1
    last_rd: list[int] = field(default_factory=list)

    def accept(self, index: int, score: float) -> None:
        self.score_threshold = score
        self.best_loc = index


def match_bitap(
    text: str,
    pattern: str,
    loc: int,
    options: MatchOptions,
    alphabet: Optional[dict[str, int]] = None,
) -> MatchResult:
    """Find the best approximate occurrence of ``pattern`` near ``loc``.

    Args:
        text: Text to search.
        pattern: Non-empty pattern no longer than ``options.max_bits``.
        loc: Expected location, already clamped into ``[0, len(text)]``.
        options: Threshold and distance to apply.
        alphabet: Precomputed alphabet masks for ``pattern``.

    Returns:
        The best-scoring match, or ``MatchResult.not_found()``.

    Raises:
        UnsupportedPatternLength: If ``alphabet`` is not supplied and the
            pattern is too wide.
    """
    if alphabet is None:
        alphabet = build_alphabet(pattern, options.max_bits)

    text_length = len(text)
    pattern_length = len(pattern)
    distance = options.distance

    def score(errors: int, x: int) -> float:
        return bitap_score(errors, x, loc, pattern_length, distance)

    state = SearchState(score_threshold=options.threshold)

    # Exact occurrences on either side of loc bound the score we must beat.
    # best_loc stays unset: the level-0 scan finds the seeded occurrence
    # again, since its score equals the threshold and acceptance uses <=.
    exact_loc = text.find(pattern, loc)
    if exact_loc != -1:
        state.score_threshold = min(score(0, exact_loc), state.score_threshold)
    exact_loc = text.rfind(pattern, 0, loc + pattern_length)
    if exact_loc != -1:
        state.score_threshold = min(score(0, exact_loc), state.score_threshold)

    top_bit = 1 << (pattern_length - 1)
    bin_max = pattern_length + text_length

    for d in range(pattern_length):
        # Widest offset from loc at which a d-error match could still qualify
        bin_min = 0
        bin_mid = bin_max
        while bin_min < bin_mid:
            if score(d, loc + bin_mid) <= state.score_threshold:
                bin_min = bin_mid
            else:
                bin_max = bin_mid
            bin_mid = (bin_max - bin_min) // 2 + bin_min
        bin_max = bin_mid

        start = max(1, loc - bin_mid + 1)
        finish = min(loc + bin_mid, text_length) + pattern_length

        rd = [0] * (finish + 2)
        rd[finish + 1] = ((1 << d) - 1) << (pattern_length - d)
        last_rd = state.last_rd

        j = finish
        while j >= start:
            if j - 1 >= text_length:
                char_match = 0
            else:
                char_match = alphabet.get(text[j - 1], 0)

            if d == 0:
                rd[j] = ((rd[j + 1] >> 1) | top_bit) & char_match
            else:
                rd[j] = (
                    (((rd[j + 1] >> 1) | top_bit) & char_match)
                    | (((last_rd[j + 1] | last_rd[j]) >> 1) | top_bit)
                    | last_rd[j + 1]
                )

            if rd[j] & 1:
                candidate_score = score(d, j - 1)
                if candidate_score <= state.score_threshold:
                    state.accept(j - 1, candidate_score)
                    if state.best_loc > loc:
                        # Don't stray further left than we are right of loc
                        start = max(1, 2 * loc - state.best_loc)
                    else:
                        # Everything further left is further from loc
                        break
            j -= 1

        if score(d + 1, loc) > state.score_threshold:
            break
        state.last_rd = rd

    if state.best_loc == -1:
        logger.debug(
            "Bitap search found no candidate",
            extra={"event": "bitap_no_match", "pattern_length": pattern_length},
        )
        return MatchResult.not_found()

    return MatchResult.found(state.best_loc, state.score_threshold)
