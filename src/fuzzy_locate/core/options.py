"""Match options and results."""

from dataclasses import dataclass
from typing import Optional

from fuzzy_locate.core.exceptions import InvalidParameter

DEFAULT_THRESHOLD = 0.5
DEFAULT_DISTANCE = 1000.0
DEFAULT_MAX_BITS = 32

NO_MATCH_LABEL = "no match"


@dataclass(frozen=True)
class MatchOptions:
    """Tuning parameters for a single search.

    Attributes:
        threshold: Maximum combined score (0.0 - 1.0) a candidate may have.
            0.0 accepts only perfect matches, 1.0 accepts almost anything.
        distance: How far from the expected location a match may drift.
            Each ``distance`` characters of drift cost 1.0 in score. A value
            of 0 rejects any drift outright.
        max_bits: Widest pattern the bit-parallel search handles. Longer
            patterns use the exact substring fallback.
    """

    threshold: float = DEFAULT_THRESHOLD
    distance: float = DEFAULT_DISTANCE
    max_bits: int = DEFAULT_MAX_BITS

    def __post_init__(self) -> None:
        """Validate option ranges."""
        if not 0.0 <= self.threshold <= 1.0:
            raise InvalidParameter(
                f"Threshold must be between 0.0 and 1.0, got {self.threshold}",
                field="threshold",
            )
        if self.distance < 0:
            raise InvalidParameter(
                f"Distance must be non-negative, got {self.distance}",
                field="distance",
            )
        if self.max_bits < 1:
            raise InvalidParameter(
                f"max_bits must be at least 1, got {self.max_bits}",
                field="max_bits",
            )

    @classmethod
    def clamped(
        cls,
        threshold: float = DEFAULT_THRESHOLD,
        distance: float = DEFAULT_DISTANCE,
        max_bits: int = DEFAULT_MAX_BITS,
    ) -> "MatchOptions":
        """Build options, clamping out-of-range values instead of rejecting them."""
        return cls(
            threshold=max(0.0, min(1.0, float(threshold))),
            distance=max(0.0, float(distance)),
            max_bits=max(1, int(max_bits)),
        )


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a search: either a found index or no match."""

    index: Optional[int] = None
    score: Optional[float] = None

    @classmethod
    def found(cls, index: int, score: float = 0.0) -> "MatchResult":
        return cls(index=index, score=score)

    @classmethod
    def not_found(cls) -> "MatchResult":
        return cls()

    @property
    def is_found(self) -> bool:
        return self.index is not None

    def __bool__(self) -> bool:
        return self.is_found

    @property
    def label(self) -> str:
        """Human-readable result suitable for direct display."""
        if self.index is None:
            return NO_MATCH_LABEL
        return str(self.index)
