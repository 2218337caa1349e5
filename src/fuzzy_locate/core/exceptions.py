"""Error taxonomy for fuzzy location."""

from typing import Optional


class FuzzyLocateError(Exception):
    """Base class for all fuzzy-locate errors."""


class UnsupportedPatternLength(FuzzyLocateError, ValueError):
    """Pattern is wider than the bit-parallel core supports.

    Raised by the alphabet builder. ``locate`` recovers from it by falling
    back to an exact substring scan, so callers of the public entry point
    never see it.
    """

    def __init__(self, length: int, max_bits: int):
        self.length = length
        self.max_bits = max_bits
        super().__init__(
            f"Pattern length {length} exceeds the supported width of {max_bits} bits"
        )


class InvalidParameter(FuzzyLocateError, ValueError):
    """A caller-supplied parameter could not be parsed or is out of range."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
