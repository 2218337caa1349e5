"""Alphabet mask precomputation.

The bit-parallel search looks up, for every text character, which pattern
positions hold that same character. This module builds that table once per
pattern and offers an explicit cache for callers that search the same
pattern repeatedly.
"""

import threading
from collections import OrderedDict

from fuzzy_locate.core.exceptions import UnsupportedPatternLength
from fuzzy_locate.core.options import DEFAULT_MAX_BITS


def build_alphabet(pattern: str, max_bits: int = DEFAULT_MAX_BITS) -> dict[str, int]:
    """Map each character of ``pattern`` to a bitmask of its positions.

    Bit ``i`` of a character's mask is set when ``pattern[i]`` is that
    character. Characters absent from the pattern have no entry and should be
    looked up with a default of 0.

    Args:
        pattern: The search pattern.
        max_bits: Maximum supported pattern length.

    Returns:
        Character to position mask mapping.

    Raises:
        UnsupportedPatternLength: If the pattern is longer than ``max_bits``.
    """
    if len(pattern) > max_bits:
        raise UnsupportedPatternLength(len(pattern), max_bits)

    alphabet: dict[str, int] = {}
    for i, char in enumerate(pattern):
        alphabet[char] = alphabet.get(char, 0) | (1 << i)
    return alphabet


class AlphabetCache:
    """Caller-owned LRU cache of alphabet tables.

    Keyed by pattern content and bit width. Safe to share between threads.

    Examples:
        >>> cache = AlphabetCache(maxsize=16)
        >>> locate(text, "needle", 0, cache=cache)
    """

    def __init__(self, maxsize: int = 128):
        if maxsize < 1:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self.maxsize = maxsize
        self._entries: OrderedDict[tuple[str, int], dict[str, int]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, pattern: str, max_bits: int = DEFAULT_MAX_BITS) -> dict[str, int]:
        """Return the alphabet for ``pattern``, building it on a miss.

        Raises:
            UnsupportedPatternLength: If the pattern is longer than ``max_bits``.
        """
        key = (pattern, max_bits)
        with self._lock:
            alphabet = self._entries.get(key)
            if alphabet is not None:
                self._entries.move_to_end(key)
                self._hits += 1
                return alphabet
            self._misses += 1

        alphabet = build_alphabet(pattern, max_bits)

        with self._lock:
            self._entries[key] = alphabet
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
        return alphabet

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
                "maxsize": self.maxsize,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
