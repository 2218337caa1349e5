"""Tests for alphabet mask building and caching."""

import threading

import pytest

from fuzzy_locate.core.alphabet import AlphabetCache, build_alphabet
from fuzzy_locate.core.exceptions import UnsupportedPatternLength


class TestBuildAlphabet:
    """Tests for build_alphabet."""

    def test_single_occurrences(self):
        """Each distinct character gets its own position bit."""
        assert build_alphabet("abc") == {"a": 0b001, "b": 0b010, "c": 0b100}

    def test_repeated_characters(self):
        """Repeated characters set one bit per occurrence."""
        assert build_alphabet("abca") == {"a": 0b1001, "b": 0b0010, "c": 0b0100}

    def test_absent_characters_have_no_entry(self):
        alphabet = build_alphabet("abc")
        assert alphabet.get("z", 0) == 0

    def test_empty_pattern(self):
        assert build_alphabet("") == {}

    def test_pattern_at_width_limit(self):
        """A pattern exactly max_bits long is supported."""
        alphabet = build_alphabet("x" * 32)
        assert alphabet["x"] == (1 << 32) - 1

    def test_pattern_too_long(self):
        """A pattern wider than max_bits is rejected."""
        with pytest.raises(UnsupportedPatternLength) as exc_info:
            build_alphabet("x" * 33)

        assert exc_info.value.length == 33
        assert exc_info.value.max_bits == 32

    def test_custom_width(self):
        with pytest.raises(UnsupportedPatternLength):
            build_alphabet("abcde", max_bits=4)

    def test_unsupported_length_is_value_error(self):
        with pytest.raises(ValueError):
            build_alphabet("abcde", max_bits=2)


class TestAlphabetCache:
    """Tests for AlphabetCache."""

    def test_hit_and_miss_counts(self):
        cache = AlphabetCache(maxsize=4)

        first = cache.get("abc")
        second = cache.get("abc")

        assert first is second
        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["size"] == 1

    def test_keyed_by_width(self):
        """The same pattern with a different width is a separate entry."""
        cache = AlphabetCache()
        cache.get("abc", 32)
        cache.get("abc", 8)

        assert len(cache) == 2

    def test_evicts_least_recently_used(self):
        cache = AlphabetCache(maxsize=2)
        cache.get("a")
        cache.get("b")
        cache.get("a")  # "b" is now least recently used
        cache.get("c")

        assert len(cache) == 2
        cache.get("a")
        assert cache.stats()["hits"] == 2

        cache.get("b")
        assert cache.stats()["misses"] == 4

    def test_clear(self):
        cache = AlphabetCache()
        cache.get("abc")
        cache.clear()

        assert len(cache) == 0
        assert cache.stats()["misses"] == 0

    def test_invalid_maxsize(self):
        with pytest.raises(ValueError):
            AlphabetCache(maxsize=0)

    def test_too_long_pattern_is_not_cached(self):
        cache = AlphabetCache()
        with pytest.raises(UnsupportedPatternLength):
            cache.get("x" * 40)

        assert len(cache) == 0

    def test_concurrent_access(self):
        """Concurrent lookups agree and stay within capacity."""
        cache = AlphabetCache(maxsize=8)
        results = []

        def worker(n: int) -> None:
            for i in range(50):
                results.append(cache.get(f"pattern-{(n + i) % 10}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 200
        assert len(cache) <= 8
