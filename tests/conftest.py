"""Pytest fixtures and configuration."""

import pytest

from fuzzy_locate.core.options import MatchOptions


@pytest.fixture
def strict_options():
    """Options accepting only perfect matches."""
    return MatchOptions(threshold=0.0)


@pytest.fixture
def alphabet_text():
    """Text used by the Bitap reference cases."""
    return "abcdefghijk"


@pytest.fixture
def long_pattern():
    """Pattern wider than the default 32-bit core."""
    return "the quick brown fox jumps over the lazy dog"
