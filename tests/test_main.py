"""Tests for server startup validation."""

import pytest

from fuzzy_locate.main import validate_environment


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "FUZZY_LOCATE_PORT",
        "FUZZY_LOCATE_LOG_LEVEL",
        "FUZZY_LOCATE_SEARCH_LOG_LEVEL",
        "FUZZY_LOCATE_LOG_FORMAT",
        "FUZZY_LOCATE_CONFIG_PATH",
        "FUZZY_LOCATE_THRESHOLD",
        "FUZZY_LOCATE_DISTANCE",
        "FUZZY_LOCATE_MAX_BITS",
        "FUZZY_LOCATE_CACHE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestValidateEnvironment:
    """Tests for validate_environment."""

    def test_defaults_are_valid(self):
        assert validate_environment() == []

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_PORT", "99999")
        errors = validate_environment()

        assert len(errors) == 1
        assert "FUZZY_LOCATE_PORT" in errors[0]

    def test_non_numeric_port(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_PORT", "http")
        assert any("integer" in e for e in validate_environment())

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_LOG_LEVEL", "loud")
        assert any("FUZZY_LOCATE_LOG_LEVEL" in e for e in validate_environment())

    def test_bad_log_format(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_LOG_FORMAT", "xml")
        assert any("FUZZY_LOCATE_LOG_FORMAT" in e for e in validate_environment())

    def test_bad_matching_setting(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_THRESHOLD", "7")
        assert any("Threshold" in e for e in validate_environment())

    def test_missing_config_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FUZZY_LOCATE_CONFIG_PATH", str(tmp_path / "nope.yaml"))
        assert any("not found" in e for e in validate_environment())

    def test_bad_search_log_level(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOCATE_SEARCH_LOG_LEVEL", "chatty")
        assert any("FUZZY_LOCATE_SEARCH_LOG_LEVEL" in e for e in validate_environment())
