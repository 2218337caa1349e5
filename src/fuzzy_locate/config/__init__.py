"""Configuration module for fuzzy-locate."""

from fuzzy_locate.config.settings import (
    Settings,
    load_settings,
    load_settings_from_yaml,
)

__all__ = [
    "Settings",
    "load_settings",
    "load_settings_from_yaml",
]
