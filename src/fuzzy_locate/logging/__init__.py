"""Logging configuration module for fuzzy-locate."""

from fuzzy_locate.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
