"""
fuzzy-locate Server Entry Point

Run with: python -m fuzzy_locate.main
Or: uvicorn fuzzy_locate.api.routes:app --reload
"""

import os
import sys

import uvicorn

from fuzzy_locate import __version__
from fuzzy_locate.config.settings import load_settings
from fuzzy_locate.logging.setup import get_logger, setup_logging

# Initialize logging early
setup_logging()
logger = get_logger(__name__)


def validate_environment() -> list[str]:
    """Validate environment variables at startup.

    Returns:
        List of validation error messages (empty if all valid).
    """
    errors = []

    port_str = os.getenv("FUZZY_LOCATE_PORT", "8000")
    try:
        port = int(port_str)
        if not (1 <= port <= 65535):
            errors.append(f"FUZZY_LOCATE_PORT must be between 1 and 65535, got: {port}")
    except ValueError:
        errors.append(f"FUZZY_LOCATE_PORT must be an integer, got: {port_str}")

    valid_log_levels = {"debug", "info", "warning", "error", "critical"}
    log_level = os.getenv("FUZZY_LOCATE_LOG_LEVEL", "info").lower()
    if log_level not in valid_log_levels:
        errors.append(f"FUZZY_LOCATE_LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}")

    search_level = os.getenv("FUZZY_LOCATE_SEARCH_LOG_LEVEL", "").lower()
    if search_level and search_level not in valid_log_levels:
        errors.append(
            f"FUZZY_LOCATE_SEARCH_LOG_LEVEL must be one of {valid_log_levels}, got: {search_level}"
        )

    log_format = os.getenv("FUZZY_LOCATE_LOG_FORMAT", "json").lower()
    if log_format not in {"json", "text"}:
        errors.append(f"FUZZY_LOCATE_LOG_FORMAT must be 'json' or 'text', got: {log_format}")

    # Matching defaults and the optional YAML file
    try:
        load_settings()
    except (FileNotFoundError, ValueError) as e:
        errors.append(str(e))

    return errors


def main():
    """Run the fuzzy-locate server."""
    validation_errors = validate_environment()
    if validation_errors:
        for error in validation_errors:
            logger.error(error, extra={"event": "config_error"})
        print("\nConfiguration errors detected:", file=sys.stderr)
        for error in validation_errors:
            print(f"  - {error}", file=sys.stderr)
        print("\nPlease fix the above errors and restart.", file=sys.stderr)
        sys.exit(1)

    host = os.getenv("FUZZY_LOCATE_HOST", "127.0.0.1")
    port = int(os.getenv("FUZZY_LOCATE_PORT", "8000"))
    reload = os.getenv("FUZZY_LOCATE_RELOAD", "false").lower() == "true"
    log_level = os.getenv("FUZZY_LOCATE_LOG_LEVEL", "info").lower()

    print(f"fuzzy-locate v{__version__}")
    print(f"  Harness UI: http://{host}:{port}/ui")
    print(f"  API Docs:   http://{host}:{port}/docs")
    print(f"  Metrics:    http://{host}:{port}/metrics")

    logger.info(
        "Starting fuzzy-locate server",
        extra={
            "event": "server_starting",
            "host": host,
            "port": port,
            "version": __version__,
        },
    )

    uvicorn.run(
        "fuzzy_locate.api.routes:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
