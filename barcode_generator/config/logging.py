"""
structlog wiring driven by the log settings.
"""

import logging

import structlog

from barcode_generator.config.settings import get_settings


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name (default: settings.log_level)
        log_format: "json" or "text" (default: settings.log_format)

    Raises:
        ValueError: unknown log level name
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    renderer_name = log_format or settings.log_format

    # getLevelName maps known names to ints and anything else to "Level X"
    level_number = logging.getLevelName(level_name)
    if not isinstance(level_number, int):
        raise ValueError(f"Unknown log level: {level_name}")

    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        cache_logger_on_first_use=False,
    )
