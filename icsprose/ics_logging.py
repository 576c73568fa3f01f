"""
Central logging configuration for icsprose.

Resolves the effective level from arguments and environment and applies it
to the icsprose module loggers, leaving third-party loggers quieter.
"""

import logging
import os
from typing import Optional

ICSPROSE_MODULES = [
    "icsprose",
    "icsprose.converter",
    "icsprose.config_loader",
    "icsprose.calendar.ics_unfolder",
    "icsprose.calendar.ics_event_parser",
    "icsprose.calendar.ics_datetime_utils",
    "icsprose.calendar.ics_rrule_formatter",
    "icsprose.calendar.ics_person_parser",
    "icsprose.calendar.ics_formatter",
]

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Libraries that are noisy at DEBUG
SUPPRESSED_LOGGERS = [
    "asyncio",
    "pydantic",
]


def configure_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    level_name: Optional[str] = None,
) -> None:
    """
    Configure logging levels for icsprose.

    Args:
        debug_mode: Whether to enable debug logging for icsprose modules
        force_debug: Override debug mode setting (None to use env var detection)
        level_name: Level used when debug is off (e.g. from config; default INFO)

    Environment Variables:
        ICSPROSE_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        ICSPROSE_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_debug = os.getenv("ICSPROSE_DEBUG", "").lower() in ("1", "true", "yes")
    env_log_level = os.getenv("ICSPROSE_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug:
        final_debug = True
    else:
        final_debug = debug_mode

    base_level = logging.INFO
    if level_name and level_name.upper() in VALID_LEVELS:
        base_level = getattr(logging, level_name.upper())

    root_level = logging.DEBUG if final_debug else base_level
    if env_log_level in VALID_LEVELS:
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    logger_config: dict[str, int] = {name: logging.WARNING for name in SUPPRESSED_LOGGERS}

    module_level = logging.DEBUG if final_debug else root_level
    for module in ICSPROSE_MODULES:
        logger_config[module] = module_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.debug("Debug logging enabled for icsprose modules")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ["icsprose", *SUPPRESSED_LOGGERS]:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
