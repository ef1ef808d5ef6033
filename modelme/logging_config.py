"""structlog configuration for modelme.

Console rendering by default, JSON lines when MODELME_LOG_JSON is set.
"""

import logging
from typing import Optional

import structlog

from modelme.config import get_settings


def configure_logging(level: Optional[str] = None, log_json: Optional[bool] = None) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level: Level name ("debug", "info", ...). Defaults to MODELME_LOG_LEVEL.
        log_json: Use the JSON renderer. Defaults to MODELME_LOG_JSON.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if log_json is None else log_json

    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level_name}'")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
