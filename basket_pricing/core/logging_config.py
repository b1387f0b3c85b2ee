# basket_pricing/core/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from basket_pricing.core.settings import BasketSettings, get_settings


def setup_logging(settings: Optional[BasketSettings] = None) -> None:
    """
    Configure structlog + standaard logging.
    JSON to stdout by default; console renderer when LOG_JSON is off.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    )

    renderer = structlog.processors.JSONRenderer() if settings.LOG_JSON else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Globale logger die je overal kunt importeren.
# Backed by the stdlib "basket_pricing" logger, so stdlib levels apply until setup_logging().
logger = structlog.wrap_logger(
    logging.getLogger("basket_pricing"),
    wrapper_class=structlog.stdlib.BoundLogger,
)
