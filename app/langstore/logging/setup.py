"""Structlog logger setup.

Library modules only ask for loggers; nothing is configured on import.
Hosting applications that want langstore's log pipeline call
``configure_logging()`` once at startup, otherwise events follow whatever
structlog configuration the host already has.

Usage:
    from langstore.logging import configure_logging, get_module_logger

    # In the hosting application, once
    configure_logging()

    # In a langstore module
    logger = get_module_logger()
    logger.info("namespace_loaded", namespace="errors")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from langstore.configuration import Settings


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Route structlog events through the standard library logging module.

    Events are filtered by the level of their stdlib logger (named after the
    emitting module, e.g. ``langstore.i18n.store``), then rendered as JSON in
    production and as console output otherwise.

    Args:
        settings: Settings providing LOG_LEVEL and production mode
            (default: ``langstore.services.get_settings()``).
        log_level: Override for the root log level.
        is_production: Override for production mode.

    Returns:
        Configured logger instance
    """
    if settings is None:
        from langstore.services.providers import get_settings

        settings = get_settings()

    prod_mode = settings.is_production if is_production is None else is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger("langstore")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    The logger is a lazy structlog proxy named after the calling module, and
    bound with ``component`` and ``module_path``. It picks up the structlog
    configuration active when it is first used, not when it is created.

    Example:
        # In langstore/i18n/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "langstore.i18n.store"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return structlog.get_logger("langstore", component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
