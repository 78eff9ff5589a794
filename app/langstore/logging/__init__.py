"""Structured logging infrastructure.

Public API:
    - configure_logging(): Optional pipeline setup for the hosting application
    - get_module_logger(): Get a logger for the calling module
"""

from langstore.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
