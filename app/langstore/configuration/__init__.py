"""Configuration module - public API.

Centralized configuration for langstore using Pydantic BaseSettings.
Nothing is read from the environment at import time; use
``langstore.services.get_settings()`` for the process-scoped instance.

Exports:
    Settings: Main settings class
    LangSettings: Translation store settings class

Example:
    ```python
    from langstore.services import get_settings

    settings = get_settings()
    paths = settings.lang.PATHS
    ```
"""

from langstore.configuration.lang import LangSettings
from langstore.configuration.settings import Settings

__all__ = ["Settings", "LangSettings"]
