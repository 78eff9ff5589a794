"""
Dependency injection services.

Provides provider functions for process-scoped singletons.
"""

from langstore.services.providers import get_settings, get_translation_store

__all__ = ["get_settings", "get_translation_store"]
