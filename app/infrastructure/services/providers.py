"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

import threading
from functools import lru_cache
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n import TranslationCatalog, create_catalog

_catalog: Optional[TranslationCatalog] = None
_catalog_lock = threading.Lock()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_catalog() -> TranslationCatalog:
    """
    Get the application-scoped translation catalog.

    The first caller builds and initializes the catalog from settings;
    concurrent first callers block on a lock and all observe the same
    instance.

    Usage:
        catalog = get_catalog()
        title = catalog.translate("ChooseLanguage")

    Returns:
        TranslationCatalog: Shared, initialized catalog.

    Raises:
        NoLocalesFoundError: If the configured locales directory has no locales.
    """
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = create_catalog(settings=get_settings())
    return _catalog


def reset_catalog() -> None:
    """Drop the shared catalog so the next get_catalog() builds a new one."""
    global _catalog
    with _catalog_lock:
        _catalog = None
