"""Factory functions for creating i18n components.

Provides convenience functions for building a TranslationCatalog with
configuration taken from application settings.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.culture import CultureProvider
from infrastructure.i18n.models import CatalogOptions
from infrastructure.i18n.sources import DirectoryResourceSource, ResourceSource

logger = structlog.get_logger()


def default_locales_dir() -> Path:
    """Return the bundled locales directory (app/Locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "Locales"


def options_from_settings(i18n_settings: I18nSettings) -> CatalogOptions:
    """Build immutable catalog options from I18nSettings.

    Args:
        i18n_settings: Localization settings section.

    Returns:
        CatalogOptions instance.
    """
    return i18n_settings.to_options()


def create_catalog(
    source: Optional[ResourceSource] = None,
    options: Optional[CatalogOptions] = None,
    culture_provider: Optional[CultureProvider] = None,
    initialize: bool = True,
    settings: Optional[Settings] = None,
) -> TranslationCatalog:
    """Create and configure a TranslationCatalog.

    Args:
        source: ResourceSource with locale files (default: directory from
            I18N_LOCALES_DIR, or the bundled app/Locales)
        options: Catalog options (default: built from settings.i18n)
        culture_provider: Culture provider (default: SystemCultureProvider)
        initialize: Whether to discover locales and load the default locale
            immediately (default: True). When False the caller runs
            catalog.initialize(source) later.
        settings: Settings to read defaults from (default: Settings())

    Returns:
        TranslationCatalog: Configured catalog

    Raises:
        ValueError: If the locales directory does not exist
        NoLocalesFoundError: If initialize is True and no locales are found

    Usage:
        # Bundled locales, default locale derived from the environment
        catalog = create_catalog()

        # Custom directory and explicit default
        catalog = create_catalog(
            source=DirectoryResourceSource(Path("/srv/app/Locales")),
            options=CatalogOptions(default_locale="fr"),
        )
    """
    settings = settings or Settings()

    if options is None:
        options = options_from_settings(settings.i18n)

    catalog = TranslationCatalog(options=options, culture_provider=culture_provider)

    if initialize:
        if source is None:
            locales_dir = settings.i18n.locales_dir or default_locales_dir()
            source = DirectoryResourceSource(locales_dir)
        catalog.initialize(source)
        logger.info(
            "catalog_created_initialized",
            active_locale=catalog.active_locale,
            locale_count=len(catalog.locales),
        )
    else:
        logger.info("catalog_created_lazy")

    return catalog
