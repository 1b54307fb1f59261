"""i18n system - runtime translation catalog.

Discovers locale resources, loads one active locale's key/value pairs and
serves translated strings with positional formatting.

Main components:
- models: CatalogOptions, LocaleEntry, Language, CultureInfo
- sources: ResourceSource and directory, package and in-memory sources
- parser: line-oriented ``key = value`` locale file parser
- culture: CultureProvider implementations for default locale derivation
- catalog: TranslationCatalog with load_locale(), translate(), list_locales()
- factory: create_catalog() wired from application settings
"""

from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.culture import (
    CultureProvider,
    StaticCultureProvider,
    SystemCultureProvider,
)
from infrastructure.i18n.exceptions import (
    CatalogStateError,
    I18nError,
    KeyNotFoundError,
    LocaleNotFoundError,
    MalformedLocaleFileError,
    NoLocalesFoundError,
    TranslationFormatError,
)
from infrastructure.i18n.factory import create_catalog
from infrastructure.i18n.models import CatalogOptions, CultureInfo, Language, LocaleEntry
from infrastructure.i18n.sources import (
    DirectoryResourceSource,
    InMemoryResourceSource,
    PackageResourceSource,
    ResourceSource,
)

__all__ = [
    "CatalogOptions",
    "CultureInfo",
    "Language",
    "LocaleEntry",
    "ResourceSource",
    "DirectoryResourceSource",
    "PackageResourceSource",
    "InMemoryResourceSource",
    "CultureProvider",
    "SystemCultureProvider",
    "StaticCultureProvider",
    "TranslationCatalog",
    "create_catalog",
    "I18nError",
    "NoLocalesFoundError",
    "LocaleNotFoundError",
    "KeyNotFoundError",
    "MalformedLocaleFileError",
    "TranslationFormatError",
    "CatalogStateError",
]
