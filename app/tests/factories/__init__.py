"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_catalog_options,
    make_culture,
    make_locale_source,
)

__all__ = [
    "make_catalog",
    "make_catalog_options",
    "make_culture",
    "make_locale_source",
]
