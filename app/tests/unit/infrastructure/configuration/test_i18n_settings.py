"""Unit tests for localization and aggregate settings."""

from pathlib import Path

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n.models import CatalogOptions


@pytest.mark.unit
class TestI18nSettings:
    """Test I18nSettings configuration."""

    def test_default_values(self, clean_i18n_env):
        """Test I18nSettings with default values."""
        settings = I18nSettings()

        assert settings.not_found_symbol == "?"
        assert settings.logging_enabled is True
        assert settings.throw_on_missing_key is False
        assert settings.default_locale is None
        assert settings.locales_dir is None

    def test_values_from_environment(self, clean_i18n_env, tmp_path):
        """Test I18nSettings reads I18N_* variables."""
        clean_i18n_env.setenv("I18N_NOT_FOUND_SYMBOL", "**")
        clean_i18n_env.setenv("I18N_LOGGING_ENABLED", "false")
        clean_i18n_env.setenv("I18N_THROW_ON_MISSING_KEY", "true")
        clean_i18n_env.setenv("I18N_DEFAULT_LOCALE", "es-ES")
        clean_i18n_env.setenv("I18N_LOCALES_DIR", str(tmp_path))

        settings = I18nSettings()

        assert settings.not_found_symbol == "**"
        assert settings.logging_enabled is False
        assert settings.throw_on_missing_key is True
        assert settings.default_locale == "es-ES"
        assert settings.locales_dir == Path(tmp_path)

    def test_blank_default_locale_is_none(self, clean_i18n_env):
        """Test an empty I18N_DEFAULT_LOCALE means no explicit default."""
        clean_i18n_env.setenv("I18N_DEFAULT_LOCALE", "   ")

        assert I18nSettings().default_locale is None

    def test_to_options(self, clean_i18n_env):
        """Test to_options() carries every catalog setting across."""
        clean_i18n_env.setenv("I18N_NOT_FOUND_SYMBOL", "#")
        clean_i18n_env.setenv("I18N_LOGGING_ENABLED", "false")
        clean_i18n_env.setenv("I18N_THROW_ON_MISSING_KEY", "true")
        clean_i18n_env.setenv("I18N_DEFAULT_LOCALE", "es")

        options = I18nSettings().to_options()

        assert options == CatalogOptions(
            not_found_symbol="#",
            logging_enabled=False,
            throw_on_missing_key=True,
            default_locale="es",
        )

    def test_to_options_defaults(self, clean_i18n_env):
        """Test default settings produce default catalog options."""
        assert I18nSettings().to_options() == CatalogOptions()

    def test_to_options_empty_symbol_falls_back(self, clean_i18n_env):
        """Test an empty not-found symbol becomes the default marker."""
        clean_i18n_env.setenv("I18N_NOT_FOUND_SYMBOL", "")

        assert I18nSettings().to_options().not_found_symbol == "?"


@pytest.mark.unit
class TestSettings:
    """Test the aggregate Settings."""

    def test_i18n_section_instantiated(self, clean_i18n_env):
        """Test Settings builds the i18n section automatically."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)

    def test_i18n_override(self, clean_i18n_env):
        """Test an explicit i18n section is kept."""
        section = I18nSettings(I18N_DEFAULT_LOCALE="fr")
        settings = Settings(i18n=section)

        assert settings.i18n.default_locale == "fr"

    def test_is_production(self, monkeypatch):
        """Test is_production depends on PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
