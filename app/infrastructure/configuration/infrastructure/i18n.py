"""Localization infrastructure settings."""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

if TYPE_CHECKING:
    from infrastructure.i18n.models import CatalogOptions


class I18nSettings(InfrastructureSettings):
    """Translation catalog configuration.

    Environment Variables:
        I18N_NOT_FOUND_SYMBOL: Marker wrapped around unresolved keys (default: "?")
        I18N_LOGGING_ENABLED: Log discovery, selection and loaded entries (default: True)
        I18N_THROW_ON_MISSING_KEY: Raise instead of returning the marked key (default: False)
        I18N_DEFAULT_LOCALE: Explicit locale to load at startup (default: derived)
        I18N_LOCALES_DIR: Directory named 'Locales' holding <locale>.txt files (default: bundled)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.i18n.throw_on_missing_key:
            # Strict lookups...
        ```
    """

    not_found_symbol: str = Field(
        default="?",
        alias="I18N_NOT_FOUND_SYMBOL",
        description="Marker wrapped around keys that have no translation",
    )
    logging_enabled: bool = Field(
        default=True,
        alias="I18N_LOGGING_ENABLED",
        description="Emit catalog log events",
    )
    throw_on_missing_key: bool = Field(
        default=False,
        alias="I18N_THROW_ON_MISSING_KEY",
        description="Raise KeyNotFoundError for unknown keys",
    )
    default_locale: Optional[str] = Field(
        default=None,
        alias="I18N_DEFAULT_LOCALE",
        description="Locale identifier loaded at startup",
    )
    locales_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory named 'Locales' containing <locale>.txt files",
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def _blank_locale_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_options(self) -> "CatalogOptions":
        """Build immutable catalog options from these settings.

        Returns:
            CatalogOptions instance.
        """
        # Imported here: infrastructure.i18n depends on this configuration package
        from infrastructure.i18n.models import CatalogOptions

        return CatalogOptions(
            not_found_symbol=self.not_found_symbol,
            logging_enabled=self.logging_enabled,
            throw_on_missing_key=self.throw_on_missing_key,
            default_locale=self.default_locale,
        )
