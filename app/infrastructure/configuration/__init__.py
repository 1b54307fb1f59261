"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation catalog settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    options = settings.i18n.to_options()
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]
