"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- i18n: Translation catalog, locale discovery and culture detection
- services: Application-scoped providers (get_settings, get_catalog)
"""
