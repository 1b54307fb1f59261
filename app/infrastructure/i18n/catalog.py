"""Translation catalog: locale discovery, loading and lookup.

The catalog discovers locale resources from a ResourceSource, keeps exactly
one locale's translation table in memory and serves translated strings with
optional positional formatting.

Lifecycle:
    catalog = TranslationCatalog(CatalogOptions(default_locale="en"))
    catalog.initialize(DirectoryResourceSource(locales_dir))
    catalog.translate("greeting")
    catalog.load_locale("es")
"""

import threading
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from infrastructure.i18n.culture import CultureProvider, SystemCultureProvider
from infrastructure.i18n.exceptions import (
    CatalogStateError,
    KeyNotFoundError,
    LocaleNotFoundError,
    MalformedLocaleFileError,
    NoLocalesFoundError,
    TranslationFormatError,
)
from infrastructure.i18n.models import CatalogOptions, Language, LocaleEntry
from infrastructure.i18n.parser import parse_stream
from infrastructure.i18n.sources import (
    ResourceSource,
    is_locale_resource,
    locale_from_resource_name,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationCatalog:
    """Holds the active locale's translations and serves lookups.

    States: unconfigured (default options), configured, and initialized
    with an active locale. Switching locale replaces the whole table; a
    failed switch leaves the previous locale active.

    All public operations are serialized by a reentrant lock.

    Attributes:
        options: CatalogOptions in effect.
    """

    def __init__(
        self,
        options: Optional[CatalogOptions] = None,
        culture_provider: Optional[CultureProvider] = None,
    ):
        """Initialize an empty catalog.

        Args:
            options: Catalog options. Defaults to CatalogOptions().
            culture_provider: Source of the environment culture used to
                derive the default locale (default: SystemCultureProvider).
        """
        self._options = options or CatalogOptions()
        self._configured = options is not None
        self._culture_provider = culture_provider or SystemCultureProvider()
        self._source: Optional[ResourceSource] = None
        self._locales: Dict[str, str] = {}
        self._translations: Dict[str, str] = {}
        self._active_locale: Optional[str] = None
        self._lock = threading.RLock()

    @property
    def options(self) -> CatalogOptions:
        """CatalogOptions in effect."""
        return self._options

    @property
    def active_locale(self) -> Optional[str]:
        """Identifier of the loaded locale, or None before initialize()."""
        return self._active_locale

    @property
    def locales(self) -> List[str]:
        """Discovered locale identifiers in enumeration order."""
        with self._lock:
            return list(self._locales)

    @property
    def is_configured(self) -> bool:
        """Whether options were supplied explicitly."""
        return self._configured

    @property
    def is_initialized(self) -> bool:
        """Whether a locale has been loaded."""
        return self._active_locale is not None

    def configure(self, options: CatalogOptions) -> "TranslationCatalog":
        """Replace the catalog options.

        Args:
            options: New options.

        Returns:
            The catalog, for chaining into initialize().

        Raises:
            CatalogStateError: If the catalog is already initialized.
        """
        with self._lock:
            if self.is_initialized:
                raise CatalogStateError(
                    "Catalog is already initialized; configure it before initialize()"
                )
            self._options = options
            self._configured = True
            return self

    def initialize(self, source: ResourceSource) -> "TranslationCatalog":
        """Discover locales in a source and load the default locale.

        Nothing changes unless the default locale loads: a failed call on an
        initialized catalog keeps the previous source, registry and table.

        Args:
            source: ResourceSource holding the locale files.

        Returns:
            The initialized catalog.

        Raises:
            NoLocalesFoundError: If no resource matches the naming convention.
            LocaleNotFoundError: If the configured default locale is unknown.
            MalformedLocaleFileError: If the default locale fails to parse.
        """
        with self._lock:
            locales = self._discover_locales(source)

            default_locale = self._options.default_locale
            if default_locale:
                self._log("info", "default_locale_configured", locale=default_locale)
            else:
                default_locale = self._match_culture(locales)
                if default_locale is not None:
                    self._log("info", "default_locale_from_culture", locale=default_locale)
                else:
                    default_locale = next(iter(locales))
                    self._log(
                        "info",
                        "default_locale_first_available",
                        locale=default_locale,
                    )

            translations = self._read_locale(source, locales, default_locale)

            self._source = source
            self._locales = locales
            self._activate(default_locale, locales[default_locale], translations)
            return self

    def _discover_locales(self, source: ResourceSource) -> Dict[str, str]:
        self._log("info", "discovering_locales")
        names = [name for name in source.list_names() if is_locale_resource(name)]
        if not names:
            self._log("error", "no_locales_found")
            raise NoLocalesFoundError(
                "No locales have been found. Make sure there is a 'Locales' "
                "folder containing <locale>.txt files"
            )

        locales: Dict[str, str] = {}
        for name in names:
            # Later resources with the same identifier replace earlier ones
            locales[locale_from_resource_name(name)] = name

        self._log(
            "info",
            "locales_discovered",
            count=len(names),
            locales=list(locales),
        )
        return locales

    def default_locale_from_culture(self) -> Optional[str]:
        """Match the environment culture against discovered locales.

        Candidates are tried in order: full culture name, ISO 639-1,
        ISO 639-2 and Windows three-letter code. Matching is exact.

        Returns:
            The first discovered identifier matching a candidate, or None.
        """
        with self._lock:
            return self._match_culture(self._locales)

    def _match_culture(self, locales: Dict[str, str]) -> Optional[str]:
        culture = self._culture_provider.current_culture()
        for candidate in culture.candidates():
            if candidate in locales:
                return candidate
        return None

    def locale_entries(self) -> List[LocaleEntry]:
        """Return the discovered locales with their resource names."""
        with self._lock:
            return [
                LocaleEntry(identifier=identifier, resource_name=resource)
                for identifier, resource in self._locales.items()
            ]

    def load_locale(self, locale: str) -> None:
        """Load a discovered locale and make it active.

        The previous table stays active if loading fails.

        Args:
            locale: Locale identifier (e.g., "es").

        Raises:
            LocaleNotFoundError: If the locale was not discovered.
            MalformedLocaleFileError: If the locale file cannot be parsed.
        """
        with self._lock:
            if self._source is None:
                self._log("warning", "locale_not_available", locale=locale)
                raise LocaleNotFoundError(locale)

            translations = self._read_locale(self._source, self._locales, locale)
            self._activate(locale, self._locales[locale], translations)

    def _read_locale(
        self, source: ResourceSource, locales: Dict[str, str], locale: str
    ) -> Dict[str, str]:
        resource_name = locales.get(locale)
        if resource_name is None:
            self._log("warning", "locale_not_available", locale=locale)
            raise LocaleNotFoundError(locale)

        try:
            with source.open(resource_name) as stream:
                return parse_stream(stream, source=resource_name)
        except MalformedLocaleFileError as e:
            self._log(
                "error",
                "locale_parse_failed",
                locale=locale,
                resource=resource_name,
                line_number=e.line_number,
                error=str(e),
            )
            raise

    def _activate(
        self, locale: str, resource_name: str, translations: Dict[str, str]
    ) -> None:
        self._translations = translations
        self._active_locale = locale
        self._log(
            "info",
            "locale_loaded",
            locale=locale,
            resource=resource_name,
            entry_count=len(translations),
        )
        self._log_translations()

    def load_language(self, language: Language) -> None:
        """Load the locale of a Language returned by list_locales()."""
        self.load_locale(language.locale)

    def translate(self, key: str, *args: Any) -> str:
        """Translate a key using the active locale.

        Args:
            key: Translation key.
            *args: Positional values for {0}, {1}, ... placeholders.

        Returns:
            The template when no args are given, the formatted template
            otherwise. Missing keys yield the key wrapped in the
            not-found symbol.

        Raises:
            KeyNotFoundError: If the key is missing and throw_on_missing_key
                is enabled.
            TranslationFormatError: If the template does not fit the args.
        """
        with self._lock:
            template = self._translations.get(key)
            if template is not None:
                return self._format(key, template, args)

            if self._options.throw_on_missing_key:
                self._log(
                    "error",
                    "translation_key_missing",
                    key=key,
                    locale=self._active_locale,
                )
                raise KeyNotFoundError(key, self._active_locale)

            symbol = self._options.not_found_symbol
            return f"{symbol}{key}{symbol}"

    def translate_or_none(self, key: str, *args: Any) -> Optional[str]:
        """Translate a key, returning None when it is missing."""
        with self._lock:
            template = self._translations.get(key)
            if template is None:
                return None
            return self._format(key, template, args)

    def translate_enum(self, enum_cls: Type[Enum]) -> Dict[Enum, str]:
        """Translate every member of an enum.

        Keys follow the pattern ``Enums.<EnumName>.<MemberName>``.

        Args:
            enum_cls: Enum class to translate.

        Returns:
            Dict mapping each member to its translation.
        """
        return {
            member: self.translate(f"Enums.{enum_cls.__name__}.{member.name}")
            for member in enum_cls
        }

    def list_locales(self) -> List[Language]:
        """List discovered locales with names in the active locale.

        Display names are the translation of each identifier against the
        active table and are recomputed on every call.

        Returns:
            Language entries in discovery order.
        """
        with self._lock:
            return [
                Language(locale=identifier, display_name=self.translate(identifier))
                for identifier in self._locales
            ]

    def __getitem__(self, key: str) -> str:
        return self.translate(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._translations

    def _format(self, key: str, template: str, args: tuple) -> str:
        if not args:
            return template
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
            self._log(
                "error",
                "translation_format_failed",
                key=key,
                locale=self._active_locale,
                error=str(e),
            )
            raise TranslationFormatError(key, template, str(e)) from e

    def _log_translations(self) -> None:
        if not self._options.logging_enabled:
            return
        for key, value in self._translations.items():
            logger.debug(
                "translation_entry",
                locale=self._active_locale,
                key=key,
                value=value,
            )

    def _log(self, level: str, event: str, **kwargs: Any) -> None:
        if self._options.logging_enabled:
            getattr(logger, level)(event, **kwargs)
