"""Translation models for i18n system.

Defines core data structures for locale discovery and translation lookup.
"""

from dataclasses import dataclass
from typing import List, Optional

DEFAULT_NOT_FOUND_SYMBOL = "?"


@dataclass(frozen=True)
class CatalogOptions:
    """Immutable configuration for a TranslationCatalog.

    Attributes:
        not_found_symbol: Marker wrapped around keys with no translation.
            An empty value falls back to "?".
        logging_enabled: Whether the catalog emits log events.
        throw_on_missing_key: Raise KeyNotFoundError instead of returning
            the marked key.
        default_locale: Locale loaded on initialize. When None it is derived
            from the current culture.
    """

    not_found_symbol: str = DEFAULT_NOT_FOUND_SYMBOL
    logging_enabled: bool = True
    throw_on_missing_key: bool = False
    default_locale: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.not_found_symbol:
            object.__setattr__(self, "not_found_symbol", DEFAULT_NOT_FOUND_SYMBOL)
        if self.default_locale is not None and not self.default_locale.strip():
            object.__setattr__(self, "default_locale", None)


@dataclass(frozen=True)
class LocaleEntry:
    """A discovered locale and the resource that backs it.

    Attributes:
        identifier: Locale identifier (e.g., "en", "es-ES").
        resource_name: Name of the resource within its ResourceSource.
    """

    identifier: str
    resource_name: str


@dataclass(frozen=True)
class Language:
    """A locale paired with its display name in the active locale.

    Attributes:
        locale: Locale identifier (e.g., "fr").
        display_name: Human-readable name, translated by the active table.
    """

    locale: str
    display_name: str

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class CultureInfo:
    """Locale information of the running environment.

    Candidates are matched against discovered locales in the order
    returned by candidates().

    Attributes:
        name: Full culture name (e.g., "es-ES").
        two_letter_iso: ISO 639-1 code (e.g., "es").
        three_letter_iso: ISO 639-2 code (e.g., "spa").
        three_letter_windows: Windows three-letter code (e.g., "ESP").
    """

    name: str
    two_letter_iso: str = ""
    three_letter_iso: str = ""
    three_letter_windows: str = ""

    def candidates(self) -> List[str]:
        """Return non-empty candidate identifiers in preference order.

        Returns:
            List of candidate locale identifiers.
        """
        return [
            value
            for value in (
                self.name,
                self.two_letter_iso,
                self.three_letter_iso,
                self.three_letter_windows,
            )
            if value
        ]
