"""Culture detection for default locale selection.

Provides the current environment's culture as a CultureInfo carrying the
four candidate identifiers (full name, ISO 639-1, ISO 639-2 and Windows
three-letter code) that the catalog matches against discovered locales.
"""

import locale
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

import structlog
from infrastructure.i18n.models import CultureInfo

logger = structlog.get_logger().bind(component="i18n.culture")

# ISO 639-1 -> (ISO 639-2/T, Windows three-letter language name)
LANGUAGE_CODES: Dict[str, Tuple[str, str]] = {
    "ar": ("ara", "ARA"),
    "ca": ("cat", "CAT"),
    "cs": ("ces", "CSY"),
    "da": ("dan", "DAN"),
    "de": ("deu", "DEU"),
    "el": ("ell", "ELL"),
    "en": ("eng", "ENU"),
    "es": ("spa", "ESP"),
    "fi": ("fin", "FIN"),
    "fr": ("fra", "FRA"),
    "he": ("heb", "HEB"),
    "hi": ("hin", "HIN"),
    "hu": ("hun", "HUN"),
    "it": ("ita", "ITA"),
    "ja": ("jpn", "JPN"),
    "ko": ("kor", "KOR"),
    "nb": ("nob", "NOR"),
    "nl": ("nld", "NLD"),
    "pl": ("pol", "PLK"),
    "pt": ("por", "PTB"),
    "ro": ("ron", "ROM"),
    "ru": ("rus", "RUS"),
    "sv": ("swe", "SVE"),
    "tr": ("tur", "TRK"),
    "uk": ("ukr", "UKR"),
    "zh": ("zho", "CHS"),
}

# Windows names that depend on the region rather than the language alone
WINDOWS_REGION_CODES: Dict[str, str] = {
    "en-GB": "ENG",
    "en-AU": "ENA",
    "en-CA": "ENC",
    "fr-CA": "FRC",
    "de-AT": "DEA",
    "de-CH": "DES",
    "es-MX": "ESM",
    "pt-PT": "PTG",
    "zh-TW": "CHT",
    "zh-HK": "ZHH",
}

LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def normalize_culture_name(raw: Optional[str]) -> str:
    """Turn a POSIX or BCP 47 locale string into a culture name.

    Args:
        raw: Locale string (e.g., "es_ES.UTF-8", "en-us", "fr_CA@euro").

    Returns:
        Culture name (e.g., "es-ES"), or "" for empty/C/POSIX locales.
    """
    value = (raw or "").strip()
    # LANGUAGE may hold a colon-separated preference list
    value = value.split(":", 1)[0]
    value = value.split(".", 1)[0].split("@", 1)[0]
    if not value or value.upper() in ("C", "POSIX"):
        return ""

    parts = value.replace("_", "-").split("-")
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    region = parts[1]
    region = region.upper() if len(region) == 2 else region.title()
    return "-".join([language, region, *parts[2:]])


def culture_from_name(name: str) -> CultureInfo:
    """Build a CultureInfo from a culture name.

    Args:
        name: Culture name (e.g., "es-ES").

    Returns:
        CultureInfo with three-letter codes filled in for known languages.
    """
    name = normalize_culture_name(name)
    two_letter = name.split("-", 1)[0]
    three_letter_iso, three_letter_windows = LANGUAGE_CODES.get(two_letter, ("", ""))
    three_letter_windows = WINDOWS_REGION_CODES.get(name, three_letter_windows)
    return CultureInfo(
        name=name,
        two_letter_iso=two_letter,
        three_letter_iso=three_letter_iso,
        three_letter_windows=three_letter_windows,
    )


class CultureProvider(ABC):
    """Abstract provider of the current environment culture."""

    @abstractmethod
    def current_culture(self) -> CultureInfo:
        """Return the culture of the running environment.

        Returns:
            CultureInfo; its name is "" when the culture is unknown.
        """
        pass


class SystemCultureProvider(CultureProvider):
    """Reads the culture from environment variables and the process locale.

    Resolution order:
    1. LANGUAGE, LC_ALL, LC_MESSAGES, LANG environment variables; the first
       non-empty one decides, so LC_ALL=C yields an unknown culture
    2. The raw LC_CTYPE setting of the process (locale.setlocale query)

    locale.getlocale() is not used: it maps "C" and "C.UTF-8" to en_US.
    """

    def current_culture(self) -> CultureInfo:
        raw = self._environment_locale()
        if raw is None:
            raw = locale.setlocale(locale.LC_CTYPE)

        culture = culture_from_name(raw)
        logger.debug("detected_system_culture", raw=raw, culture=culture.name)
        return culture

    @staticmethod
    def _environment_locale() -> Optional[str]:
        for var in LOCALE_ENV_VARS:
            value = os.environ.get(var, "").strip()
            if value:
                return value
        return None


class StaticCultureProvider(CultureProvider):
    """Returns a fixed culture; used for explicit configuration and tests."""

    def __init__(self, culture: CultureInfo):
        self.culture = culture

    @classmethod
    def from_name(cls, name: str) -> "StaticCultureProvider":
        """Create a provider for a culture name (e.g., "fr-CA")."""
        return cls(culture_from_name(name))

    def current_culture(self) -> CultureInfo:
        return self.culture
