"""Custom exceptions for the i18n system.

All exceptions derive from I18nError so callers can handle catalog
failures with a single except clause.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all translation catalog errors.

    Example:
        try:
            catalog.load_locale("de")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class NoLocalesFoundError(I18nError):
    """Raised when initialize() finds no locale resources.

    Resources must have a 'Locales' segment in their name and end in '.txt'.
    """

    pass


class LocaleNotFoundError(I18nError, LookupError):
    """Raised when a requested locale was not discovered.

    Example:
        >>> catalog.load_locale("de")
        Traceback (most recent call last):
        ...
        LocaleNotFoundError: Locale 'de' is not available
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not available")


class KeyNotFoundError(I18nError, LookupError):
    """Raised for a missing key when throw_on_missing_key is enabled."""

    def __init__(self, key: str, locale: Optional[str]):
        self.key = key
        self.locale = locale
        super().__init__(
            f"[I18N] key '{key}' not found in the current language '{locale}'"
        )


class MalformedLocaleFileError(I18nError, ValueError):
    """Raised when a locale resource cannot be parsed.

    Attributes:
        source: Resource name being parsed, if known.
        line_number: 1-based line number of the offending line.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.source = source
        self.line_number = line_number
        location = source or "<locale>"
        if line_number is not None:
            location = f"{location}:{line_number}"
        super().__init__(f"{location}: {message}")


class TranslationFormatError(I18nError, ValueError):
    """Raised when a template cannot be formatted with the given arguments."""

    def __init__(self, key: str, template: str, reason: str):
        self.key = key
        self.template = template
        super().__init__(f"Cannot format translation '{key}' ({template!r}): {reason}")


class CatalogStateError(I18nError, RuntimeError):
    """Raised when an operation is not allowed in the catalog's current state."""

    pass
