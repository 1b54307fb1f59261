"""Language picker view-model.

Presents the discovered locales through an action sheet and switches the
catalog to the selected one. Presentation itself is delegated to an
ActionSheetPresenter supplied by the UI layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import structlog
from infrastructure.i18n import Language, TranslationCatalog

logger = structlog.get_logger()

CHOOSE_LANGUAGE_KEY = "ChooseLanguage"
CANCEL_KEY = "Cancel"


class ActionSheetPresenter(ABC):
    """UI collaborator that shows a list of choices and returns the pick."""

    @abstractmethod
    def display_action_sheet(
        self,
        title: str,
        cancel: str,
        destructive: Optional[str],
        buttons: Sequence[str],
    ) -> Optional[str]:
        """Show an action sheet.

        Args:
            title: Sheet title.
            cancel: Label of the cancel button.
            destructive: Label of a destructive button, if any.
            buttons: Labels of the choices.

        Returns:
            The selected label, the cancel label, or None if dismissed.
        """
        pass


class LanguagePickerViewModel:
    """Lets the user switch the catalog's active locale."""

    def __init__(self, catalog: TranslationCatalog, presenter: ActionSheetPresenter):
        self.catalog = catalog
        self.presenter = presenter

    @property
    def strings(self) -> TranslationCatalog:
        """Catalog for indexer lookups, e.g. ``vm.strings["Welcome"]``."""
        return self.catalog

    @property
    def languages(self) -> List[Language]:
        """Languages to select, named in the active locale."""
        return self.catalog.list_locales()

    def change_language(self) -> Optional[str]:
        """Ask the user for a language and load it.

        Returns:
            The loaded locale identifier, or None if the user cancelled.
        """
        languages = self.languages
        cancel = self.catalog.translate(CANCEL_KEY)
        result = self.presenter.display_action_sheet(
            self.strings[CHOOSE_LANGUAGE_KEY],
            cancel,
            None,
            [language.display_name for language in languages],
        )

        if result is None or result == cancel:
            return None

        selected = next(
            (language for language in languages if language.display_name == result),
            None,
        )
        if selected is None:
            logger.warning("unknown_language_selected", selection=result)
            return None

        self.catalog.load_language(selected)
        logger.info("language_changed", locale=selected.locale)
        return selected.locale
