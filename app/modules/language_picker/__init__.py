"""Language picker module - sample view-model for switching locale at runtime."""

from modules.language_picker.view_model import (
    ActionSheetPresenter,
    LanguagePickerViewModel,
)

__all__ = ["ActionSheetPresenter", "LanguagePickerViewModel"]
