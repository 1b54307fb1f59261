import sys
from pathlib import Path

import pytest

# Ensure the application root (app/) is importable when pytest is invoked
# without the pythonpath setting from pyproject.toml.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from infrastructure.services import providers  # noqa: E402


@pytest.fixture(autouse=True)
def reset_shared_catalog():
    """Drop the shared catalog and cached settings around every test."""
    providers.reset_catalog()
    providers.get_settings.cache_clear()
    yield
    providers.reset_catalog()
    providers.get_settings.cache_clear()


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* and locale environment variables."""
    for var in (
        "I18N_NOT_FOUND_SYMBOL",
        "I18N_LOGGING_ENABLED",
        "I18N_THROW_ON_MISSING_KEY",
        "I18N_DEFAULT_LOCALE",
        "I18N_LOCALES_DIR",
        "LANGUAGE",
        "LC_ALL",
        "LC_MESSAGES",
        "LANG",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
