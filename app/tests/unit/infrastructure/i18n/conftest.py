"""Feature-level fixtures for i18n system tests.

Provides locale directories, in-memory sources and catalogs for discovery,
loading and translation scenarios.
"""

import pytest

from infrastructure.i18n import InMemoryResourceSource
from tests.factories.i18n import make_catalog


@pytest.fixture
def locales_dir(tmp_path):
    """Create a 'Locales' directory with en, es and fr files.

    Returns the path of the Locales directory:
    - Locales/en.txt
    - Locales/es.txt
    - Locales/fr.txt
    """
    root = tmp_path / "Locales"
    root.mkdir()
    (root / "en.txt").write_text(
        "# English\n"
        "greeting = Hello\n"
        "farewell = Bye\n"
        "welcome_user = Welcome, {0}!\n"
        "en = English\n"
        "es = Spanish\n"
        "fr = French\n",
        encoding="utf-8",
    )
    (root / "es.txt").write_text(
        "greeting = Hola\n"
        "welcome_user = ¡Bienvenido, {0}!\n"
        "en = Inglés\n"
        "es = Español\n"
        "fr = Francés\n",
        encoding="utf-8",
    )
    (root / "fr.txt").write_text(
        "greeting = Bonjour\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def scenario_source():
    """In-memory source with the English/Spanish greeting scenario."""
    return InMemoryResourceSource(
        {
            "Locales.en.txt": "greeting = Hello\nfarewell = Bye\n",
            "Locales.es.txt": "greeting = Hola\n",
        }
    )


@pytest.fixture
def catalog():
    """Initialized catalog with the default en/es factory files, en active."""
    return make_catalog(default_locale="en")


@pytest.fixture
def three_locale_files():
    """Locale files registered in the order en, es-ES, fr."""
    return {
        "App.Locales.en.txt": "en = English\n",
        "App.Locales.es-ES.txt": "en = Inglés\n",
        "App.Locales.fr.txt": "en = Anglais\n",
    }
