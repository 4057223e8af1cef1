"""Shared pytest fixtures."""

import locale

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from bhom_converter.utils import JsonHandler, Log


@pytest.fixture(autouse=True)
def _reset_logger():
    Log.verbose = False
    yield
    Log.verbose = False


@pytest.fixture(autouse=True)
def _restore_numeric_locale():
    saved = locale.setlocale(locale.LC_NUMERIC)
    yield
    locale.setlocale(locale.LC_NUMERIC, saved)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


_COMMA_DECIMAL_LOCALES = (
    "de_DE.UTF-8", "de_DE.utf8", "de_DE",
    "fr_FR.UTF-8", "fr_FR.utf8", "nl_NL.UTF-8", "es_ES.UTF-8",
    "German_Germany.1252",
)


@pytest.fixture
def comma_decimal_locale():
    """Switch LC_NUMERIC to an installed locale whose decimal point is ','."""
    for name in _COMMA_DECIMAL_LOCALES:
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error:
            continue
        if locale.localeconv()["decimal_point"] == ",":
            return name
    pytest.skip("no comma-decimal locale installed")


@pytest.fixture
def parse():
    """Parse JSON text the way the batch reader does."""
    return JsonHandler.parse


@pytest.fixture
def write_json():
    def _write(directory, name, text):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
