import logging

import pytest

from dockterm.i18n.english import english_set
from dockterm.i18n.localizer import (
    LanguageNotFoundError,
    detect_language,
    detect_system_language,
    get_translation_sets,
    new_translation_set,
    new_translation_set_from_config,
)

LOG = logging.getLogger("test_localizer")


def _clear_locale(monkeypatch):
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)


def test_translation_set_codes():
    assert list(get_translation_sets()) == [
        "pl", "nl", "de", "tr", "en", "fr", "zh", "es", "pt",
    ]


def test_english_entry_is_english_set():
    assert get_translation_sets()["en"] == english_set()


def test_prefix_match_overrides_and_falls_back():
    ts = new_translation_set(LOG, "es_ES")
    assert ts.donate == "Donar"
    assert ts.scroll == english_set().scroll


def test_unknown_language_gives_english():
    assert new_translation_set(LOG, "C") == english_set()


def test_language_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="test_localizer"):
        new_translation_set(LOG, "de")
    assert "language: de" in caplog.messages


def test_from_config_known_language():
    assert new_translation_set_from_config(LOG, "tr").donate == "Bağış"


def test_from_config_unknown_language_raises_with_fallback():
    with pytest.raises(LanguageNotFoundError) as excinfo:
        new_translation_set_from_config(LOG, "xx")
    assert str(excinfo.value) == "Language not found: xx"
    assert excinfo.value.fallback == english_set()


def test_from_config_auto_uses_environment(monkeypatch):
    _clear_locale(monkeypatch)
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")
    assert new_translation_set_from_config(LOG, "auto").confirm == "Confirmer"


def test_detect_system_language(monkeypatch):
    _clear_locale(monkeypatch)
    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    assert detect_system_language() == "de"


def test_detect_system_language_missing(monkeypatch):
    _clear_locale(monkeypatch)
    with pytest.raises(LookupError):
        detect_system_language()


def test_detect_language_failure_gives_c():
    def failing():
        raise LookupError("nothing")

    assert detect_language(failing) == "C"
    assert detect_language(lambda: "pt") == "pt"