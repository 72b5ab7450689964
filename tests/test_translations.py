from dataclasses import fields

from dockterm.i18n.english import TranslationSet
from dockterm.translations import get_outstanding_translations, main


def _sections(output):
    result = {}
    for block in output.split("\n\n"):
        if not block:
            continue
        lines = block.split("\n")
        result[lines[0].rstrip(":")] = lines[1:]
    return result


def test_every_language_has_a_section_in_order():
    sections = _sections(get_outstanding_translations())
    assert list(sections) == ["pl", "nl", "de", "tr", "en", "fr", "zh", "es", "pt"]


def test_english_is_complete():
    assert _sections(get_outstanding_translations())["en"] == []


def test_missing_entries_are_listed():
    sections = _sections(get_outstanding_translations())
    assert "scroll" in sections["es"]
    assert "attach" in sections["es"]
    assert "donate" not in sections["es"]
    assert "starting_status" in sections["tr"]


def test_listed_names_are_fields():
    names = {f.name for f in fields(TranslationSet)}
    for missing in _sections(get_outstanding_translations()).values():
        assert set(missing) <= names


def test_main_prints_report(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == get_outstanding_translations() + "\n"