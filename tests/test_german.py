from dataclasses import fields

from dockterm.i18n.english import english_set
from dockterm.i18n.german import german_set


def test_pins_source_strings():
    tr = german_set()
    assert tr.pruning_status == "zerstören"
    assert tr.menu_title == "Menü"
    assert tr.credits_title == "Über Uns"
    assert tr.networks_title == "Netzwerk"


def test_untranslated_entries_are_empty():
    tr = german_set()
    assert tr.starting_status == ""
    assert tr.hide_stopped == ""
    assert tr.quit == ""
    assert tr.yes == ""


def test_translated_entries_are_a_subset_of_english_ones():
    tr = german_set()
    en = english_set()
    translated = {f.name for f in fields(tr) if getattr(tr, f.name)}
    english = {f.name for f in fields(en) if getattr(en, f.name)}
    assert translated
    assert translated <= english
    assert tr.confirm != en.confirm


def test_socket_error_spans_two_lines():
    lines = german_set().cannot_access_docker_socket_error.split("\n")
    assert len(lines) == 2
    assert lines[0].endswith("unix:///var/run/docker.sock")


def test_calls_return_equal_independent_sets():
    first = german_set()
    second = german_set()
    assert first == second
    first.stop = "changed"
    assert second.stop == "anhalten"