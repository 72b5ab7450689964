from dataclasses import fields

from dockterm.i18n.english import english_set
from dockterm.i18n.spanish import spanish_set


def test_pinned_strings():
    ts = spanish_set()
    assert ts.donate == "Donar"
    assert ts.menu_title == "Menú"
    assert ts.yes == "sí"
    assert ts.filter_prompt == "filtrar"


def test_untranslated_entries_are_empty():
    ts = spanish_set()
    assert ts.scroll == ""
    assert ts.attach == ""
    assert ts.cannot_attach_stopped_container_error == ""
    assert ts.no_view_maching_new_line_focused_switch_statement == ""


def test_translated_entries_are_a_subset_of_english_ones():
    ts = spanish_set()
    en = english_set()
    translated = {f.name for f in fields(ts) if getattr(ts, f.name)}
    english = {f.name for f in fields(en) if getattr(en, f.name)}
    assert translated
    assert translated <= english
    assert "scroll" not in translated


def test_socket_error_is_two_lines():
    lines = spanish_set().cannot_access_docker_socket_error.split("\n")
    assert len(lines) == 2
    assert lines[0].endswith("unix:///var/run/docker.sock")


def test_each_call_returns_fresh_set():
    first = spanish_set()
    first.donate = "changed"
    assert spanish_set().donate == "Donar"