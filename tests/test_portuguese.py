from dataclasses import fields

from dockterm.i18n.english import TranslationSet
from dockterm.i18n.portuguese import portuguese_set


def test_pins_source_strings():
    tr = portuguese_set()
    assert tr.yes == "sim"
    assert tr.no == "não"
    assert tr.filter_prompt == "filtro"
    assert tr.top_title == "Topo"


def test_focus_entries_are_untranslated():
    tr = portuguese_set()
    assert tr.focus_projects == ""
    assert tr.focus_networks == ""


def test_nearly_every_field_is_translated():
    tr = portuguese_set()
    missing = {f.name for f in fields(tr) if getattr(tr, f.name) == ""}
    assert missing == {
        "focus_projects",
        "focus_services",
        "focus_containers",
        "focus_images",
        "focus_volumes",
        "focus_networks",
    }


def test_returns_translation_set():
    tr = portuguese_set()
    assert isinstance(tr, TranslationSet)
    assert tr == portuguese_set()


def test_socket_error_spans_two_lines():
    lines = portuguese_set().cannot_access_docker_socket_error.split("\n")
    assert len(lines) == 2
    assert lines[0].endswith("unix:///var/run/docker.sock")