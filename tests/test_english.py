import dataclasses

import pytest

from dockterm.i18n.english import TranslationSet, english_set


def test_every_english_entry_is_filled():
    translations = english_set()
    empty = [
        field.name
        for field in dataclasses.fields(translations)
        if getattr(translations, field.name) == ""
    ]
    assert empty == []


def test_blank_set_has_only_empty_entries():
    blank = TranslationSet()
    values = {getattr(blank, field.name) for field in dataclasses.fields(blank)}
    assert values == {""}


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("pruning_status", "pruning"),
        ("confirm_quit", "Are you sure you want to quit?"),
        ("not_enough_space", "Not enough space to render panels"),
        ("return_", "return"),
        ("docker_compose_config_title", "Compose Config"),
        ("credits_title", "About"),
        ("focus_networks", "focus networks panel"),
        ("lc_next_screen_mode", "next screen mode (normal/half/fullscreen)"),
    ],
)
def test_english_values(name, expected):
    assert getattr(english_set(), name) == expected


def test_socket_error_spans_two_lines():
    lines = english_set().cannot_access_docker_socket_error.split("\n")
    assert len(lines) == 2
    assert lines[0] == "Can't access container engine socket. This could be a permissions issue."


def test_each_call_returns_an_independent_copy():
    first = english_set()
    second = english_set()
    assert first == second
    first.quit = "changed"
    assert second.quit == "quit"
    assert first != second


def test_replace_keeps_other_entries():
    base = english_set()
    updated = dataclasses.replace(base, donate="Spenden")
    assert updated.donate == "Spenden"
    assert updated.confirm == base.confirm
    assert base.donate == "Donate"