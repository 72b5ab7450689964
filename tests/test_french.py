from dockterm.i18n.english import TranslationSet
from dockterm.i18n.french import french_set


def test_returns_translation_set_with_french_titles():
    translations = french_set()
    assert isinstance(translations, TranslationSet)
    assert translations.networks_title == "Réseaux"
    assert translations.credits_title == "À propos"
    assert translations.logs_title == "Journaux"


def test_yes_and_no():
    translations = french_set()
    assert translations.yes == "oui"
    assert translations.no == "non"


def test_status_strings():
    translations = french_set()
    assert translations.pausing_status == "mise en pause"
    assert translations.restarting_status == "redémarrage"


def test_untranslated_entries_are_empty():
    translations = french_set()
    assert translations.quit == ""
    assert translations.lc_filter == ""
    assert translations.filter_list == ""
    assert translations.up_service == ""
    assert translations.down == ""
    assert translations.no_services == ""
    assert translations.filter_prompt == ""
    assert translations.focus_containers == ""


def test_socket_error_mentions_socket_path_and_spans_lines():
    message = french_set().cannot_access_docker_socket_error
    assert "unix:///var/run/docker.sock" in message
    assert message.split("\n")[1].startswith("Lancez lazydocker")


def test_detach_shortcut_mentions_keys():
    message = french_set().detach_from_container_short_cut
    assert "CTRL-P" in message
    assert message.endswith("CTRL-Q")


def test_each_call_returns_independent_set():
    first = french_set()
    first.confirm = "changed"
    assert french_set().confirm == "Confirmer"