from dockterm.i18n.chinese import chinese_set
from dockterm.i18n.english import TranslationSet, english_set


def test_returns_translation_set_with_chinese_titles():
    translations = chinese_set()
    assert isinstance(translations, TranslationSet)
    assert translations.containers_title == "容器"
    assert translations.images_title == "镜像"
    assert translations.filter_prompt == "筛选"


def test_status_strings():
    translations = chinese_set()
    assert translations.pruning_status == "修剪中"
    assert translations.removing_status == "移除中"
    assert translations.running_bulk_command_status == "正在运行批量命令"


def test_return_field_is_translated():
    assert chinese_set().return_ == "返回"


def test_untranslated_entries_are_empty():
    translations = chinese_set()
    assert translations.attach == ""
    assert translations.detach_from_container_short_cut == ""
    assert translations.focus_projects == ""
    assert translations.focus_networks == ""


def test_socket_error_mentions_socket_path_and_spans_lines():
    message = chinese_set().cannot_access_docker_socket_error
    assert "unix:///var/run/docker.sock" in message
    assert message.count("\n") == 1


def test_differs_from_english():
    assert chinese_set().confirm != english_set().confirm
    assert chinese_set().confirm == "确认"


def test_each_call_returns_independent_set():
    first = chinese_set()
    first.quit = "changed"
    assert chinese_set().quit == "退出"