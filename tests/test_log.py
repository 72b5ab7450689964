import json
import logging

import pytest

from dockterm.log import get_log_level, new_logger


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def _close(adapter):
    for handler in adapter.logger.handlers:
        handler.close()


def _read_entries(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_debug_logger_writes_json_with_fields(tmp_path):
    log = new_logger(True, "1.2.3", "abc", "2020-01-01", str(tmp_path))
    log.info("hello")
    _close(log)
    entries = _read_entries(tmp_path / "development.log")
    assert len(entries) == 1
    entry = entries[0]
    assert entry["msg"] == "hello"
    assert entry["level"] == "info"
    assert entry["version"] == "1.2.3"
    assert entry["commit"] == "abc"
    assert entry["buildDate"] == "2020-01-01"
    assert entry["debug"] is True


def test_debug_logger_appends(tmp_path):
    for message in ("one", "two"):
        log = new_logger(True, "v", "c", "d", str(tmp_path))
        log.warning(message)
        _close(log)
    entries = _read_entries(tmp_path / "development.log")
    assert [e["msg"] for e in entries] == ["one", "two"]
    assert all(e["level"] == "warning" for e in entries)


def test_debug_env_enables_file_logging(tmp_path, monkeypatch):
    monkeypatch.setenv("DEBUG", "TRUE")
    log = new_logger(False, "v", "c", "d", str(tmp_path))
    log.error("boom")
    _close(log)
    entries = _read_entries(tmp_path / "development.log")
    assert entries[0]["msg"] == "boom"
    assert entries[0]["debug"] is False


def test_production_logger_keeps_only_errors(tmp_path):
    log = new_logger(False, "v", "c", "d", str(tmp_path))
    assert log.logger.level == logging.ERROR
    assert not log.isEnabledFor(logging.INFO)
    log.error("discarded")
    assert not (tmp_path / "development.log").exists()


def test_log_level_from_environment_applies(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warn")
    log = new_logger(True, "v", "c", "d", str(tmp_path))
    log.info("hidden")
    log.warning("shown")
    _close(log)
    entries = _read_entries(tmp_path / "development.log")
    assert [e["msg"] for e in entries] == ["shown"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("info", logging.INFO),
        ("WARN", logging.WARNING),
        ("error", logging.ERROR),
        ("debug", logging.DEBUG),
        ("", logging.DEBUG),
        ("nonsense", logging.DEBUG),
    ],
)
def test_get_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert get_log_level() == expected


def test_unwritable_log_dir_exits(tmp_path, capsys):
    missing = tmp_path / "missing" / "dir"
    with pytest.raises(SystemExit) as excinfo:
        new_logger(True, "v", "c", "d", str(missing))
    assert excinfo.value.code == 1
    assert "unable to log to file" in capsys.readouterr().out