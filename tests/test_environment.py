"""Tests for load_settings() and HEXCALC_* overrides."""

from pathlib import Path

from hexcalc.environment import (
    DEFAULT_HISTORY_LENGTH,
    DEFAULT_PROMPT,
    load_settings,
)


def test_defaults():
    settings = load_settings({})
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.history_file == Path("~/.hexcalc_history").expanduser()
    assert settings.history_length == DEFAULT_HISTORY_LENGTH
    assert settings.verbose is False


def test_overrides(tmp_path):
    settings = load_settings({
        "HEXCALC_PROMPT": "> ",
        "HEXCALC_HISTORY_FILE": str(tmp_path / "hist"),
        "HEXCALC_HISTORY_LENGTH": "50",
    }, verbose=True)
    assert settings.prompt == "> "
    assert settings.history_file == tmp_path / "hist"
    assert settings.history_length == 50
    assert settings.verbose is True


def test_empty_history_file_disables_persistence():
    assert load_settings({"HEXCALC_HISTORY_FILE": ""}).history_file is None


def test_bad_history_length_falls_back():
    assert load_settings({"HEXCALC_HISTORY_LENGTH": "lots"}).history_length == DEFAULT_HISTORY_LENGTH


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("HEXCALC_PROMPT", "calc> ")
    assert load_settings().prompt == "calc> "
