"""Tests for the interactive Session.

Consoles write to StringIO buffers; run() is driven by patching the builtin
input() that rich's Console.input() reads from.
"""

import io

import pytest
from rich.console import Console

from hexcalc.environment import ShellSettings
from hexcalc.shell import Session


@pytest.fixture
def session():
    """A session with captured output and no history file."""
    out = Console(file=io.StringIO(), width=120)
    err = Console(file=io.StringIO(), width=120)
    return Session(ShellSettings(prompt="> ", history_file=None), out, err)


def _out(session: Session) -> str:
    return session.console.file.getvalue()


def _err(session: Session) -> str:
    return session.err_console.file.getvalue()


def _feed(monkeypatch, lines):
    """Make input() return each line in turn, then raise EOFError."""
    it = iter(lines)

    def fake_input(*args):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


# --- handle() (6 tests) ---

def test_prints_result(session):
    assert session.handle("d2+d3*d4d") is True
    assert _out(session).strip() == "d14"
    assert _err(session) == ""


def test_prints_error_and_continues(session):
    assert session.handle("d1+d") is True
    assert _err(session).strip() == "Error: Invalid expression"
    assert _out(session) == ""


def test_error_text_with_markup_characters_is_literal(session):
    session.handle("d1[d2d")
    assert "Error: Invalid character: [" in _err(session)


def test_quit_command(session):
    assert session.handle("q") is False
    assert session.handle("  q  ") is False
    assert session.history == []


def test_clear_and_empty_lines_are_not_recorded(session):
    assert session.handle("") is True
    assert session.handle("c") is True
    assert session.history == []
    assert _out(session) == ""


def test_expressions_are_recorded(session):
    session.handle("d1+d1d")
    session.handle("bad")
    assert session.history == ["d1+d1d", "bad"]


# --- verbose (1 test) ---

def test_verbose_prints_trace(session):
    session.settings.verbose = True
    session.handle("d2+d3*d4h")
    err = _err(session)
    assert "tokens:  d2 + d3 * d4" in err
    assert "postfix: d2 d3 d4 * +" in err
    assert "value:   14" in err
    assert _out(session).strip() == "hE"


# --- run() (5 tests) ---

def test_run_until_quit(session, monkeypatch):
    _feed(monkeypatch, ["d1+d2d", "hAd", "q", "d9d"])
    session.run()
    out = _out(session)
    assert "d3" in out
    assert "d10" in out
    assert "d9" not in out
    assert session.history == ["d1+d2d", "hAd"]


def test_run_stops_on_eof(session, monkeypatch):
    _feed(monkeypatch, ["d10h"])
    session.run()
    assert "hA" in _out(session)


def test_run_stops_on_interrupt(session, monkeypatch):
    def interrupted(*args):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    session.run()
    assert session.history == []


def test_run_saves_history_file(tmp_path, monkeypatch):
    pytest.importorskip("readline")
    history = tmp_path / "nested" / "history"
    out = Console(file=io.StringIO())
    session = Session(ShellSettings(history_file=history), out, Console(file=io.StringIO()))
    _feed(monkeypatch, ["d1+d1d", "q"])
    session.run()
    assert history.exists()


def test_run_truncates_history_file_to_limit(tmp_path, monkeypatch):
    pytest.importorskip("readline")
    history = tmp_path / "history"
    settings = ShellSettings(history_file=history, history_length=2)
    session = Session(settings, Console(file=io.StringIO()), Console(file=io.StringIO()))
    _feed(monkeypatch, ["d1d", "d2d", "d3d", "d4d", "q"])
    session.run()
    # libedit writes a header line first
    saved = [line for line in history.read_text().splitlines() if not line.startswith("_HiStOrY_")]
    assert saved == ["d3d", "d4d"]


# --- long output (2 tests) ---

def test_long_error_stays_on_one_line(session):
    digits = "F" * 130
    session.handle(f"h{digits}d")
    assert _err(session) == f"Error: Invalid hexadecimal number: {digits}\n"


def test_long_result_stays_on_one_line(session):
    expr = "+".join(["d1"] * 80) + "d"
    session.settings.verbose = True
    session.handle(expr)
    assert len(_err(session).splitlines()) == 3
    assert _out(session) == "d80\n"
