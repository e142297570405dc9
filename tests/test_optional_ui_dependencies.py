"""Regression tests for the optional Rich dependency.

The stdin → stdout path must keep working when Rich is missing;
diagnostics then fall back to plain stderr prints.
"""

from __future__ import annotations

import io
import sys

import pytest

from flakers.cli import exit_codes
from flakers.cli.app import main
from flakers.cli.console import escape, get_rich_console
from flakers.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _feed_stdin(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    fake = io.TextIOWrapper(io.BytesIO(text.encode("utf-8")), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", fake)


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_translation_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    sample_message: str,
) -> None:
    _hide_rich(monkeypatch)
    _feed_stdin(monkeypatch, sample_message)

    assert main(["--no-raw"]) == exit_codes.SUCCESS
    assert len(capsys.readouterr().out.splitlines()) == 7


def test_verbose_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _feed_stdin(monkeypatch, "[noise]\n")

    assert main(["--verbose"]) == exit_codes.SUCCESS
    err = capsys.readouterr().err
    assert "Skipped line 1" in err
    assert "[noise]" in err


def test_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape("[bold]") == "[bold]"
