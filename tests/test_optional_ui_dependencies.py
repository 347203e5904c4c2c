"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands and fully specified flag invocations must keep
working when the UI packages are missing; interactive paths fail
cleanly only when a prompt is actually needed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from next_server.cli import exit_codes
from next_server.cli.app import main
from next_server.cli.prompts import QuestionaryPrompter
from next_server.exceptions import DependencyMissingError, NotAProjectError

from conftest import RecordingRunner


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["--help"]) == exit_codes.SUCCESS
    assert "next-server --build" in capsys.readouterr().out


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["--version"]) == exit_codes.SUCCESS


def test_build_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch,
    next_project: Path,
    runner: RecordingRunner,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["--build"], runner=runner, cwd=next_project) == exit_codes.SUCCESS
    assert runner.commands == [("npm", "run", "build")]
    assert "Build completed successfully." in capsys.readouterr().err


def test_prompter_errors_cleanly_when_questionary_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(DependencyMissingError, match="questionary is not installed"):
        QuestionaryPrompter()


def test_menu_outside_project_reports_project_before_questionary(
    monkeypatch: pytest.MonkeyPatch, plain_project: Path, runner: RecordingRunner,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(NotAProjectError):
        main([], runner=runner, cwd=plain_project)


def test_markup_is_printed_verbatim_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    next_project: Path,
    runner: RecordingRunner,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    main(["--dev", "--port", "4000", "--host", "[/x]"], runner=runner, cwd=next_project)
    assert "[/x]:4000" in capsys.readouterr().err


def test_interactive_dev_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, next_project: Path, runner: RecordingRunner,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(DependencyMissingError):
        main(["--dev", "--port", "3000"], runner=runner, cwd=next_project)
    assert runner.commands == []
