"""Shared pytest fixtures and configuration for the next-server test suite.

Guidelines
----------
* No real subprocess - the toolchain is faked at the CommandRunner seam.
* No real terminal - prompts are answered by :class:`ScriptedPrompter`.
* Manifest and env files live in ``tmp_path``.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from next_server.exceptions import SubcommandFailedError


class ScriptedPrompter:
    """Prompter that replays canned answers in order.

    ``read_line`` feeds answers through *validate* and keeps consuming
    until one is accepted, like a terminal re-prompt.
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self._answers: list[Any] = list(answers)
        self.calls: list[tuple[str, str]] = []
        self.rejections: list[str] = []
        self.defaults: dict[str, Any] = {}

    def _next(self) -> Any:
        if not self._answers:
            raise AssertionError("ScriptedPrompter ran out of answers")
        return self._answers.pop(0)

    def select_one(self, message: str, choices: Sequence[tuple[str, Any]], *, default: Any = None) -> Any:
        self.calls.append(("select", message))
        self.defaults[message] = default
        answer = self._next()
        assert answer in [value for _label, value in choices]
        return answer

    def read_line(self, message: str, *, default: str = "", validate: Any = None) -> str:
        self.calls.append(("text", message))
        self.defaults[message] = default
        while True:
            answer = self._next()
            if answer is None:
                answer = default
            verdict = validate(answer) if validate is not None else True
            if verdict is True:
                return answer
            self.rejections.append(verdict)

    @property
    def exhausted(self) -> bool:
        return not self._answers


class RecordingRunner:
    """CommandRunner that records argv and simulates an exit code."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.commands: list[tuple[str, ...]] = []

    def run(self, argv: Sequence[str]) -> None:
        self.commands.append(tuple(argv))
        if self.returncode != 0:
            raise SubcommandFailedError(
                f"Command failed: {' '.join(argv)}",
                command=argv,
                returncode=self.returncode,
            )


def write_manifest(directory: Path, data: Any) -> Path:
    path = directory / "package.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def next_project(tmp_path: Path) -> Path:
    """A directory whose package.json declares ``next``."""
    write_manifest(tmp_path, {"name": "site", "dependencies": {"next": "14.2.0", "react": "18.3.1"}})
    return tmp_path


@pytest.fixture
def plain_project(tmp_path: Path) -> Path:
    """A directory with a package.json that does not declare ``next``."""
    write_manifest(tmp_path, {"name": "lib", "dependencies": {"left-pad": "1.3.0"}})
    return tmp_path
