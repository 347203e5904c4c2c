"""Tests for the interactive prompts (cli/prompts.py).

``questionary`` is mocked for :class:`QuestionaryPrompter`; the prompt
functions are driven by :class:`ScriptedPrompter`.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from next_server.cli.prompts import (
    QuestionaryPrompter,
    prompt_port,
    select_host,
    suggested_port,
)
from next_server.core.models import HostChoice

from conftest import ScriptedPrompter


# ---------------------------------------------------------------------------
# select_host
# ---------------------------------------------------------------------------

class TestSelectHost:
    def test_localhost(self) -> None:
        prompter = ScriptedPrompter([HostChoice.LOCALHOST])
        assert select_host(prompter) == "127.0.0.1"

    def test_all_interfaces(self) -> None:
        prompter = ScriptedPrompter([HostChoice.ALL_INTERFACES])
        assert select_host(prompter) == "0.0.0.0"

    def test_localhost_is_the_default(self) -> None:
        prompter = ScriptedPrompter([HostChoice.LOCALHOST])
        select_host(prompter)
        assert prompter.defaults["Select host binding:"] is HostChoice.LOCALHOST

    def test_custom_is_trimmed(self) -> None:
        prompter = ScriptedPrompter([HostChoice.CUSTOM, "  192.168.0.12  "])
        assert select_host(prompter) == "192.168.0.12"
        assert prompter.calls[-1] == ("text", "Enter custom host address:")

    def test_custom_reprompts_until_non_blank(self) -> None:
        prompter = ScriptedPrompter([HostChoice.CUSTOM, "", "   ", "devbox"])
        assert select_host(prompter) == "devbox"
        assert prompter.rejections == ["Host address cannot be empty."] * 2
        assert prompter.exhausted


# ---------------------------------------------------------------------------
# prompt_port / suggested_port
# ---------------------------------------------------------------------------

class TestSuggestedPort:
    def test_uses_env_port(self) -> None:
        assert suggested_port(4321) == 4321

    @pytest.mark.parametrize("env_port", [None, 0, 70000])
    def test_falls_back_to_default(self, env_port: int | None) -> None:
        assert suggested_port(env_port) == 3000


class TestPromptPort:
    def test_default_is_prefilled(self) -> None:
        prompter = ScriptedPrompter([None])
        assert prompt_port(prompter, 4321) == 4321
        assert prompter.defaults["Enter port for the development server:"] == "4321"

    def test_accepts_typed_value(self) -> None:
        assert prompt_port(ScriptedPrompter(["8080"])) == 8080

    def test_reprompts_on_invalid_values(self) -> None:
        prompter = ScriptedPrompter(["abc", "0", "65536", "5000"])
        assert prompt_port(prompter) == 5000
        assert len(prompter.rejections) == 3
        assert "between 1 and 65535" in prompter.rejections[0]

    def test_reprompts_on_huge_digit_string(self) -> None:
        prompter = ScriptedPrompter(["9" * 5000, "4000"])
        assert prompt_port(prompter) == 4000
        assert prompter.rejections == ["Please enter a valid port number between 1 and 65535."]


# ---------------------------------------------------------------------------
# QuestionaryPrompter
# ---------------------------------------------------------------------------

class FakeChoice:
    def __init__(self, title: str, value: object) -> None:
        self.title = title
        self.value = value


@patch("next_server.cli.prompts._import_questionary")
class TestQuestionaryPrompter:
    def _questionary(self, mock_import: MagicMock) -> MagicMock:
        questionary_mod = MagicMock()
        questionary_mod.Choice = FakeChoice
        mock_import.return_value = questionary_mod
        return questionary_mod

    def test_select_one_returns_value(self, mock_import: MagicMock) -> None:
        questionary_mod = self._questionary(mock_import)
        questionary_mod.select.return_value.unsafe_ask.return_value = "build"

        result = QuestionaryPrompter().select_one(
            "Select an option:", [("Dev", "dev"), ("Build", "build")], default="dev",
        )

        assert result == "build"
        kwargs = questionary_mod.select.call_args.kwargs
        assert [c.value for c in kwargs["choices"]] == ["dev", "build"]
        assert kwargs["default"] == "dev"

    def test_read_line_passes_default_and_validator(self, mock_import: MagicMock) -> None:
        questionary_mod = self._questionary(mock_import)
        questionary_mod.text.return_value.unsafe_ask.return_value = "3000"

        def validator(value: str) -> bool | str:
            return True

        result = QuestionaryPrompter().read_line("Port?", default="3000", validate=validator)

        assert result == "3000"
        questionary_mod.text.assert_called_once_with("Port?", default="3000", validate=validator)

    def test_ctrl_c_propagates(self, mock_import: MagicMock) -> None:
        questionary_mod = self._questionary(mock_import)
        questionary_mod.select.return_value.unsafe_ask.side_effect = KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            QuestionaryPrompter().select_one("Pick", [("A", "a")])
