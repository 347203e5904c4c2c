"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that terminal and subprocess adapters must
satisfy.  Menu and mode-execution code depend ONLY on these protocols,
so tests can inject scripted implementations without a real terminal
or a real Node toolchain.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")

Validator = Callable[[str], "bool | str"]
"""Returns ``True`` for acceptable input, or an error message to show."""


class Prompter(Protocol):
    """Contract for interactive operator input.

    Implementations block until the operator answers and raise
    ``KeyboardInterrupt`` if the operator aborts.
    """

    def select_one(
        self,
        message: str,
        choices: Sequence[tuple[str, T]],
        *,
        default: T | None = None,
    ) -> T:
        """Show *choices* as ``(label, value)`` pairs and return the chosen value."""
        ...  # pragma: no cover

    def read_line(
        self,
        message: str,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str:
        """Read one line of text, re-prompting until *validate* accepts it."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for running an external toolchain command.

    Implementations run *argv* synchronously with the terminal's
    stdin/stdout/stderr and return only when the process has exited.
    """

    def run(self, argv: Sequence[str]) -> None:
        """Run *argv* to completion.

        Raises
        ------
        SubcommandFailedError
            When the command cannot be started or exits non-zero.
        """
        ...  # pragma: no cover
