"""Interactive prompts for the CLI layer.

This module is responsible for:

* The questionary-backed :class:`QuestionaryPrompter`.
* Selecting a bind address (:func:`select_host`).
* Asking for a dev-server port (:func:`prompt_port`).

Prompt functions take any :class:`~next_server.core.protocols.Prompter`
so they can be driven by scripted answers in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from next_server.core.mode_resolver import validate_port
from next_server.core.models import DEFAULT_PORT, MAX_PORT, MIN_PORT, HostChoice
from next_server.core.protocols import Prompter, Validator
from next_server.exceptions import DependencyMissingError, InvalidPortError

T = TypeVar("T")


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Terminal-backed prompter
# ---------------------------------------------------------------------------

class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by questionary.

    ``unsafe_ask`` is used so Ctrl+C surfaces as ``KeyboardInterrupt``
    and reaches the CLI error boundary.
    """

    def __init__(self) -> None:
        self._questionary: Any = _import_questionary()

    def select_one(
        self,
        message: str,
        choices: Sequence[tuple[str, T]],
        *,
        default: T | None = None,
    ) -> T:
        q_choices = [self._questionary.Choice(title=label, value=value) for label, value in choices]
        return self._questionary.select(
            message,
            choices=q_choices,
            default=default,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).unsafe_ask()

    def read_line(
        self,
        message: str,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str:
        return self._questionary.text(
            message,
            default=default,
            validate=validate,
        ).unsafe_ask()


# ---------------------------------------------------------------------------
# Host selection
# ---------------------------------------------------------------------------

_HOST_CHOICES: tuple[tuple[str, HostChoice], ...] = (
    ("Secure (localhost only) - 127.0.0.1", HostChoice.LOCALHOST),
    ("Open (network accessible) - 0.0.0.0", HostChoice.ALL_INTERFACES),
    ("Custom host (e.g., 192.168.x.x)", HostChoice.CUSTOM),
)


def _validate_custom_host(value: str) -> bool | str:
    return True if value.strip() else "Host address cannot be empty."


def select_host(prompter: Prompter) -> str:
    """Ask for a bind address and return it trimmed and non-empty.

    Localhost is pre-selected; listening on all interfaces has to be
    picked explicitly.
    """
    choice = prompter.select_one(
        "Select host binding:",
        _HOST_CHOICES,
        default=HostChoice.LOCALHOST,
    )
    if choice is HostChoice.CUSTOM:
        custom = prompter.read_line(
            "Enter custom host address:",
            validate=_validate_custom_host,
        )
        return choice.resolve(custom)
    return choice.resolve()


# ---------------------------------------------------------------------------
# Port selection
# ---------------------------------------------------------------------------

def _validate_port_input(value: str) -> bool | str:
    try:
        validate_port(value.strip())
    except InvalidPortError:
        return f"Please enter a valid port number between {MIN_PORT} and {MAX_PORT}."
    return True


def suggested_port(env_port: int | None) -> int:
    """Return *env_port* when it is a usable port, else :data:`DEFAULT_PORT`."""
    if env_port is not None and MIN_PORT <= env_port <= MAX_PORT:
        return env_port
    return DEFAULT_PORT


def prompt_port(prompter: Prompter, default: int = DEFAULT_PORT) -> int:
    """Ask for the dev-server port, pre-filled with *default*."""
    answer = prompter.read_line(
        "Enter port for the development server:",
        default=str(default),
        validate=_validate_port_input,
    )
    return validate_port(answer.strip())
