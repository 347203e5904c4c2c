"""Interactive menu shown when next-server is run without arguments."""

from __future__ import annotations

from pathlib import Path

from next_server.cli import exit_codes
from next_server.cli.console import console
from next_server.cli.modes import execute_mode
from next_server.cli.usage import show_help
from next_server.core.models import InvocationMode
from next_server.core.protocols import CommandRunner, Prompter
from next_server.exceptions import NotAProjectError
from next_server.infra.project_detector import is_valid_project

_MENU_CHOICES: tuple[tuple[str, str], ...] = (
    ("Start development server", "dev"),
    ("Build for production", "build"),
    ("Start production server", "start"),
    ("Show help", "help"),
    ("Exit", "exit"),
)


def require_project(cwd: Path | None = None) -> None:
    """Raise :class:`NotAProjectError` unless *cwd* is a Next.js project."""
    if not is_valid_project(cwd):
        raise NotAProjectError(
            "This does not appear to be a Next.js project.",
            hint='Make sure "next" is listed in your package.json dependencies.',
        )


def run_menu(
    prompter: Prompter,
    runner: CommandRunner,
    cwd: Path | None = None,
) -> int:
    """Check the project, show the menu, and dispatch the chosen action.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`; failures propagate as exceptions.

    Raises
    ------
    NotAProjectError
        Before any prompt, when *cwd* is not a Next.js project.
    SubcommandFailedError
        When the chosen toolchain command fails.
    """
    require_project(cwd)

    console.print("\n[bold magenta]Next.js Development Helper[/bold magenta]")
    action = prompter.select_one("Select an option:", _MENU_CHOICES)

    if action == "help":
        show_help()
    elif action == "exit":
        console.print("[cyan]Goodbye! Happy coding![/cyan]")
    else:
        mode = {
            "dev": InvocationMode.dev(),
            "build": InvocationMode.build(),
            "start": InvocationMode.start(),
        }[action]
        execute_mode(mode, runner, prompter_factory=lambda: prompter, cwd=cwd)
    return exit_codes.SUCCESS
