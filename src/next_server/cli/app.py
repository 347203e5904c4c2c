"""CLI application entry point and command routing for next-server.

This module is the **sole error boundary** for the entire application.
It catches :class:`~next_server.exceptions.NextServerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Flag validation lives in :mod:`next_server.core.mode_resolver`; this
  module only routes.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from next_server.cli import exit_codes
from next_server.cli.console import console, escape
from next_server.cli.usage import show_help, show_version
from next_server.core.protocols import CommandRunner, Prompter
from next_server.exceptions import NextServerError

_HELP_FLAGS: frozenset[str] = frozenset({"--help", "-h"})
_VERSION_FLAGS: frozenset[str] = frozenset({"--version", "-v"})


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_interactive(
    runner: CommandRunner,
    prompter_factory: Callable[[], Prompter],
    cwd: Path | None,
) -> int:
    """Check the project, clear the screen and hand over to the menu."""
    from next_server.cli.menu import require_project, run_menu

    require_project(cwd)
    console.clear()
    return run_menu(prompter_factory(), runner, cwd)


def _handle_flags(
    argv: Sequence[str],
    runner: CommandRunner,
    prompter_factory: Callable[[], Prompter],
    cwd: Path | None,
) -> int:
    """Validate flags, check the project, then run the selected mode."""
    from next_server.cli.menu import require_project
    from next_server.cli.modes import execute_mode
    from next_server.core.mode_resolver import resolve

    mode = resolve(argv)
    require_project(cwd)
    execute_mode(mode, runner, prompter_factory=prompter_factory, cwd=cwd)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    prompter_factory: Callable[[], Prompter] | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the next-server CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    runner:
        Command runner; defaults to the real subprocess runner.
    prompter_factory:
        Builds the interactive prompter on first use; defaults to
        questionary.
    cwd:
        Project directory; defaults to the current working directory.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    NextServerError
        Any validation or subprocess failure.  :func:`cli` renders it.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if _HELP_FLAGS.intersection(args):
        show_help()
        return exit_codes.SUCCESS
    if _VERSION_FLAGS.intersection(args):
        show_version()
        return exit_codes.SUCCESS

    if runner is None:
        from next_server.infra.command_runner import SubprocessCommandRunner

        runner = SubprocessCommandRunner()
    if prompter_factory is None:
        from next_server.cli.prompts import QuestionaryPrompter

        prompter_factory = QuestionaryPrompter

    if not args:
        return _handle_interactive(runner, prompter_factory, cwd)
    return _handle_flags(args, runner, prompter_factory, cwd)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NextServerError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
