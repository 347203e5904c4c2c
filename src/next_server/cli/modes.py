"""Execution of a resolved :class:`InvocationMode`.

Shared by the flag-driven path and the interactive menu.  Dev mode
asks for whatever the operator did not supply on the command line.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from next_server.cli.console import console, escape
from next_server.cli.prompts import QuestionaryPrompter, prompt_port, select_host, suggested_port
from next_server.core.commands import build_command
from next_server.core.models import InvocationMode, ModeKind
from next_server.core.protocols import CommandRunner, Prompter
from next_server.infra.env_port_reader import read_default_port


def complete_dev_mode(
    mode: InvocationMode,
    prompter: Prompter,
    cwd: Path | None = None,
) -> InvocationMode:
    """Fill a missing port (default from ``.env.local``) and host by prompting."""
    port = mode.port
    if port is None:
        port = prompt_port(prompter, suggested_port(read_default_port(cwd)))
    host = mode.host
    if host is None:
        host = select_host(prompter)
    return InvocationMode.dev(port=port, host=host)


def execute_mode(
    mode: InvocationMode,
    runner: CommandRunner,
    *,
    prompter_factory: Callable[[], Prompter] = QuestionaryPrompter,
    cwd: Path | None = None,
) -> None:
    """Run the toolchain command for *mode*.

    *prompter_factory* is only called when dev mode lacks a port or
    host, so fully specified invocations never touch the terminal UI.

    Raises
    ------
    SubcommandFailedError
        When the external command fails.
    """
    if mode.kind is ModeKind.DEV:
        if mode.port is None or mode.host is None:
            mode = complete_dev_mode(mode, prompter_factory(), cwd)
        console.print(
            f"[cyan]Starting Next.js dev server on {escape(mode.host)}:{mode.port}...[/cyan]"
        )
        runner.run(build_command(mode))
    elif mode.kind is ModeKind.BUILD:
        console.print("[cyan]Building Next.js application for production...[/cyan]")
        runner.run(build_command(mode))
        console.print("[green]Build completed successfully.[/green]")
    else:
        console.print("[cyan]Starting production server...[/cyan]")
        runner.run(build_command(mode))
