"""Command templates for the external Node toolchain.

``npx`` is used for the dev server so the project's local ``next``
binary is picked up rather than a global one.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from next_server.core.models import InvocationMode, ModeKind

BUILD_COMMAND: tuple[str, ...] = ("npm", "run", "build")
START_COMMAND: tuple[str, ...] = ("npm", "start")


def dev_command(port: int, host: str) -> tuple[str, ...]:
    """Return the dev-server command bound to *host*:*port*."""
    return ("npx", "next", "dev", "--port", str(port), "--hostname", host)


def build_command(mode: InvocationMode) -> tuple[str, ...]:
    """Return the argv for *mode*.

    Dev mode must already have both port and host filled in.
    """
    if mode.kind is ModeKind.DEV:
        if mode.port is None or mode.host is None:
            raise ValueError("dev mode needs a port and host before it can run")
        return dev_command(mode.port, mode.host)
    if mode.kind is ModeKind.BUILD:
        return BUILD_COMMAND
    return START_COMMAND


def format_command(argv: Sequence[str]) -> str:
    """Render *argv* as a shell-quoted command line for display."""
    return shlex.join(argv)
