"""Subprocess-backed implementation of :class:`~next_server.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns a
process.  Every failure is re-raised as
:class:`~next_server.exceptions.SubcommandFailedError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from next_server.core.commands import format_command
from next_server.exceptions import SubcommandFailedError
from next_server.infra.toolchain_detector import require_tool


class SubprocessCommandRunner:
    """Concrete :class:`CommandRunner` using :func:`subprocess.run`.

    The child inherits this process's stdin, stdout and stderr, so the
    operator sees live output and can interact with it.  The call
    blocks until the child exits; there is no retry.
    """

    def run(self, argv: Sequence[str]) -> None:
        """Run *argv* to completion.

        Raises
        ------
        SubcommandFailedError
            When the executable is missing, cannot be started, or exits
            with a non-zero status.
        """
        if not argv:
            raise ValueError("argv must not be empty")

        display = format_command(argv)
        # Resolve through PATH so Windows picks up npx.cmd / npm.cmd.
        executable = require_tool(argv[0])

        try:
            completed = subprocess.run([executable, *argv[1:]], check=False)
        except OSError as exc:
            raise SubcommandFailedError(
                f"Command failed: {display}",
                command=argv,
                hint=str(exc),
            ) from exc

        if completed.returncode != 0:
            raise SubcommandFailedError(
                f"Command failed: {display}",
                command=argv,
                returncode=completed.returncode,
            )
