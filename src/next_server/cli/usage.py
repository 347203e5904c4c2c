"""Usage text shown by ``--help`` and the "Show help" menu entry."""

from __future__ import annotations

from next_server.cli.console import out
from next_server.version import __version__

USAGE: str = """\
next-server - CLI tool to manage Next.js development and production workflows.

Interactive mode (default):
  next-server                -> Display interactive menu

Non-interactive mode:
  next-server --dev [--host <addr>] [--port <num>]
  next-server --build
  next-server --start

Host options:
  --host 127.0.0.1    -> Local only (secure, default in interactive mode)
  --host 0.0.0.0      -> Accessible on local network (use cautiously)

Examples:
  next-server --dev --host 127.0.0.1 --port 4000
  next-server --dev --host 0.0.0.0 --port 3001

Other:
  next-server --help    -> Show this help
  next-server --version -> Show version

Note: Uses "npx next" to ensure the local Next.js CLI is used.
"""


def show_help() -> None:
    out.print(USAGE)


def show_version() -> None:
    out.print(__version__)
