"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exported: :data:`console` (stderr - status and
diagnostics) and :data:`out` (stdout - help and version text).
"""

from __future__ import annotations

import sys
from typing import Any

from next_server.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def escape(text: object) -> str:
    """Escape *text* for interpolation into a markup string.

    Without Rich the proxies print markup verbatim, so *text* is
    returned unchanged.
    """
    try:
        _load_rich_console_class()
    except DependencyMissingError:
        return str(text)
    from rich.markup import escape as rich_escape

    return rich_escape(str(text))


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def _stream(self) -> Any:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except DependencyMissingError:
            print(*objects, file=self._stream())
            return
        rich_console.print(*objects)

    def clear(self) -> None:
        """Clear the terminal; a no-op without Rich or when not a TTY."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except DependencyMissingError:
            return
        if rich_console.is_terminal:
            rich_console.clear()


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
