"""Infrastructure: Node toolchain detection and platform guidance.

Locates ``npx`` / ``npm`` on the system PATH and provides
platform-specific installation guidance when they are missing.

Rules
-----
* Detection via :func:`shutil.which` only - no subprocess.
* No automatic installation.
* No ``print()`` - callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass

from next_server.exceptions import SubcommandFailedError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of probing PATH for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up (e.g. ``"npx"``).
    path : str | None
        Full path as returned by :func:`shutil.which`, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Node.js on the current
        platform.  Empty when the tool is present.
    """

    name: str
    path: str | None
    install_commands: tuple[str, ...]

    @property
    def found(self) -> bool:
        return self.path is not None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Look up *name* on PATH; never raises."""
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(name=name, path=result, install_commands=())
    return ToolStatus(name=name, path=None, install_commands=_platform_install_commands())


def require_tool(name: str) -> str:
    """Locate *name* or raise :class:`SubcommandFailedError` with install guidance."""
    status = detect_tool(name)
    if status.path is None:
        hint_lines = ["Install Node.js (which provides npm and npx) using one of:"]
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise SubcommandFailedError(
            f"{name} is not installed or not on PATH.",
            command=(name,),
            hint="\n".join(hint_lines),
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return Node.js install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install OpenJS.NodeJS.LTS",
            "choco install nodejs-lts",
        )
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Please install Node.js from https://nodejs.org/",)
