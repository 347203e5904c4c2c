"""Core / service layer - pure flag validation and command construction.

Rules
-----
* No ``print()`` calls.
* No filesystem, terminal or subprocess I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from next_server.core.commands import build_command, format_command
from next_server.core.mode_resolver import resolve, validate_host, validate_port
from next_server.core.models import HostChoice, InvocationMode, ModeKind, ProjectManifest
from next_server.core.protocols import CommandRunner, Prompter

__all__: list[str] = [
    "CommandRunner",
    "HostChoice",
    "InvocationMode",
    "ModeKind",
    "ProjectManifest",
    "Prompter",
    "build_command",
    "format_command",
    "resolve",
    "validate_host",
    "validate_port",
]
