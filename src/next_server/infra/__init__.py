"""Infrastructure layer - filesystem and process integration.

This layer wraps all interaction with ``package.json``, ``.env.local``
and the Node toolchain.  Raw OS and JSON exceptions are either
downgraded to plain results here or re-raised as a
:class:`~next_server.exceptions.NextServerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from next_server.infra.command_runner import SubprocessCommandRunner
from next_server.infra.env_port_reader import read_default_port
from next_server.infra.project_detector import is_valid_project, load_manifest
from next_server.infra.toolchain_detector import ToolStatus, detect_tool, require_tool

__all__: list[str] = [
    "SubprocessCommandRunner",
    "ToolStatus",
    "detect_tool",
    "is_valid_project",
    "load_manifest",
    "read_default_port",
    "require_tool",
]
