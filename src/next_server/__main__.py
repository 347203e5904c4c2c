"""Allow ``python -m next_server`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m next_server`` behaves identically to the ``next-server``
console script.
"""

from __future__ import annotations

from next_server.cli.app import cli

if __name__ == "__main__":
    cli()
