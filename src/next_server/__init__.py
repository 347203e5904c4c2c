"""next-server - interactive helper for the Next.js dev/build/start workflow.

Wraps ``npx next`` and ``npm`` with a strict layered architecture.
"""

from next_server.version import __version__

__all__: list[str] = ["__version__"]
