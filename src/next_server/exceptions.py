"""Custom exception hierarchy for next-server.

Every user-visible failure inherits from :class:`NextServerError`.  Raw
OS, JSON and subprocess exceptions must never propagate beyond the
infrastructure layer - they are either downgraded to a plain result
(manifest / env-file reads) or re-raised as a typed subclass defined here.

Hierarchy
---------
NextServerError
├── InvalidPortError
├── InvalidHostError
├── ConflictingFlagsError
├── MissingModeError
├── NotAProjectError
├── SubcommandFailedError
└── DependencyMissingError
"""

from __future__ import annotations

from collections.abc import Sequence


class NextServerError(Exception):
    """Base exception for all next-server errors.

    The CLI error boundary renders ``str(exc)`` and the optional
    :attr:`hint`, then exits with :attr:`exit_code`.
    """

    exit_code: int = 1
    """Process exit code used by the CLI boundary."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Flag validation -------------------------------------------------------

class InvalidPortError(NextServerError):
    """Raised when a port value is not an integer in 1..65535."""


class InvalidHostError(NextServerError):
    """Raised when a host value is empty after trimming."""


class ConflictingFlagsError(NextServerError):
    """Raised when flags cannot be combined (two modes, or port/host without --dev)."""


class MissingModeError(NextServerError):
    """Raised when none of --dev, --build or --start was given."""


# --- Project / toolchain ---------------------------------------------------

class NotAProjectError(NextServerError):
    """Raised when the working directory is not a Next.js project."""


class SubcommandFailedError(NextServerError):
    """Raised when the external toolchain command cannot run or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int | None = returncode


# --- Environment -----------------------------------------------------------

class DependencyMissingError(NextServerError):
    """Raised when an optional UI library (rich, questionary) is not installed."""
