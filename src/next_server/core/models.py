"""Domain models and constants for next-server.

All models are **frozen** dataclasses or enums - immutable values built
fresh per invocation.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_PORT: int = 3000
MIN_PORT: int = 1
MAX_PORT: int = 65535

FRAMEWORK_PACKAGE: str = "next"
MANIFEST_FILENAME: str = "package.json"
ENV_FILENAME: str = ".env.local"


# ---------------------------------------------------------------------------
# Invocation mode
# ---------------------------------------------------------------------------

class ModeKind(enum.Enum):
    """The three workflows next-server can launch."""

    DEV = "dev"
    BUILD = "build"
    START = "start"


@dataclass(frozen=True, slots=True)
class InvocationMode:
    """The single mode selected for this invocation.

    ``port`` and ``host`` are only meaningful for :attr:`ModeKind.DEV`;
    ``None`` means "ask the operator".
    """

    kind: ModeKind

    port: int | None = None
    """Dev-server port in ``MIN_PORT..MAX_PORT``, or ``None``."""

    host: str | None = None
    """Trimmed, non-empty bind address, or ``None``."""

    def __post_init__(self) -> None:
        if self.kind is not ModeKind.DEV and (self.port is not None or self.host is not None):
            raise ValueError(f"{self.kind.value} mode does not take a port or host")
        if self.port is not None and not MIN_PORT <= self.port <= MAX_PORT:
            raise ValueError(f"port out of range: {self.port}")
        if self.host is not None and (not self.host or self.host != self.host.strip()):
            raise ValueError(f"host must be trimmed and non-empty: {self.host!r}")

    @classmethod
    def dev(cls, port: int | None = None, host: str | None = None) -> InvocationMode:
        return cls(ModeKind.DEV, port=port, host=host)

    @classmethod
    def build(cls) -> InvocationMode:
        return cls(ModeKind.BUILD)

    @classmethod
    def start(cls) -> InvocationMode:
        return cls(ModeKind.START)


# ---------------------------------------------------------------------------
# Host binding
# ---------------------------------------------------------------------------

class HostChoice(enum.Enum):
    """Bind-address presets offered by the host selector."""

    LOCALHOST = "127.0.0.1"
    ALL_INTERFACES = "0.0.0.0"
    CUSTOM = "custom"

    def resolve(self, custom: str | None = None) -> str:
        """Return the plain address string for this choice.

        *custom* is required (and trimmed) for :attr:`CUSTOM`.
        """
        if self is HostChoice.CUSTOM:
            address = (custom or "").strip()
            if not address:
                raise ValueError("custom host address must not be empty")
            return address
        return self.value


# ---------------------------------------------------------------------------
# Project manifest
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectManifest:
    """Read model of the dependency sections of ``package.json``.

    Missing or malformed sections are represented as empty mappings.
    """

    dependencies: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    dev_dependencies: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def declares(self, package: str) -> bool:
        """Return ``True`` if *package* is a runtime or development dependency."""
        return package in self.dependencies or package in self.dev_dependencies
