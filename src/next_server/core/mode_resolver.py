"""Non-interactive mode resolution - flags to a validated :class:`InvocationMode`.

Every function in this module is pure: tokens in, a mode or a typed
:class:`~next_server.exceptions.NextServerError` out.  All validation
happens here, before anything is launched.

Validation order (enforced by :func:`resolve`):

1. **Port** - digits only, within ``MIN_PORT..MAX_PORT``.
2. **Host** - non-empty after trimming.
3. **Scope** - ``--port`` / ``--host`` require ``--dev``.
4. **Mode** - exactly one of ``--dev``, ``--build``, ``--start``.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

from next_server.core.models import MAX_PORT, MIN_PORT, InvocationMode, ModeKind
from next_server.exceptions import (
    ConflictingFlagsError,
    InvalidHostError,
    InvalidPortError,
    MissingModeError,
)

_PORT_PATTERN = re.compile(r"[0-9]+")
_MAX_PORT_DIGITS = len(str(MAX_PORT))

_MODE_SWITCHES: tuple[str, ...] = ("--dev", "--build", "--start")

# Returned when --port/--host is the last token.
_NO_VALUE = object()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="next-server", add_help=False, allow_abbrev=False)
    for switch in _MODE_SWITCHES:
        parser.add_argument(switch, action="store_true")
    return parser


def _parse_switches(tokens: Sequence[str]) -> argparse.Namespace:
    # Only exact switch tokens reach the parser: "--", "--dev=yes" and the
    # values of --port/--host never end option parsing or raise.
    return _build_parser().parse_args([token for token in tokens if token in _MODE_SWITCHES])


def _flag_value(tokens: Sequence[str], flag: str) -> object:
    """Return the token after the first *flag*, ``None`` if *flag* is absent."""
    try:
        index = tokens.index(flag)
    except ValueError:
        return None
    if index + 1 >= len(tokens):
        return _NO_VALUE
    return tokens[index + 1]


# ---------------------------------------------------------------------------
# Value validators (shared with the interactive prompts)
# ---------------------------------------------------------------------------

def validate_port(raw: object) -> int:
    """Parse *raw* into a port number or raise :class:`InvalidPortError`."""
    if not isinstance(raw, str) or not _PORT_PATTERN.fullmatch(raw):
        raise InvalidPortError("--port must be followed by a valid integer.")
    digits = raw.lstrip("0")
    if len(digits) > _MAX_PORT_DIGITS:
        raise InvalidPortError(f"Port must be between {MIN_PORT} and {MAX_PORT}.")
    port = int(digits or "0")
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortError(f"Port must be between {MIN_PORT} and {MAX_PORT}.")
    return port


def validate_host(raw: object) -> str:
    """Return *raw* trimmed, or raise :class:`InvalidHostError` if that is empty."""
    trimmed = raw.strip() if isinstance(raw, str) else ""
    if not trimmed:
        raise InvalidHostError("--host must be followed by a valid host address.")
    return trimmed


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve(tokens: Sequence[str]) -> InvocationMode:
    """Resolve command-line *tokens* into exactly one :class:`InvocationMode`.

    The value of ``--port`` or ``--host`` is the token right after the
    first occurrence of the flag, whatever it looks like.  A flag with no
    following token counts as present, so it fails its own validation
    instead of falling back to a default.  Unknown tokens are ignored.

    Raises
    ------
    InvalidPortError
        Port value missing, non-numeric, or out of range.
    InvalidHostError
        Host value missing or blank.
    ConflictingFlagsError
        ``--port``/``--host`` without ``--dev``, or more than one mode.
    MissingModeError
        None of ``--dev``, ``--build``, ``--start``.
    """
    tokens = list(tokens)
    args = _parse_switches(tokens)

    raw_port = _flag_value(tokens, "--port")
    raw_host = _flag_value(tokens, "--host")
    port = validate_port(raw_port) if raw_port is not None else None
    host = validate_host(raw_host) if raw_host is not None else None

    if (port is not None or host is not None) and not args.dev:
        raise ConflictingFlagsError("--port and --host can only be used with --dev.")

    selected = [
        kind
        for kind, flag in (
            (ModeKind.DEV, args.dev),
            (ModeKind.BUILD, args.build),
            (ModeKind.START, args.start),
        )
        if flag
    ]
    if not selected:
        raise MissingModeError(
            "Please specify one of: --dev, --build, or --start.",
            hint="Run next-server without arguments for the interactive menu.",
        )
    if len(selected) > 1:
        raise ConflictingFlagsError("Only one mode can be specified at a time.")

    kind = selected[0]
    if kind is ModeKind.DEV:
        return InvocationMode.dev(port=port, host=host)
    return InvocationMode(kind)
