"""Infrastructure: best-effort default port from ``.env.local``."""

from __future__ import annotations

import re
from pathlib import Path

from next_server.core.models import ENV_FILENAME, MAX_PORT

_PORT_ASSIGNMENT = re.compile(r"PORT\s*=\s*([0-9]+)")
_MAX_PORT_DIGITS = len(str(MAX_PORT))


def read_default_port(cwd: Path | None = None) -> int | None:
    """Return the first ``PORT=<digits>`` value in ``.env.local``, or ``None``.

    The value is not range-checked; callers decide whether to use it.  A
    value with more digits than any port can have is treated as absent.
    """
    path = (cwd or Path.cwd()) / ENV_FILENAME
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    match = _PORT_ASSIGNMENT.search(content)
    if match is None:
        return None
    digits = match.group(1).lstrip("0")
    if len(digits) > _MAX_PORT_DIGITS:
        return None
    return int(digits or "0")
