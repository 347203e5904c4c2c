"""Infrastructure: Next.js project detection from ``package.json``.

Rules
-----
* Read-only access to the manifest.
* :func:`is_valid_project` never raises - a missing or broken manifest
  simply means "not a project".
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from next_server.core.models import FRAMEWORK_PACKAGE, MANIFEST_FILENAME, ProjectManifest


def _dependency_section(raw: Any) -> Mapping[str, str]:
    """Keep only ``name -> version`` string pairs from a manifest section."""
    if not isinstance(raw, dict):
        return MappingProxyType({})
    return MappingProxyType(
        {str(name): str(version) for name, version in raw.items()}
    )


def load_manifest(cwd: Path | None = None) -> ProjectManifest:
    """Parse ``package.json`` in *cwd* (default: current directory).

    Raises
    ------
    OSError
        If the file cannot be read.
    ValueError
        If the file is not valid JSON or not a JSON object.
    """
    path = (cwd or Path.cwd()) / MANIFEST_FILENAME
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return ProjectManifest(
        dependencies=_dependency_section(data.get("dependencies")),
        dev_dependencies=_dependency_section(data.get("devDependencies")),
    )


def is_valid_project(cwd: Path | None = None) -> bool:
    """Return ``True`` iff *cwd* holds a manifest declaring ``next``."""
    try:
        manifest = load_manifest(cwd)
    except (OSError, ValueError, RecursionError):
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors;
        # deeply nested JSON exhausts the parser with RecursionError.
        return False
    return manifest.declares(FRAMEWORK_PACKAGE)
