"""Release registry path resolution.

Resolves canonical paths to the release store, the index and the report.
Uses environment variables when available, falls back to conventional
defaults relative to the repository root.

Environment variables:
    RELEASE_REGISTRY_ROOT — repository root (default: current directory)
    RELEASE_REGISTRY_RELEASES_DIR — release store (default: <root>/releases)
    RELEASE_REGISTRY_INDEX — index document (default: <root>/releases.json)
    RELEASE_REGISTRY_REPORT — validation report (default: <root>/validation-report.md)
    RELEASE_REGISTRY_SETTINGS — check settings (default: <root>/release-registry.yaml)

An explicit root argument takes precedence over the per-path variables.
"""

from __future__ import annotations

import os
from pathlib import Path

RELEASES_DIRNAME = "releases"
INDEX_FILENAME = "releases.json"
REPORT_FILENAME = "validation-report.md"
SETTINGS_FILENAME = "release-registry.yaml"


def repo_root() -> Path:
    """Return the repository root directory."""
    return Path(os.environ.get("RELEASE_REGISTRY_ROOT", "."))


def _resolve(root: Path | str | None, var: str, name: str) -> Path:
    if root:
        return Path(root) / name
    env = os.environ.get(var)
    if env:
        return Path(env)
    return repo_root() / name


def releases_dir(root: Path | str | None = None) -> Path:
    """Return the path to the release store."""
    return _resolve(root, "RELEASE_REGISTRY_RELEASES_DIR", RELEASES_DIRNAME)


def index_path(root: Path | str | None = None) -> Path:
    """Return the path to releases.json."""
    return _resolve(root, "RELEASE_REGISTRY_INDEX", INDEX_FILENAME)


def report_path(root: Path | str | None = None) -> Path:
    """Return the path the validation report is written to."""
    return _resolve(root, "RELEASE_REGISTRY_REPORT", REPORT_FILENAME)


def settings_path(root: Path | str | None = None) -> Path:
    """Return the path to the optional check settings file."""
    return _resolve(root, "RELEASE_REGISTRY_SETTINGS", SETTINGS_FILENAME)
