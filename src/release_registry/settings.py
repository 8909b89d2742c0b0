"""Load release-registry.yaml check settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

DEFAULT_PLACEHOLDER_MARKERS = ("待填写", "{{ }}")
DEFAULT_CHANGELOG_MARKERS = ("## Changelog", "## 变更记录")
DEFAULT_CHANGELOG_MIN_LENGTH = 50
DEFAULT_LATEST_NAME = "latest"


@dataclass(frozen=True)
class CheckSettings:
    """Tunables consumed by the validation rules."""

    placeholder_markers: tuple[str, ...] = DEFAULT_PLACEHOLDER_MARKERS
    changelog_markers: tuple[str, ...] = DEFAULT_CHANGELOG_MARKERS
    changelog_min_length: int = DEFAULT_CHANGELOG_MIN_LENGTH
    latest_name: str = DEFAULT_LATEST_NAME


def _string_list(key: str, value) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ValueError(f"'{key}' must be a list of non-empty strings")
    return tuple(value)


def settings_from_dict(data: dict) -> CheckSettings:
    """Build CheckSettings from a parsed mapping.

    Raises:
        ValueError: On unknown keys or values of the wrong type.
    """
    known = {f.name for f in fields(CheckSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings key(s): {', '.join(unknown)}")

    kwargs: dict = {}
    for key in ("placeholder_markers", "changelog_markers"):
        if key in data:
            kwargs[key] = _string_list(key, data[key])

    if "changelog_min_length" in data:
        value = data["changelog_min_length"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError("'changelog_min_length' must be a non-negative integer")
        kwargs["changelog_min_length"] = value

    if "latest_name" in data:
        value = data["latest_name"]
        if not isinstance(value, str) or not value:
            raise ValueError("'latest_name' must be a non-empty string")
        kwargs["latest_name"] = value

    return CheckSettings(**kwargs)


def load_settings(path: Path | str | None = None) -> CheckSettings:
    """Load check settings from a YAML file.

    A missing file (or no path at all) yields the defaults.

    Raises:
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping or has bad values.
    """
    if path is None:
        return CheckSettings()
    settings_file = Path(path)
    if not settings_file.is_file():
        return CheckSettings()

    with open(settings_file, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return CheckSettings()
    if not isinstance(data, dict):
        raise ValueError(f"{settings_file} is not a YAML mapping")
    return settings_from_dict(data)
