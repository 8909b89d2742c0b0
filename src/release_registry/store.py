"""Read-only access to the release store directory tree."""

import json
from pathlib import Path

CONFIG_FILENAME = "config.json"
RELEASE_FILENAME = "release.md"
REVIEW_FILENAME = "review.md"
FEATURE_TEST_FILENAME = "test.md"

REQUIRED_FILES = (CONFIG_FILENAME, RELEASE_FILENAME, REVIEW_FILENAME)
MARKDOWN_FILES = (RELEASE_FILENAME, REVIEW_FILENAME)


def list_versions(releases_dir: Path | str) -> list[str]:
    """Return the names of all release directories, sorted.

    A missing store yields an empty list.
    """
    root = Path(releases_dir)
    if not root.is_dir():
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir())


def release_dir(releases_dir: Path | str, version: str) -> Path:
    """Return the directory holding one version."""
    return Path(releases_dir) / version


def read_config(directory: Path | str) -> dict:
    """Read and parse a release's config.json.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the JSON is malformed.
        ValueError: If the document is not a JSON object.
    """
    config_path = Path(directory) / CONFIG_FILENAME
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("config.json is not a JSON object")
    return data


def try_read_config(directory: Path | str) -> dict | None:
    """Return the parsed config.json, or None when absent or unparseable."""
    try:
        return read_config(directory)
    except (OSError, ValueError):
        return None


def read_text(path: Path) -> str | None:
    """Return a document's text, or None when the file is absent."""
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")
