"""Load releases.json."""

import json
from pathlib import Path

from release_registry.paths import index_path as _default_index_path

DEFAULT_INDEX_PATH = _default_index_path()


def empty_index() -> dict:
    """Return the fallback index used when releases.json is unusable."""
    return {"versions": []}


def load_index(path: Path | str | None = None) -> dict:
    """Load releases.json from disk.

    Args:
        path: Path to the index file. Defaults to the repository location.

    Returns:
        Parsed index dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the JSON is malformed.
        ValueError: If the document is not a JSON object or its
            versions field is not a list.
    """
    index_file = Path(path) if path else DEFAULT_INDEX_PATH
    with open(index_file, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{index_file} is not a JSON object")
    if not isinstance(data.get("versions", []), list):
        raise ValueError("versions is not a list")
    return data
