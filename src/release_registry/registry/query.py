"""Query operations on the release index."""

from typing import Iterator


def all_versions(index: dict) -> Iterator[dict]:
    """Yield every version record in index order."""
    for entry in index.get("versions", []) or []:
        if isinstance(entry, dict):
            yield entry


def version_names(index: dict) -> list[str]:
    """Return the version identifiers listed in the index, in index order."""
    return [str(entry.get("version")) for entry in all_versions(index) if entry.get("version")]


def find_version(index: dict, version: str) -> dict | None:
    """Find a version record by identifier.

    Args:
        index: Loaded index dict.
        version: Version identifier (e.g., "20240101").

    Returns:
        The first matching record, or None if not registered.
    """
    for entry in all_versions(index):
        if entry.get("version") == version:
            return entry
    return None


def latest_pointer(index: dict) -> dict | None:
    """Return the index's latest pointer, or None when unset."""
    latest = index.get("latest")
    if isinstance(latest, dict) and latest.get("version"):
        return latest
    return None


def feature_list(record: dict) -> list[str]:
    """Return a record's declared features as a list of names.

    Anything other than a JSON list counts as no features.
    """
    features = record.get("features")
    if not isinstance(features, list):
        return []
    return [str(f) for f in features]
