"""Registry module — load and query releases.json."""

from release_registry.registry.loader import empty_index, load_index
from release_registry.registry.query import (
    all_versions,
    feature_list,
    find_version,
    latest_pointer,
    version_names,
)

__all__ = [
    "empty_index",
    "load_index",
    "all_versions",
    "feature_list",
    "find_version",
    "latest_pointer",
    "version_names",
]
