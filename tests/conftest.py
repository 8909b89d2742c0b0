"""Shared test fixtures for release-registry."""

import json
from pathlib import Path

import pytest

from release_registry.registry.loader import load_index

FIXTURES = Path(__file__).parent / "fixtures"

CHANGELOG = "## Changelog\n- Added the fct feature with full regression coverage and notes.\n"


def make_release(
    releases: Path,
    version: str,
    features=("fct",),
    config: dict | str | None = None,
    release_md: str | None = None,
    review_md: str | None = "# Review {version}\n",
    with_tests: bool = True,
) -> Path:
    """Write a release directory. None for a document means omit it."""
    directory = releases / version
    directory.mkdir(parents=True)

    if config is None:
        config = {
            "version": version,
            "createdAt": "2024-01-01T00:00:00Z",
            "features": list(features),
        }
    if isinstance(config, dict):
        (directory / "config.json").write_text(json.dumps(config))
    elif config != "":
        (directory / "config.json").write_text(config)

    if release_md is None:
        release_md = f"# Release {version}\n\n{CHANGELOG}"
    if release_md != "":
        (directory / "release.md").write_text(release_md.replace("{version}", version))
    if review_md is not None:
        (directory / "review.md").write_text(review_md.replace("{version}", version))

    for feature in features:
        (directory / feature).mkdir()
        if with_tests:
            (directory / feature / "test.md").write_text(f"# Test {feature}\n")
    return directory


def write_index(path: Path, versions: dict, latest: str | None = None) -> Path:
    """Write releases.json from {version: [features]}."""
    index = {
        "versions": [
            {"version": v, "createdAt": "2024-01-01T00:00:00Z", "features": list(f)}
            for v, f in versions.items()
        ]
    }
    if latest:
        index["latest"] = {
            "version": latest,
            "syncedAt": "2024-01-02T00:00:00Z",
            "features": list(versions.get(latest, [])),
        }
    path.write_text(json.dumps(index))
    return path


@pytest.fixture
def index():
    return load_index(FIXTURES / "releases-minimal.json")


@pytest.fixture
def workspace(tmp_path):
    """Empty repository root with a releases/ directory."""
    (tmp_path / "releases").mkdir()
    return tmp_path
