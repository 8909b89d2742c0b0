"""Tests for check settings and path resolution."""

from pathlib import Path

import pytest
import yaml

from release_registry import paths
from release_registry.settings import (
    DEFAULT_CHANGELOG_MIN_LENGTH,
    CheckSettings,
    load_settings,
    settings_from_dict,
)


class TestLoadSettings:
    def test_no_path_gives_defaults(self):
        assert load_settings(None) == CheckSettings()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.yaml") == CheckSettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        f = tmp_path / "release-registry.yaml"
        f.write_text("")
        assert load_settings(f) == CheckSettings()

    def test_overrides(self, tmp_path):
        f = tmp_path / "release-registry.yaml"
        f.write_text(
            "placeholder_markers: ['TBD']\n"
            "changelog_markers: ['## History']\n"
            "changelog_min_length: 10\n"
        )
        settings = load_settings(f)
        assert settings.placeholder_markers == ("TBD",)
        assert settings.changelog_markers == ("## History",)
        assert settings.changelog_min_length == 10
        assert settings.latest_name == "latest"

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "release-registry.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="not a YAML mapping"):
            load_settings(f)

    def test_malformed_yaml(self, tmp_path):
        f = tmp_path / "release-registry.yaml"
        f.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_settings(f)


class TestSettingsFromDict:
    def test_defaults(self):
        assert settings_from_dict({}).changelog_min_length == DEFAULT_CHANGELOG_MIN_LENGTH

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown settings key"):
            settings_from_dict({"colour": "blue"})

    @pytest.mark.parametrize("data", [
        {"placeholder_markers": "TBD"},
        {"changelog_markers": [""]},
        {"changelog_min_length": -1},
        {"changelog_min_length": True},
        {"latest_name": ""},
    ])
    def test_bad_values(self, data):
        with pytest.raises(ValueError):
            settings_from_dict(data)


class TestPaths:
    def test_defaults_under_root(self, monkeypatch):
        for var in (
            "RELEASE_REGISTRY_RELEASES_DIR",
            "RELEASE_REGISTRY_INDEX",
            "RELEASE_REGISTRY_REPORT",
            "RELEASE_REGISTRY_SETTINGS",
        ):
            monkeypatch.delenv(var, raising=False)
        root = Path("/srv/repo")
        assert paths.releases_dir(root) == root / "releases"
        assert paths.index_path(root) == root / "releases.json"
        assert paths.report_path(root) == root / "validation-report.md"
        assert paths.settings_path(root) == root / "release-registry.yaml"

    def test_root_from_env(self, monkeypatch):
        monkeypatch.setenv("RELEASE_REGISTRY_ROOT", "/srv/other")
        monkeypatch.delenv("RELEASE_REGISTRY_INDEX", raising=False)
        assert paths.index_path() == Path("/srv/other/releases.json")

    def test_env_used_without_root(self, monkeypatch):
        monkeypatch.setenv("RELEASE_REGISTRY_INDEX", "/tmp/custom.json")
        assert paths.index_path() == Path("/tmp/custom.json")

    def test_explicit_root_beats_env(self, monkeypatch):
        monkeypatch.setenv("RELEASE_REGISTRY_INDEX", "/tmp/custom.json")
        monkeypatch.setenv("RELEASE_REGISTRY_RELEASES_DIR", "/tmp/elsewhere")
        assert paths.index_path("/srv/repo") == Path("/srv/repo/releases.json")
        assert paths.releases_dir("/srv/repo") == Path("/srv/repo/releases")
