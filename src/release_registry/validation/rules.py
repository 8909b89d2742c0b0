"""Validation rules run against a single release directory.

Each rule takes a ReleaseContext and returns a list of findings. Rules do
not modify their inputs and report missing or malformed data as findings;
only unexpected faults escape as exceptions, which the runner converts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, NamedTuple

from release_registry.registry.query import feature_list, find_version
from release_registry.settings import CheckSettings
from release_registry.store import (
    CONFIG_FILENAME,
    FEATURE_TEST_FILENAME,
    MARKDOWN_FILES,
    RELEASE_FILENAME,
    REQUIRED_FILES,
    read_config,
    read_text,
    try_read_config,
)
from release_registry.validation.result import Finding, error, info, passed, warning

CONFIG_REQUIRED_FIELDS = ("version", "createdAt", "features")


@dataclass(frozen=True)
class ReleaseContext:
    """Everything a rule may look at for one version."""

    version: str
    directory: Path
    index: dict
    settings: CheckSettings = field(default_factory=CheckSettings)

    @property
    def is_latest(self) -> bool:
        return self.version == self.settings.latest_name


class Rule(NamedTuple):
    name: str
    check: Callable[[ReleaseContext], list[Finding]]


def is_valid_timestamp(value) -> bool:
    """True if value is an ISO-8601 date or datetime string."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def check_required_files(ctx: ReleaseContext) -> list[Finding]:
    findings = []
    for name in REQUIRED_FILES:
        if (ctx.directory / name).is_file():
            findings.append(passed(ctx.version, f"required file present: {name}"))
        else:
            findings.append(error(ctx.version, f"missing required file: {name}"))
    return findings


def check_config_structure(ctx: ReleaseContext) -> list[Finding]:
    if not (ctx.directory / CONFIG_FILENAME).is_file():
        return []

    try:
        config = read_config(ctx.directory)
    except ValueError as e:
        return [error(ctx.version, f"config.json parse failed: {e}")]

    findings = []
    for name in CONFIG_REQUIRED_FIELDS:
        if name not in config:
            findings.append(error(ctx.version, f"config.json missing required field: {name}"))

    declared = config.get("version")
    if declared and declared != ctx.version and not config.get("isLatest"):
        findings.append(warning(
            ctx.version,
            f"config.json version ({declared}) does not match directory name",
        ))

    created = config.get("createdAt")
    if "createdAt" in config and not is_valid_timestamp(created):
        findings.append(error(ctx.version, f"config.json createdAt is not a valid timestamp: {created}"))

    if "features" in config and not isinstance(config["features"], list):
        findings.append(error(ctx.version, "config.json features must be a list"))

    if not findings:
        findings.append(passed(ctx.version, "config.json structure valid"))
    return findings


def _is_folder_name(name: str) -> bool:
    """True if name is a single path component inside the release directory."""
    return name not in ("", ".", "..") and Path(name).name == name


def check_feature_folders(ctx: ReleaseContext) -> list[Finding]:
    # Parse failures are reported by check_config_structure.
    config = try_read_config(ctx.directory)
    if config is None:
        return []

    findings = []
    for feature in feature_list(config):
        feature_dir = ctx.directory / feature
        if not _is_folder_name(feature) or not feature_dir.is_dir():
            findings.append(error(ctx.version, f"declared feature folder missing: {feature}"))
        elif not (feature_dir / FEATURE_TEST_FILENAME).is_file():
            findings.append(warning(ctx.version, f"feature {feature} missing {FEATURE_TEST_FILENAME}"))
        else:
            findings.append(passed(ctx.version, f"feature {feature} has {FEATURE_TEST_FILENAME}"))
    return findings


def check_markdown_content(ctx: ReleaseContext) -> list[Finding]:
    findings = []
    for name in MARKDOWN_FILES:
        content = read_text(ctx.directory / name)
        if content is None:
            continue

        if any(marker in content for marker in ctx.settings.placeholder_markers):
            findings.append(warning(ctx.version, f"{name}: contains unfilled placeholder content"))

        if not ctx.is_latest and ctx.version not in content:
            findings.append(warning(ctx.version, f"{name}: no version reference found"))
    return findings


def _changelog_body(content: str, markers) -> str | None:
    """Text after the earliest changelog marker, or None without one."""
    hits = [(content.find(m), m) for m in markers if m in content]
    if not hits:
        return None
    position, marker = min(hits)
    return content[position + len(marker):]


def check_traceability(ctx: ReleaseContext) -> list[Finding]:
    content = read_text(ctx.directory / RELEASE_FILENAME)
    if content is None:
        return []

    body = _changelog_body(content, ctx.settings.changelog_markers)
    if body is None:
        return [warning(ctx.version, "missing changelog section")]
    if len(body.strip()) > ctx.settings.changelog_min_length:
        return [passed(ctx.version, "changelog present")]
    return [info(ctx.version, "changelog present but sparse")]


def check_index_consistency(ctx: ReleaseContext) -> list[Finding]:
    record = find_version(ctx.index, ctx.version)
    if record is None:
        if ctx.is_latest:
            return []
        return [error(ctx.version, "not registered in index")]

    config = try_read_config(ctx.directory)
    if config is None:
        return []

    if sorted(feature_list(record)) != sorted(feature_list(config)):
        return [warning(ctx.version, "feature lists diverge between index and config")]
    return [passed(ctx.version, "index and config features match")]


RULES: tuple[Rule, ...] = (
    Rule("required-files", check_required_files),
    Rule("config-structure", check_config_structure),
    Rule("feature-folders", check_feature_folders),
    Rule("markdown-content", check_markdown_content),
    Rule("traceability", check_traceability),
    Rule("index-consistency", check_index_consistency),
)
