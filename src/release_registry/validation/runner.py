"""Run the validation rules over the release store."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from release_registry.registry.loader import empty_index, load_index
from release_registry.registry.query import version_names
from release_registry.settings import CheckSettings
from release_registry.store import list_versions, release_dir
from release_registry.validation.report import render_report
from release_registry.validation.result import GLOBAL_SCOPE, ValidationResult, error
from release_registry.validation.rules import RULES, ReleaseContext, Rule


@dataclass
class ValidationRun:
    """Outcome of one validation run."""

    result: ValidationResult
    report: str
    versions: list[str] = field(default_factory=list)

    @property
    def has_blocking_errors(self) -> bool:
        return self.result.has_blocking_errors


def load_index_for_run(index_path: Path | str, result: ValidationResult) -> dict:
    """Load the index, recording a global error and falling back on failure."""
    try:
        return load_index(index_path)
    except FileNotFoundError:
        result.add(error(GLOBAL_SCOPE, f"index file not found: {index_path}"))
    except (OSError, ValueError) as e:
        result.add(error(GLOBAL_SCOPE, f"index parse failed: {e}"))
    return empty_index()


def validate_version(
    version: str,
    directory: Path | str,
    index: dict,
    result: ValidationResult,
    settings: CheckSettings | None = None,
    rules: tuple[Rule, ...] | None = None,
) -> None:
    """Run every rule against one release directory.

    A rule that raises is reported as an error naming the rule; the
    remaining rules still run.
    """
    ctx = ReleaseContext(
        version=version,
        directory=Path(directory),
        index=index,
        settings=settings or CheckSettings(),
    )
    for rule in rules or RULES:
        try:
            findings = rule.check(ctx)
        except Exception as e:
            result.add(error(version, f"rule {rule.name} failed: {e}"))
            continue
        result.extend(findings)


def check_orphans(releases_dir: Path | str, index: dict, result: ValidationResult) -> None:
    """Report index entries whose release directory no longer exists."""
    for version in version_names(index):
        if not release_dir(releases_dir, version).is_dir():
            result.add(error(version, "registered in index but release directory missing"))


def run_validation(
    releases_dir: Path | str,
    index_path: Path | str,
    version: str | None = None,
    settings: CheckSettings | None = None,
    generated_at: datetime | None = None,
) -> ValidationRun:
    """Validate one version, or every directory in the store.

    Args:
        releases_dir: Release store root.
        index_path: Path to releases.json.
        version: Explicit version to validate. None validates all.
        settings: Check settings. Defaults are used if None.
        generated_at: Report timestamp override.

    Returns:
        ValidationRun with the findings, rendered report and the
        versions that were visited.
    """
    result = ValidationResult()
    index = load_index_for_run(index_path, result)

    versions = [version] if version else list_versions(releases_dir)

    for name in versions:
        directory = release_dir(releases_dir, name)
        if not directory.is_dir():
            result.add(error(name, "release directory not found"))
            continue
        validate_version(name, directory, index, result, settings)

    check_orphans(releases_dir, index, result)

    return ValidationRun(
        result=result,
        report=render_report(result, generated_at),
        versions=versions,
    )
