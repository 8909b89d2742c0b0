"""Validation module — rules, findings, report rendering and the run driver."""

from release_registry.validation.report import render_report
from release_registry.validation.result import Finding, ValidationResult
from release_registry.validation.rules import RULES, ReleaseContext, Rule
from release_registry.validation.runner import (
    ValidationRun,
    check_orphans,
    run_validation,
    validate_version,
)

__all__ = [
    "Finding",
    "ValidationResult",
    "render_report",
    "RULES",
    "ReleaseContext",
    "Rule",
    "ValidationRun",
    "check_orphans",
    "run_validation",
    "validate_version",
]
