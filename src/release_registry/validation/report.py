"""Render a ValidationResult as a markdown report."""

from datetime import datetime, timezone

from release_registry.validation.result import ERROR, INFO, PASSED, WARNING, ValidationResult

# Summary lines and sections have separate fixed orders.
SUMMARY_ORDER = (PASSED, ERROR, WARNING, INFO)
SECTION_ORDER = (ERROR, WARNING, INFO, PASSED)

LABELS = {
    ERROR: "Errors",
    WARNING: "Warnings",
    INFO: "Info",
    PASSED: "Passed",
}


def render_report(result: ValidationResult, generated_at: datetime | None = None) -> str:
    """Format findings grouped by severity.

    Args:
        result: Collected findings.
        generated_at: Timestamp for the header. Defaults to now (UTC).

    Returns:
        The report text. Sections without findings are omitted.
    """
    stamp = generated_at or datetime.now(timezone.utc)
    counts = result.counts()

    lines = [f"### Validated at: {stamp.isoformat()}", ""]

    lines.append("### Summary")
    for severity in SUMMARY_ORDER:
        lines.append(f"- {LABELS[severity]}: {counts[severity]}")
    lines.append("")

    for severity in SECTION_ORDER:
        findings = result.bucket(severity)
        if not findings:
            continue
        lines.append(f"### {LABELS[severity]}")
        for finding in findings:
            lines.append(f"- [{finding.version}] {finding.message}")
        lines.append("")

    return "\n".join(lines)


def verdict(result: ValidationResult) -> str:
    """One-line outcome for console output."""
    if result.has_blocking_errors:
        return f"FAIL: {len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if result.warnings:
        return f"PASS with {len(result.warnings)} warning(s)"
    return "PASS"
