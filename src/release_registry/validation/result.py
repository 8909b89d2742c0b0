"""Findings and the four-bucket result they are collected into."""

from dataclasses import dataclass, field

ERROR = "error"
WARNING = "warning"
INFO = "info"
PASSED = "passed"

SEVERITIES = (ERROR, WARNING, INFO, PASSED)

GLOBAL_SCOPE = "global"


@dataclass(frozen=True)
class Finding:
    """One observation reported by a validation rule."""

    version: str
    message: str
    severity: str

    def __post_init__(self):
        if self.severity not in SEVERITIES:
            raise ValueError(f"Invalid severity '{self.severity}' (valid: {', '.join(SEVERITIES)})")


def error(version: str, message: str) -> Finding:
    return Finding(version, message, ERROR)


def warning(version: str, message: str) -> Finding:
    return Finding(version, message, WARNING)


def info(version: str, message: str) -> Finding:
    return Finding(version, message, INFO)


def passed(version: str, message: str) -> Finding:
    return Finding(version, message, PASSED)


@dataclass
class ValidationResult:
    """Append-only findings of a validation run, bucketed by severity."""

    errors: list[Finding] = field(default_factory=list)
    warnings: list[Finding] = field(default_factory=list)
    info: list[Finding] = field(default_factory=list)
    passed: list[Finding] = field(default_factory=list)

    def bucket(self, severity: str) -> list[Finding]:
        return {
            ERROR: self.errors,
            WARNING: self.warnings,
            INFO: self.info,
            PASSED: self.passed,
        }[severity]

    def add(self, finding: Finding) -> None:
        self.bucket(finding.severity).append(finding)

    def extend(self, findings) -> None:
        for finding in findings:
            self.add(finding)

    @property
    def has_blocking_errors(self) -> bool:
        return len(self.errors) > 0

    def counts(self) -> dict[str, int]:
        return {severity: len(self.bucket(severity)) for severity in SEVERITIES}

    def for_version(self, version: str) -> list[Finding]:
        """Findings tagged with one version, in bucket then emission order."""
        return [
            finding
            for severity in SEVERITIES
            for finding in self.bucket(severity)
            if finding.version == version
        ]
