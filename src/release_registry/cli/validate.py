"""Validate CLI command."""

import argparse
import os
import sys
from pathlib import Path

import yaml

from release_registry import paths
from release_registry.settings import load_settings
from release_registry.validation.report import verdict
from release_registry.validation.runner import run_validation


def write_ci_signal(has_errors: bool) -> bool:
    """Append has_errors=<bool> to the CI output file, if one is configured.

    Returns True when the signal was written.
    """
    target = os.environ.get("GITHUB_OUTPUT")
    if not target:
        return False
    with open(target, "a", encoding="utf-8") as f:
        f.write(f"has_errors={'true' if has_errors else 'false'}\n")
    return True


def cmd_validate(args: argparse.Namespace) -> int:
    settings_file = args.settings or paths.settings_path(args.root)
    try:
        settings = load_settings(settings_file)
    except (yaml.YAMLError, ValueError) as e:
        print(f"ERROR: invalid settings file {settings_file}: {e}", file=sys.stderr)
        return 2

    target = args.version or None
    if target:
        print(f"Validating version {target}...")
    else:
        print(f"Validating all versions in {args.releases}...")

    run = run_validation(args.releases, args.index, version=target, settings=settings)

    if not args.no_report:
        report_file = Path(args.report or paths.report_path(args.root))
        report_file.parent.mkdir(parents=True, exist_ok=True)
        report_file.write_text(run.report, encoding="utf-8")

    print(run.report)
    write_ci_signal(run.has_blocking_errors)

    print("=" * 40)
    print(f"{len(run.versions)} version(s) checked. {verdict(run.result)}")

    if run.has_blocking_errors and args.strict:
        return 1
    return 0
