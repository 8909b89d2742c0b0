"""Unified CLI for the release registry.

Usage:
    release-registry validate [--version V] [--strict] [--report PATH | --no-report]
    release-registry index list
    release-registry index show <version>
    release-registry index latest
"""

import argparse
import sys

from release_registry import paths
from release_registry.cli.index import cmd_index_latest, cmd_index_list, cmd_index_show
from release_registry.cli.validate import cmd_validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-registry",
        description="Validate and inspect the versioned release registry",
    )
    parser.add_argument(
        "--root", default=None,
        help="Repository root (default: $RELEASE_REGISTRY_ROOT or .)",
    )
    parser.add_argument(
        "--releases", default=None,
        help="Release store directory (default: <root>/releases)",
    )
    parser.add_argument(
        "--index", default=None,
        help="Path to releases.json (default: <root>/releases.json)",
    )
    sub = parser.add_subparsers(dest="command")

    # validate
    val = sub.add_parser("validate", help="Validate release directories")
    val.add_argument(
        "--version", default=None,
        help="Validate a single version (default: every directory)",
    )
    val.add_argument(
        "--strict", action="store_true",
        help="Exit non-zero when errors are found",
    )
    val.add_argument(
        "--report", default=None,
        help="Report output path (default: <root>/validation-report.md)",
    )
    val.add_argument(
        "--no-report", action="store_true",
        help="Print the report without writing it to disk",
    )
    val.add_argument(
        "--settings", default=None,
        help="Path to release-registry.yaml",
    )

    # index
    idx = sub.add_parser("index", help="Index operations")
    idx_sub = idx.add_subparsers(dest="subcommand")
    idx_sub.add_parser("list", help="List registered versions")
    show = idx_sub.add_parser("show", help="Show an index entry")
    show.add_argument("version")
    idx_sub.add_parser("latest", help="Show the latest pointer")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    args.releases = args.releases or str(paths.releases_dir(args.root))
    args.index = args.index or str(paths.index_path(args.root))

    if args.command == "validate":
        return cmd_validate(args)

    dispatch = {
        ("index", "list"): cmd_index_list,
        ("index", "show"): cmd_index_show,
        ("index", "latest"): cmd_index_latest,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
