"""Index CLI commands."""

import argparse
import json

from release_registry.registry.loader import load_index
from release_registry.registry.query import all_versions, feature_list, find_version, latest_pointer


def _load(args: argparse.Namespace) -> dict | None:
    try:
        return load_index(args.index)
    except FileNotFoundError:
        print(f"ERROR: index file not found: {args.index}")
    except ValueError as e:
        print(f"ERROR: index parse failed: {e}")
    return None


def cmd_index_list(args: argparse.Namespace) -> int:
    index = _load(args)
    if index is None:
        return 1

    records = list(all_versions(index))
    if not records:
        print("No versions registered.")
        return 0

    latest = latest_pointer(index)
    latest_version = latest["version"] if latest else None

    print(f"\n  {'Version':<20} {'Created':<28} Features")
    print(f"  {'─' * 70}")
    for record in records:
        version = str(record.get("version", "?"))
        marker = " *" if version == latest_version else ""
        print(
            f"  {version + marker:<20} {str(record.get('createdAt', '?')):<28} "
            f"{', '.join(feature_list(record)) or '-'}"
        )
    print(f"\n  {len(records)} version(s)")
    if latest_version:
        print(f"  * latest -> {latest_version}")
    return 0


def cmd_index_show(args: argparse.Namespace) -> int:
    index = _load(args)
    if index is None:
        return 1

    record = find_version(index, args.version)
    if not record:
        print(f"ERROR: Version '{args.version}' not found in index")
        return 1

    print(f"\n  {args.version}")
    print(f"  {'─' * max(len(args.version), 40)}")
    for key, value in record.items():
        if key == "version":
            continue
        if isinstance(value, list):
            print(f"  {key + ':':<20}{', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            print(f"  {key + ':':<20}{json.dumps(value, indent=None)}")
        else:
            print(f"  {key + ':':<20}{value}")
    print()
    return 0


def cmd_index_latest(args: argparse.Namespace) -> int:
    index = _load(args)
    if index is None:
        return 1

    latest = latest_pointer(index)
    if not latest:
        print("No latest version set.")
        return 1

    print(f"  latest -> {latest['version']}")
    if latest.get("syncedAt"):
        print(f"  synced:   {latest['syncedAt']}")
    print(f"  features: {', '.join(feature_list(latest)) or '-'}")
    return 0
