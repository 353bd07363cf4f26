#!/usr/bin/env python
"""Branch config CLI for versync.

Usage:
    uv run python scripts/branch_config.py parse <ref>                  # Show parsed year/update
    uv run python scripts/branch_config.py sync --path P --ref R        # Update config file
    uv run python scripts/branch_config.py sync --path P --ref R --dry-run
"""

import argparse
import sys
from pathlib import Path

# Add parent to path for versync imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from versync.services.branch_parser import format_version_tag, parse_branch
from versync.services.config_store import ConfigStore
from versync.services.errors import MissingRefError
from versync.services.outputs import StepOutputs
from versync.services.sync import BranchConfigSync


def cmd_parse(args: argparse.Namespace) -> int:
    """Show the year and update parsed from a ref."""
    branch = parse_branch(args.ref)

    year = branch.year if branch.year is not None else "unknown"
    update = format_version_tag(branch.update) if branch.update is not None else "unknown"

    print(f"Ref:    {args.ref}")
    print(f"Year:   {year}")
    print(f"Update: {update}")
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    """Reconcile a local config file against a ref."""
    sync = BranchConfigSync(
        store=ConfigStore(args.path),
        outputs=StepOutputs(),
        ref=args.ref,
        dry_run=args.dry_run,
    )
    try:
        result = sync.run()
    except MissingRefError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dry_run:
        if result.changed:
            print(f"Would update {args.path}:")
            print(f"  year:   {result.config['year']}")
            print(f"  update: {result.config['update']}")
        else:
            print(f"{args.path} is up to date.")
        return 0

    if result.updated:
        print(f"Updated {args.path}:")
        print(f"  year:   {result.config['year']}")
        print(f"  update: {result.config['update']}")
        return 0

    if result.changed:
        print(f"Failed to write {args.path}.")
        return 1

    print(f"{args.path} not updated.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Branch version config tool for versync",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run python scripts/branch_config.py parse refs/heads/2024-up3.1-feature
  uv run python scripts/branch_config.py sync --path version.json --ref heads/2024-up2
  uv run python scripts/branch_config.py sync --path version.json --ref heads/2025 --dry-run
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Show year/update parsed from a ref")
    parse_parser.add_argument("ref", help="Branch ref (e.g., refs/heads/2024-up3.1)")

    # sync command
    sync_parser = subparsers.add_parser("sync", help="Update a config file from a ref")
    sync_parser.add_argument("--path", required=True, help="Path to the JSON config file")
    sync_parser.add_argument("--ref", required=True, help="Branch ref (e.g., heads/2024-up2)")
    sync_parser.add_argument(
        "--dry-run", action="store_true", help="Show the change without writing it"
    )

    args = parser.parse_args()

    commands = {
        "parse": cmd_parse,
        "sync": cmd_sync,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
