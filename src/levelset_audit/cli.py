"""Command-line interface for the level-set auditor.

This module provides the CLI entry point for checking a level set's
assets and packaging the files it adds to the base game data.
"""

import argparse
import json
import sys
from pathlib import Path

from jsonschema import ValidationError

from .core.validator import report_errors
from .packaging import default_archive_path, write_archive
from .pipeline import AuditPipeline, AuditResult
from .report import format_missing


def audit_level_set(base_dir: Path, set_file: Path, quiet: bool = False) -> AuditResult:
    """Audit a level set on disk.

    Args:
        base_dir: Game data directory
        set_file: Path to the set file; its directory is the addon directory
        quiet: Suppress progress messages

    Returns:
        AuditResult of the run

    Raises:
        ValueError: If the base directory or set file doesn't exist
    """
    pipeline = AuditPipeline.from_paths(base_dir, set_file, quiet=quiet)
    return pipeline.run()


def describe_validation_error(error: ValidationError) -> str:
    """Turn a schema violation into a one-line message naming where it is."""
    location = " -> ".join(str(p) for p in error.path) or "root"
    return f"Validation error at {location}: {error.message}"


def print_json_report(result: AuditResult) -> bool:
    """Validate and print the JSON report; returns False if validation fails."""
    report = result.to_report()

    try:
        errors = [describe_validation_error(e) for e in report_errors(report)]
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Report schema could not be loaded: {e}", file=sys.stderr)
        return False

    if errors:
        print("Error: Report validation failed:", file=sys.stderr)
        for message in errors:
            print(message, file=sys.stderr)
        return False

    json.dump(report, sys.stdout, indent=2)
    print()
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levelset-audit",
        description="Check that a level set's assets exist and package the files it adds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a level set against the stock game data
  levelset-audit /usr/share/neverball/data ~/sets/mine/set-mine.txt

  # Also write set-mine.zip with the files not shipped by the game
  levelset-audit /usr/share/neverball/data ~/sets/mine/set-mine.txt --zip

  # Machine-readable report
  levelset-audit /usr/share/neverball/data ~/sets/mine/set-mine.txt --json > report.json
        """,
    )

    parser.add_argument("base_dir", help="Game data directory (the base store)")
    parser.add_argument("set_file", help="Set file; its directory is the addon store")

    parser.add_argument("--zip", action="store_true", help="Write a zip of the new addon files")
    parser.add_argument("--output-dir", help="Directory for the zip file (default: current directory)")
    parser.add_argument("--archive-name", help="Zip file name (default: set file name with .zip)")
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of plain lines")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress messages")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the audit script."""
    args = build_parser().parse_args(argv)

    try:
        result = audit_level_set(Path(args.base_dir), Path(args.set_file), quiet=args.quiet)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        if not print_json_report(result):
            return 1
    elif not result.ok:
        for ref in result.outcome.missing:
            print(format_missing(ref))
    else:
        for entry in result.archive_entries:
            print(entry.source)

    if not result.ok:
        if not args.quiet:
            print(f"Missing {len(result.outcome.missing)} assets", file=sys.stderr)
        return 1

    if args.zip:
        output_dir = Path(args.output_dir) if args.output_dir else None
        if args.archive_name:
            destination = (output_dir or Path(".")) / args.archive_name
        else:
            destination = default_archive_path(result.set_path, output_dir)

        try:
            write_archive(result.archive_entries, destination)
        except OSError as e:
            print(f"Error: Failed to write archive {destination}: {e}", file=sys.stderr)
            return 1

        print(f"Wrote {destination} ({len(result.archive_entries)} files)", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
