#!/usr/bin/env python3
"""
Rename capitalized component files (AlertDialog.vue) to kebab-case
(alert-dialog.vue) and rewrite every import path that points at them.

Usage:
    kebab-rename [components_directory] [--yes] [--dry-run]

Without a directory the usual locations (app/components, components,
src/components, src/app/components) are probed, preferring their ui/
subdirectory.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, List, Optional

import yaml

from kebab_rename.config import POLICIES, RenameConfig, find_components_dir, load_config
from kebab_rename.errors import RenameError
from kebab_rename.processor import ChangeLog, process_tree
from kebab_rename.rename_map import BuildResult, RenameMap, build_rename_map


def log(msg: str) -> None:
    print(msg, flush=True)


def warn(msg: str) -> None:
    print(f"WARN: {msg}", file=sys.stderr, flush=True)


def confirm(prompt: str = "\nDo you want to proceed with these changes? (y/n): ") -> bool:
    try:
        response = input(prompt)
    except EOFError:
        return False
    return response.strip().lower() in {"y", "yes"}


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def print_proposal(renames: RenameMap, root: Path) -> None:
    log("\nProposed changes:")
    log("=================")
    for entry in renames.entries():
        source = f"  ({_relative(entry.source, root)})" if entry.source else ""
        log(f"{entry.old} -> {entry.new}{source}")
    log("\nThis will update all imports in component files to use the new kebab-case names.")


def print_changes(changes: ChangeLog, root: Path) -> None:
    for path in changes.rewritten:
        log(f"Updated imports in: {_relative(path, root)}")
    for source, destination in changes.renamed_files:
        log(f"Renamed: {_relative(source, root)} -> {_relative(destination, root)}")
    for source, destination in changes.renamed_dirs:
        log(f"Renamed directory: {_relative(source, root)} -> {_relative(destination, root)}")


def build_report(root: Path, result: BuildResult, changes: Optional[ChangeLog]) -> dict[str, Any]:
    report: dict[str, Any] = {
        "root": str(root),
        "renames": {entry.old: entry.new for entry in result.renames.entries()},
    }
    if result.skipped:
        report["skipped"] = [
            {"path": _relative(path, root), "error": error} for path, error in result.skipped
        ]
    if changes is not None:
        report["changes"] = {
            "rewritten": [_relative(path, root) for path in changes.rewritten],
            "renamed_files": [
                {"from": _relative(src, root), "to": _relative(dst, root)}
                for src, dst in changes.renamed_files
            ],
            "renamed_dirs": [
                {"from": _relative(src, root), "to": _relative(dst, root)}
                for src, dst in changes.renamed_dirs
            ],
        }
    return report


def write_report(path: Path, report: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(report, handle, sort_keys=False, default_flow_style=False, allow_unicode=True)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rename PascalCase component files and imports to kebab-case."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Components directory (default: probe app/components, components, src/components, ...)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding extensions, classifier policy and name lists",
    )
    parser.add_argument(
        "--policy",
        choices=POLICIES,
        default=None,
        help="Component classifier policy (default: allowlist)",
    )
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Apply changes without asking for confirmation",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the proposed renames",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Write the rename map and change log to this YAML file",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, ask: Callable[[], bool] = confirm) -> int:
    config = load_config(Path(args.config)) if args.config else RenameConfig()
    if args.policy:
        config = replace(config, policy=args.policy)

    if args.directory:
        root = Path(args.directory).expanduser().resolve()
    else:
        root = find_components_dir(Path.cwd(), config.search_candidates)
        log(f"Found components directory: {root}")

    result = build_rename_map(root, config)
    for path, error in result.skipped:
        warn(f"Skipped unreadable file {path}: {error}")

    if not result.renames:
        log("No PascalCase imports found to rename.")
        return 0

    print_proposal(result.renames, root)

    changes: Optional[ChangeLog] = None
    if args.dry_run:
        log("\nDry run: no files were changed.")
    elif not args.yes and not ask():
        log("Operation cancelled.")
    else:
        log("\nProceeding with changes...")
        changes = process_tree(root, result.renames, config)
        print_changes(changes, root)
        log("\nAll changes completed successfully!")

    if args.report:
        write_report(Path(args.report), build_report(root, result, changes))
        log(f"Wrote {args.report}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run(args)
    except RenameError as exc:
        print(f"ERROR: {exc}", file=sys.stderr, flush=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
