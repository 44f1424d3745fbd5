"""
Command-line entry point.

    transcheck validate surveys/            # exit 1 if any issue
    transcheck audit surveys/child.json     # same report, exit 0
    transcheck inventory surveys/
    transcheck normalize surveys/child.json [--in-place]

Exit codes:
    0  no issues (or audit/inventory/normalize mode)
    1  issues found in validate mode
    2  fatal error: unreadable/malformed file or invalid configuration
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from transcheck import __version__
from transcheck.backends import render_reports
from transcheck.config import ConfigError, ValidatorConfig, load_config
from transcheck.loader import ParseError, discover_survey_files, load_document
from transcheck.model import ValidationReport
from transcheck.normalize import normalize_file
from transcheck.serialization import reports_to_json, reports_to_yaml
from transcheck.validator import collect_locale_keys, validate_document


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transcheck",
        description="Check translated JSON survey definitions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("validate", "Report issues and fail if any are found"),
        ("audit", "Report issues without failing"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("paths", nargs="+", help="Survey .json files or directories")
        p.add_argument("--config", help="YAML configuration file")
        p.add_argument("--format", choices=["text", "json", "yaml"], default="text")

    p = sub.add_parser("inventory", help="List locale keys used by translation maps")
    p.add_argument("paths", nargs="+", help="Survey .json files or directories")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument("--format", choices=["text", "json"], default="text")

    p = sub.add_parser("normalize", help="Fill missing text.default from choice values")
    p.add_argument("paths", nargs="+", help="Survey .json files or directories")
    p.add_argument("--in-place", action="store_true", help="Overwrite input after a backup")
    p.add_argument("--backups-dir", help="Backup directory (default: <file dir>/backups)")
    p.add_argument("--keep", type=int, default=3, help="Backups to keep per file")

    return parser


def _load_config(path: Optional[str]) -> ValidatorConfig:
    if path is None:
        return ValidatorConfig()
    config = load_config(path)
    logger.info("Loaded configuration from %s", path)
    return config


def _check(args: argparse.Namespace, fail_on_issues: bool) -> int:
    config = _load_config(args.config)
    reports: List[ValidationReport] = []
    for path in discover_survey_files(args.paths):
        document = load_document(path)
        reports.append(validate_document(document, config, source=path))

    if args.format == "json":
        print(reports_to_json(reports))
    elif args.format == "yaml":
        print(reports_to_yaml(reports), end="")
    else:
        print(render_reports(reports))

    if fail_on_issues and any(not r.passed for r in reports):
        return EXIT_ISSUES
    return EXIT_OK


def _inventory(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    inventory = {}
    for path in discover_survey_files(args.paths):
        inventory[path] = collect_locale_keys(load_document(path), config)

    if args.format == "json":
        print(json.dumps(inventory, indent=2, ensure_ascii=False))
        return EXIT_OK

    for path, counts in inventory.items():
        print(f"{path}:")
        if not counts:
            print("  (no translation maps)")
        for key, n in counts.items():
            print(f"  {key:<8} {n}")
    return EXIT_OK


def _backup_base_dir(files: List[str]) -> Optional[str]:
    """Deepest folder containing every file, so backup names stay unique in a shared backups dir."""
    if not files:
        return None
    return os.path.commonpath([os.path.dirname(os.path.abspath(f)) for f in files])


def _normalize(args: argparse.Namespace) -> int:
    files = discover_survey_files(args.paths)
    base_dir = _backup_base_dir(files)
    total = 0
    for path in files:
        count = normalize_file(
            path,
            in_place=args.in_place,
            backups_dir=args.backups_dir,
            keep=args.keep,
            base_dir=base_dir,
        )
        print(f"{path}: normalized {count} items" if count else f"{path}: no changes")
        total += count
    print(f"Total normalized: {total}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)

    try:
        if args.command == "validate":
            return _check(args, fail_on_issues=True)
        if args.command == "audit":
            return _check(args, fail_on_issues=False)
        if args.command == "inventory":
            return _inventory(args)
        return _normalize(args)
    except (ParseError, ConfigError, FileNotFoundError) as e:
        logger.error("%s", e)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
