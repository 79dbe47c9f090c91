"""CLI entrypoint for refnav."""
from __future__ import annotations
import argparse
import os
from pathlib import Path

from loguru import logger

from .core.errors import RefNavError
from .core.logging import setup_logging
from .core.reconciler import DEFAULT_REFERENCE_HEADER, NavOptions, update_nav


def build_parser():
    p = argparse.ArgumentParser(prog="refnav", description="Sync mkdocs.yml nav with generated reference docs")
    sub = p.add_subparsers(dest="command")
    update = sub.add_parser("update", help="Update the reference section of mkdocs.yml")
    update.add_argument("--cwd", type=Path, help="Base directory for relative paths (default: current directory)")
    update.add_argument("--mkdocs-yml", type=Path, help="Path to mkdocs.yml (default: next to package.json)")
    update.add_argument("--package-json", type=Path, help="Path to package.json used to guess config locations")
    update.add_argument("--typedoc-json", type=Path, help="Path to typedoc.json (default: next to package.json)")
    update.add_argument(
        "--reference-header",
        default=os.getenv("REFNAV_REFERENCE_HEADER", DEFAULT_REFERENCE_HEADER),
        help="Title of the nav section holding reference pages",
    )
    headers = update.add_mutually_exclusive_group()
    headers.add_argument(
        "--no-reference-header",
        action="store_true",
        help="Keep reference pages as plain top-level entries",
    )
    headers.add_argument(
        "--force-reference-header",
        action="store_true",
        help="Group reference pages under the header even if nav is a flat list",
    )
    update.add_argument("--dry-run", action="store_true", help="Report changes without writing mkdocs.yml")
    update.add_argument("--log-level", help="Log level (overrides REFNAV_LOG_LEVEL)")
    update.add_argument("--log-file", help="Also write logs to this file (overrides REFNAV_LOG_FILE)")
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "update":
        parser.print_help()
        return 1
    setup_logging(level=args.log_level, log_file=args.log_file)
    options = NavOptions(
        cwd=args.cwd,
        mkdocs_yml=args.mkdocs_yml,
        package_json=args.package_json,
        typedoc_json=args.typedoc_json,
        reference_header=args.reference_header,
        no_reference_header=args.no_reference_header,
        force_reference_header=args.force_reference_header,
        dry_run=args.dry_run,
    )
    try:
        update_nav(options)
    except RefNavError as e:
        logger.bind(tag="mkdocs-nav").error(str(e))
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
