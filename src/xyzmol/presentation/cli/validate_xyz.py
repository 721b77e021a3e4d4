"""Command-line interface for validating many XYZ files."""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .logging_config import add_logging_arguments, setup_logging
from ...core.services.molecule_service import MoleculeService
from ...infrastructure.repositories.molecule_repository import XYZ_EXTENSION


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(description="Validate XYZ files")
    parser.add_argument(
        "paths",
        nargs="+",
        help="XYZ files, or directories searched recursively for *.xyz files",
    )
    parser.add_argument(
        "--fail-fast", action="store_true", help="Stop at the first invalid file"
    )
    add_logging_arguments(parser)
    return parser


def collect_files(paths: List[str]) -> List[str]:
    """Expand directories into the XYZ files they contain."""
    files = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(
                str(p)
                for p in sorted(Path(path).rglob(f"*{XYZ_EXTENSION}"))
                if not p.name.startswith("._")
            )
        else:
            files.append(path)
    return files


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validate CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    files = collect_files(args.paths)
    if not files:
        print("No XYZ files found", file=sys.stderr)
        return 1

    service = MoleculeService()
    reports = service.validate_files(
        files, fail_fast=args.fail_fast, show_progress=not args.quiet
    )

    failed = [r for r in reports if not r.ok]
    for report in failed:
        print(f"{report.path}: {report.error_message}")

    print(f"{len(reports) - len(failed)}/{len(reports)} files valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
