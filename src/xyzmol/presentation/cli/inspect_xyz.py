"""Command-line interface for inspecting a single XYZ file."""

import argparse
import sys
from typing import List, Optional

from .logging_config import add_logging_arguments, setup_logging
from ...core.domain.errors import ParseError
from ...core.domain.models.molecule_summary import MoleculeSummary
from ...core.services.molecule_service import MoleculeService


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Parse an XYZ file and print a summary of the molecule"
    )
    parser.add_argument("xyz_file", help="XYZ file to read")
    add_logging_arguments(parser)
    return parser


def format_summary(summary: MoleculeSummary) -> str:
    """Render a molecule summary as text."""
    lines = [
        f"Comment: {summary.comment}",
        f"Atoms: {summary.num_atoms}",
        "Center: ({:.4f}, {:.4f}, {:.4f})".format(*summary.center),
    ]
    if summary.element_counts:
        lines.append("Composition:")
    for element, count in summary.element_counts.items():
        style = summary.styles[element]
        r, g, b = style.color
        lines.append(
            f"  {element:<6s} {count:6d}  radius {style.radius:.3f}  "
            f"color ({r:.2f}, {g:.2f}, {b:.2f})"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the inspect CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    service = MoleculeService()
    try:
        molecule = service.load(args.xyz_file)
    except (ParseError, OSError) as e:
        print(f"Error: {args.xyz_file}: {e}", file=sys.stderr)
        return 1

    print(format_summary(service.summarize(molecule)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
