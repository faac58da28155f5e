"""Command-line interface computing heavy-atom RMSDs of identical compounds."""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.implementations import SEARCHERS
from ...core.exceptions import HeavyRMSDError
from ...core.services.comparison_service import ComparisonOptions, ComparisonService
from ...infrastructure.repositories.structure_repository import StructureRepository


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="heavyrmsd",
        description="Computes the heavy-atom RMSD of identical compound structures.",
    )
    parser.add_argument("reference", help="Reference structure(s) file")
    parser.add_argument("test", help="Test structure(s) file")
    parser.add_argument(
        "-f",
        "--firstonly",
        action="store_true",
        help="Compare each reference with only the next test structure",
    )
    parser.add_argument(
        "-m",
        "--minimize",
        action="store_true",
        help="Compute minimum RMSD after optimal superposition",
    )
    parser.add_argument(
        "--searcher",
        choices=sorted(SEARCHERS),
        default="backtracking",
        help="Isomorphism enumeration strategy",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Maximum seconds per isomorphism search (backtracking only)",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar on stderr"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed output")
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging on stderr so stdout carries only results."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the RMSD CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("heavyrmsd")

    if args.timeout is not None and args.searcher != "backtracking":
        parser.error("--timeout is only supported by the backtracking searcher")

    if args.searcher == "backtracking":
        searcher = SEARCHERS[args.searcher](timeout=args.timeout)
    else:
        searcher = SEARCHERS[args.searcher]()

    options = ComparisonOptions(
        minimize=args.minimize,
        first_only=args.firstonly,
        show_progress=args.progress,
    )

    try:
        references = StructureRepository(args.reference)
        tests = StructureRepository(args.test)

        service = ComparisonService(searcher)
        for record in service.compare(references, tests, options):
            print(record.format_line(), flush=True)
    except HeavyRMSDError as e:
        logger.debug("Aborting run", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
