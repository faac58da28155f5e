"""Service driving reference/test comparisons over molecule streams."""

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from tqdm import tqdm

from ..domain.interfaces.isomorphism_searcher import IsomorphismSearcher
from ..domain.models.molecular_graph import MolecularGraph
from .canonicalizer import canonicalize
from .correspondence_matcher import CorrespondenceMatcher


@dataclass
class ComparisonOptions:
    """Options controlling a batch of comparisons."""

    minimize: bool = False
    first_only: bool = False
    show_progress: bool = False


@dataclass
class ComparisonRecord:
    """Outcome of comparing one test structure against one reference."""

    reference_title: str
    test_title: str
    rmsd: float
    num_mappings: int

    def format_line(self) -> str:
        """Report line in the ``RMSD <title> <value>`` layout."""
        return f"RMSD {self.test_title} {self.rmsd:g}"


class ComparisonService:
    """Service pairing reference molecules with test molecules."""

    def __init__(self, searcher: Optional[IsomorphismSearcher] = None):
        """Initialize service with an optional isomorphism strategy."""
        self._searcher = searcher
        self.logger = logging.getLogger(__name__)

    def compare(
        self,
        references: Iterable[MolecularGraph],
        tests: Iterable[MolecularGraph],
        options: Optional[ComparisonOptions] = None,
    ) -> Iterator[ComparisonRecord]:
        """
        Compare each reference against molecules from a shared test stream.

        Every reference gets a fresh matcher and reads on from where the
        previous reference stopped. Without ``first_only`` one reference
        consumes all remaining tests; with it, only the next one. A test
        molecule without atoms ends the current reference's run.

        Args:
            references: Reference molecules, as parsed
            tests: Test molecules, as parsed
            options: Comparison options

        Yields:
            One ComparisonRecord per compared test molecule

        Raises:
            ConstructionError: If a reference cannot be compiled
        """
        options = options or ComparisonOptions()
        test_stream = iter(tests)

        with tqdm(
            desc="Comparing structures",
            unit="mol",
            disable=not options.show_progress,
            file=sys.stderr,
        ) as pbar:
            for reference in references:
                matcher = CorrespondenceMatcher(canonicalize(reference), self._searcher)
                self.logger.info(
                    "Reference %r: %d heavy atoms",
                    reference.title,
                    matcher.reference.num_atoms,
                )

                for test in test_stream:
                    if test.is_empty():
                        self.logger.info("Empty test molecule; ending run")
                        break

                    result = matcher.align(canonicalize(test), minimize=options.minimize)
                    pbar.update(1)
                    yield ComparisonRecord(
                        reference_title=reference.title,
                        test_title=test.title,
                        rmsd=result.rmsd,
                        num_mappings=result.num_mappings,
                    )

                    if options.first_only:
                        break

    def compare_all(
        self,
        references: Iterable[MolecularGraph],
        tests: Iterable[MolecularGraph],
        options: Optional[ComparisonOptions] = None,
    ) -> List[ComparisonRecord]:
        """Eager variant of :meth:`compare`."""
        return list(self.compare(references, tests, options))
