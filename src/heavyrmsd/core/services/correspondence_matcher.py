"""Service computing the best RMSD over all atom correspondences."""

import logging
from typing import Optional

import numpy as np

from ..domain.implementations.backtracking_isomorphism_searcher import (
    BacktrackingIsomorphismSearcher,
)
from ..domain.interfaces.isomorphism_searcher import IsomorphismSearcher
from ..domain.models.alignment_result import AlignmentResult, Mapping
from ..domain.models.molecular_graph import MolecularGraph
from ..utils import geometry
from .query_compiler import compile_query


class CorrespondenceMatcher:
    """
    Graph matcher bound to one reference molecule.

    The query is compiled once at construction. Every call then enumerates
    all isomorphisms between the reference and a test molecule, scores each
    one and keeps the lowest RMSD. Both molecules must have been through
    :func:`~heavyrmsd.core.services.canonicalizer.canonicalize`.
    """

    def __init__(
        self,
        reference: MolecularGraph,
        searcher: Optional[IsomorphismSearcher] = None,
    ):
        """Initialize matcher with a canonical reference molecule.

        Args:
            reference: Canonical reference molecule
            searcher: Isomorphism strategy, backtracking search by default

        Raises:
            ConstructionError: If the reference cannot be compiled
        """
        self.logger = logging.getLogger(__name__)
        self._reference = reference
        self._query = compile_query(reference)
        self._searcher = searcher or BacktrackingIsomorphismSearcher()

        self._reference_coords = reference.get_coordinates()
        self._reference_coords.setflags(write=False)

    @property
    def reference(self) -> MolecularGraph:
        return self._reference

    def _score(self, mapping: Mapping, test_coords: np.ndarray, minimize: bool) -> float:
        """RMSD of one mapping, optionally after optimal superposition."""
        ref_indices = [ref_idx for ref_idx, _ in mapping]
        test_indices = [test_idx for _, test_idx in mapping]

        # Row i of both arrays is the same chemical atom
        ref_coords = self._reference_coords[ref_indices]
        tst_coords = test_coords[test_indices]

        if minimize:
            return geometry.superposed_rms(ref_coords, tst_coords)
        return geometry.rms(ref_coords, tst_coords)

    def align(self, test: MolecularGraph, minimize: bool = False) -> AlignmentResult:
        """
        Enumerate every correspondence and keep the best one.

        Args:
            test: Canonical test molecule
            minimize: Superimpose each correspondence before measuring

        Returns:
            AlignmentResult with the minimum RMSD (inf when unmatchable), the
            number of mappings seen and the mapping that achieved the minimum
        """
        result = AlignmentResult(minimized=minimize)
        test_coords = test.get_coordinates()

        def score_mapping(mapping: Mapping) -> bool:
            result.consider(self._score(mapping, test_coords, minimize), mapping)
            # The minimum needs every symmetric mapping
            return False

        self._searcher.enumerate(self._query, test, score_mapping)

        if result.isomorphic_match:
            self.logger.debug(
                "%r vs %r: %d mapping(s), best RMSD %g",
                self._reference.title,
                test.title,
                result.num_mappings,
                result.rmsd,
            )
        else:
            self.logger.info(
                "No isomorphism between %r and %r", self._reference.title, test.title
            )
        return result

    def compute_rmsd(self, test: MolecularGraph, minimize: bool = False) -> float:
        """
        Minimum heavy-atom RMSD between the reference and ``test``.

        Args:
            test: Canonical test molecule
            minimize: Superimpose each correspondence before measuring

        Returns:
            The RMSD, or ``float("inf")`` if the molecules cannot be matched
        """
        return self.align(test, minimize=minimize).rmsd
