"""Exhaustive backtracking enumeration of molecular graph isomorphisms."""

import logging
import time
from typing import Iterator, List, Optional

from ..interfaces.isomorphism_searcher import (
    IsomorphismSearcher,
    TargetView,
    graphs_compatible,
)
from ..models.alignment_result import Mapping
from ..models.molecular_graph import MolecularGraph
from ..models.query import MoleculeQuery
from ...exceptions import SearchTimeoutError

# Number of search steps between two deadline checks
_DEADLINE_STRIDE = 256


class BacktrackingIsomorphismSearcher(IsomorphismSearcher):
    """Depth-first search over the query's precompiled atom order.

    Query atoms are assigned in ``query.order``. Candidates for an atom come
    from the target neighbours of its already assigned parent, and must agree
    in label and degree and carry a compatible bond to every other assigned
    neighbour. Because both graphs have the same number of bonds, a complete
    assignment is a full isomorphism.

    The search uses an explicit stack of candidate iterators, and all of its
    state lives inside one generator, so a searcher instance can serve
    concurrent searches.
    """

    def __init__(self, timeout: Optional[float] = None):
        """Initialize searcher.

        Args:
            timeout: Maximum time in seconds for one enumeration, or None
        """
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def iter_mappings(
        self, query: MoleculeQuery, target: MolecularGraph
    ) -> Iterator[Mapping]:
        view = TargetView.from_molecule(target)
        if not graphs_compatible(query, view):
            self.logger.debug(
                "Label multisets of query and %r differ; no mappings", target.title
            )
            return

        n_atoms = query.num_atoms
        assignment: List[int] = [-1] * n_atoms
        used = bytearray(n_atoms)
        deadline = (
            time.monotonic() + self.timeout if self.timeout is not None else None
        )

        def candidates(pos: int) -> Iterator[int]:
            atom = query.order[pos]
            parent = query.parents[pos]
            label = query.atom_labels[atom]
            degree = query.degree(atom)
            back = query.back_neighbors[pos]
            if parent is None:
                pool = range(n_atoms)
            else:
                pool = sorted(view.neighbors[assignment[parent]])

            for candidate in pool:
                if used[candidate]:
                    continue
                if view.atom_labels[candidate] != label:
                    continue
                if len(view.neighbors[candidate]) != degree:
                    continue
                if all(
                    view.bond_label_between(assignment[placed], candidate)
                    == query.bond_label_between(placed, atom)
                    for placed in back
                ):
                    yield candidate

        found = 0
        steps = 0
        stack = [candidates(0)]
        while stack:
            steps += 1
            if deadline is not None and steps % _DEADLINE_STRIDE == 0:
                if time.monotonic() > deadline:
                    raise SearchTimeoutError(self.timeout, found)

            pos = len(stack) - 1
            atom = query.order[pos]
            previous = assignment[atom]
            if previous != -1:
                used[previous] = 0
                assignment[atom] = -1

            candidate = next(stack[-1], None)
            if candidate is None:
                stack.pop()
                continue

            assignment[atom] = candidate
            used[candidate] = 1
            if pos + 1 == n_atoms:
                found += 1
                yield tuple(enumerate(assignment))
            else:
                stack.append(candidates(pos + 1))

        self.logger.debug("Enumerated %d mapping(s) onto %r", found, target.title)
