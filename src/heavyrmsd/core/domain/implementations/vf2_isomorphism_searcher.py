"""Isomorphism enumeration backed by networkx's VF2 matcher."""

from typing import Any, Dict, Iterator

import networkx as nx

from ..interfaces.isomorphism_searcher import (
    IsomorphismSearcher,
    TargetView,
    graphs_compatible,
)
from ..models.alignment_result import Mapping
from ..models.molecular_graph import MolecularGraph
from ..models.query import MoleculeQuery


def _label_match(attrs1: Dict[str, Any], attrs2: Dict[str, Any]) -> bool:
    return attrs1["label"] == attrs2["label"]


class VF2IsomorphismSearcher(IsomorphismSearcher):
    """Searcher that delegates the enumeration to networkx's GraphMatcher."""

    def _create_networkx_graph(self, view: TargetView) -> nx.Graph:
        """Convert a target view to a labelled NetworkX graph."""
        G = nx.Graph()

        for idx, label in enumerate(view.atom_labels):
            G.add_node(idx, label=label)

        for (idx1, idx2), label in view.bond_labels.items():
            G.add_edge(idx1, idx2, label=label)

        return G

    def iter_mappings(
        self, query: MoleculeQuery, target: MolecularGraph
    ) -> Iterator[Mapping]:
        view = TargetView.from_molecule(target)
        if not graphs_compatible(query, view):
            return

        matcher = nx.isomorphism.GraphMatcher(
            query.graph,
            self._create_networkx_graph(view),
            node_match=_label_match,
            edge_match=_label_match,
        )
        for mapping in matcher.isomorphisms_iter():
            yield tuple(sorted(mapping.items()))
