"""Compilation of a canonical reference molecule into a matching query."""

import logging
from collections import Counter, deque
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

import networkx as nx

from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.query import BondLabel, MoleculeQuery, atom_label, bond_label
from ..exceptions import ConstructionError

logger = logging.getLogger(__name__)


def _search_order(
    labels: List, neighbors: List[frozenset]
) -> Tuple[List[int], List[Optional[int]]]:
    """Breadth-first atom order, each component seeded by its rarest atom."""
    frequency = Counter(labels)

    def priority(idx: int) -> Tuple[int, int, int]:
        return (frequency[labels[idx]], -len(neighbors[idx]), idx)

    order: List[int] = []
    parents: List[Optional[int]] = []
    parent_of: Dict[int, Optional[int]] = {}
    remaining = set(range(len(labels)))

    while remaining:
        seed = min(remaining, key=priority)
        parent_of[seed] = None
        remaining.discard(seed)
        queue = deque([seed])
        while queue:
            current = queue.popleft()
            order.append(current)
            parents.append(parent_of[current])
            for neighbor in sorted(neighbors[current], key=priority):
                if neighbor in remaining:
                    remaining.discard(neighbor)
                    parent_of[neighbor] = current
                    queue.append(neighbor)

    return order, parents


def compile_query(molecule: MolecularGraph) -> MoleculeQuery:
    """
    Compile a canonical molecule into an immutable MoleculeQuery.

    Args:
        molecule: Reference molecule, already canonicalized

    Returns:
        Compiled query

    Raises:
        ConstructionError: If the molecule is empty or its bonds are malformed
    """
    if molecule.is_empty():
        raise ConstructionError(
            f"Cannot compile a query from empty molecule {molecule.title!r}"
        )

    n_atoms = molecule.num_atoms
    labels = [atom_label(atom) for atom in molecule.atoms]
    adjacency: List[set] = [set() for _ in range(n_atoms)]
    bond_labels: Dict[Tuple[int, int], BondLabel] = {}

    for bond in molecule.bonds:
        idx1, idx2 = bond.atom1_index, bond.atom2_index
        if not (0 <= idx1 < n_atoms and 0 <= idx2 < n_atoms):
            raise ConstructionError(
                f"Bond ({idx1}, {idx2}) references a missing atom in "
                f"{molecule.title!r}"
            )
        if idx1 == idx2:
            raise ConstructionError(
                f"Atom {idx1} is bonded to itself in {molecule.title!r}"
            )
        if bond.key in bond_labels:
            raise ConstructionError(
                f"Duplicate bond ({idx1}, {idx2}) in {molecule.title!r}"
            )
        bond_labels[bond.key] = bond_label(bond)
        adjacency[idx1].add(idx2)
        adjacency[idx2].add(idx1)

    neighbors = [frozenset(n) for n in adjacency]
    order, parents = _search_order(labels, neighbors)
    position = {atom: pos for pos, atom in enumerate(order)}
    back_neighbors = tuple(
        tuple(sorted(n for n in neighbors[atom] if position[n] < pos))
        for pos, atom in enumerate(order)
    )

    graph = nx.Graph()
    for idx, label in enumerate(labels):
        graph.add_node(idx, label=label)
    for (idx1, idx2), label in bond_labels.items():
        graph.add_edge(idx1, idx2, label=label)

    query = MoleculeQuery(
        atom_labels=tuple(labels),
        neighbors=tuple(neighbors),
        bond_labels=MappingProxyType(bond_labels),
        label_counts=tuple(sorted(Counter(labels).items())),
        bond_label_counts=tuple(sorted(Counter(bond_labels.values()).items())),
        order=tuple(order),
        parents=tuple(parents),
        back_neighbors=back_neighbors,
        graph=nx.freeze(graph),
    )
    logger.debug("Compiled query for %r: %s", molecule.title, query.as_dict())
    return query
