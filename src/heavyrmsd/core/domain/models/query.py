"""Domain model for a compiled graph-matching query."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Hashable, Mapping, Optional, Tuple
import networkx as nx

from .atom import Atom
from .bond import Bond

AtomLabel = Tuple[str, bool, bool]
BondLabel = Tuple[float, bool, bool]


def atom_label(atom: Atom) -> AtomLabel:
    """Compatibility label of an atom: element, aromatic flag, ring flag."""
    return (atom.element.strip().upper(), atom.aromatic, atom.in_ring)


def bond_label(bond: Bond) -> BondLabel:
    """Compatibility label of a bond: order, aromatic flag, ring flag."""
    return (float(bond.bond_order), bond.aromatic, bond.in_ring)


@dataclass(frozen=True)
class MoleculeQuery:
    """Immutable graph pattern compiled from a canonical reference molecule.

    Attributes:
        atom_labels: Label of every query atom, by atom index
        neighbors: Neighbour index set of every query atom
        bond_labels: Label of every bond keyed by ordered index pair
        label_counts: Sorted (label, count) multiset of atom labels
        bond_label_counts: Sorted (label, count) multiset of bond labels
        order: Atom indices in the order the search assigns them
        parents: For each position in ``order``, an already placed neighbour
            used to generate candidates, or None for a component seed
        back_neighbors: For each position in ``order``, every already placed
            neighbour that constrains the candidate
        graph: Frozen networkx view of the same pattern
    """

    atom_labels: Tuple[AtomLabel, ...]
    neighbors: Tuple[FrozenSet[int], ...]
    bond_labels: Mapping[Tuple[int, int], BondLabel]
    label_counts: Tuple[Tuple[Hashable, int], ...]
    bond_label_counts: Tuple[Tuple[Hashable, int], ...]
    order: Tuple[int, ...]
    parents: Tuple[Optional[int], ...]
    back_neighbors: Tuple[Tuple[int, ...], ...]
    graph: nx.Graph

    @property
    def num_atoms(self) -> int:
        return len(self.atom_labels)

    @property
    def num_bonds(self) -> int:
        return len(self.bond_labels)

    def degree(self, index: int) -> int:
        return len(self.neighbors[index])

    def bond_label_between(self, idx1: int, idx2: int) -> Optional[BondLabel]:
        key = (idx1, idx2) if idx1 <= idx2 else (idx2, idx1)
        return self.bond_labels.get(key)

    def as_dict(self) -> Dict[str, int]:
        """Small summary used in log messages."""
        return {"atoms": self.num_atoms, "bonds": self.num_bonds}
