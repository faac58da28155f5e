"""Interface for isomorphism enumeration strategies."""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterator, Tuple

from ..models.alignment_result import Mapping
from ..models.molecular_graph import MolecularGraph
from ..models.query import AtomLabel, BondLabel, MoleculeQuery, atom_label, bond_label

MappingCallback = Callable[[Mapping], bool]


@dataclass(frozen=True)
class TargetView:
    """Labels and adjacency of a target molecule, built once per search."""

    atom_labels: Tuple[AtomLabel, ...]
    neighbors: Tuple[FrozenSet[int], ...]
    bond_labels: Dict[Tuple[int, int], BondLabel]

    @classmethod
    def from_molecule(cls, molecule: MolecularGraph) -> "TargetView":
        bond_labels = {bond.key: bond_label(bond) for bond in molecule.bonds}
        return cls(
            atom_labels=tuple(atom_label(atom) for atom in molecule.atoms),
            neighbors=tuple(frozenset(n) for n in molecule.adjacency()),
            bond_labels=bond_labels,
        )

    def bond_label_between(self, idx1: int, idx2: int):
        key = (idx1, idx2) if idx1 <= idx2 else (idx2, idx1)
        return self.bond_labels.get(key)


def graphs_compatible(query: MoleculeQuery, target: TargetView) -> bool:
    """Cheap necessary condition for a full isomorphism to exist."""
    if query.num_atoms != len(target.atom_labels):
        return False
    if query.num_bonds != len(target.bond_labels):
        return False
    if query.label_counts != tuple(sorted(Counter(target.atom_labels).items())):
        return False
    return query.bond_label_counts == tuple(
        sorted(Counter(target.bond_labels.values()).items())
    )


class IsomorphismSearcher(ABC):
    """Abstract base class for isomorphism enumeration strategies."""

    @abstractmethod
    def iter_mappings(
        self, query: MoleculeQuery, target: MolecularGraph
    ) -> Iterator[Mapping]:
        """
        Lazily yield every isomorphism from the query onto the target.

        Args:
            query: Compiled reference query
            target: Canonical test molecule

        Returns:
            Finite, non-restartable iterator of mappings; each mapping is a
            tuple of (query_index, target_index) pairs sorted by query index
        """
        pass

    def enumerate(
        self,
        query: MoleculeQuery,
        target: MolecularGraph,
        callback: MappingCallback,
    ) -> None:
        """
        Invoke ``callback`` once per mapping until it returns a truthy value.

        Args:
            query: Compiled reference query
            target: Canonical test molecule
            callback: Called with each mapping; returning True stops the search
        """
        for mapping in self.iter_mappings(query, target):
            if callback(mapping):
                break
