"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .molecular_graph import MolecularGraph
from .query import MoleculeQuery, atom_label, bond_label
from .alignment_result import AlignmentResult, Mapping

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "MoleculeQuery",
    "atom_label",
    "bond_label",
    "AlignmentResult",
    "Mapping",
]
