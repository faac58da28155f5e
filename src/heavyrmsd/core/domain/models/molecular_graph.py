#!/usr/bin/env python3
# src/heavyrmsd/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import List, Optional, Set
import numpy as np
from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecular structure.

    Atoms live in an ordered list and bonds refer to them by index, so the
    graph is an arena of dense integer ids rather than linked nodes.
    """

    def __init__(
        self,
        atoms: Optional[List[Atom]] = None,
        bonds: Optional[List[Bond]] = None,
        title: str = "",
    ):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: List of Atom objects
            bonds: List of Bond objects indexing into ``atoms``
            title: Name of the structure as given by its source file
        """
        self.atoms = atoms if atoms is not None else []
        self.bonds = bonds if bonds is not None else []
        self.title = title

    def __repr__(self) -> str:
        return (
            f"MolecularGraph(title={self.title!r}, atoms={len(self.atoms)}, "
            f"bonds={len(self.bonds)})"
        )

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        return len(self.bonds)

    def is_empty(self) -> bool:
        """True when the graph holds no atoms."""
        return not self.atoms

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the graph.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([atom.coordinates for atom in self.atoms], dtype=float)

    def adjacency(self) -> List[Set[int]]:
        """Neighbour index sets, one per atom."""
        neighbors: List[Set[int]] = [set() for _ in self.atoms]
        for bond in self.bonds:
            neighbors[bond.atom1_index].add(bond.atom2_index)
            neighbors[bond.atom2_index].add(bond.atom1_index)
        return neighbors
