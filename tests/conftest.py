"""Test configuration and fixtures for heavyrmsd tests."""

import itertools
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pytest

from heavyrmsd.core.domain.models.atom import Atom
from heavyrmsd.core.domain.models.bond import Bond
from heavyrmsd.core.domain.models.molecular_graph import MolecularGraph


def make_molecule(
    elements: Sequence[str],
    coords: Sequence[Sequence[float]],
    bonds: Sequence[Tuple[int, int]],
    title: str = "mol",
) -> MolecularGraph:
    """Build a MolecularGraph from plain lists."""
    atoms = [
        Atom(element=element, coordinates=tuple(float(c) for c in xyz))
        for element, xyz in zip(elements, coords)
    ]
    return MolecularGraph(atoms, [Bond(i, j) for i, j in bonds], title=title)


def with_coordinates(molecule: MolecularGraph, coords: np.ndarray, title: Optional[str] = None) -> MolecularGraph:
    """Copy of ``molecule`` with new coordinates."""
    return make_molecule(
        [atom.element for atom in molecule.atoms],
        coords,
        [(b.atom1_index, b.atom2_index) for b in molecule.bonds],
        title=title or molecule.title,
    )


def permuted(molecule: MolecularGraph, order: Sequence[int]) -> MolecularGraph:
    """Reorder atoms so that new atom i is old atom ``order[i]``; positions kept."""
    new_index = {old: new for new, old in enumerate(order)}
    return make_molecule(
        [molecule.atoms[old].element for old in order],
        [molecule.atoms[old].coordinates for old in order],
        [(new_index[b.atom1_index], new_index[b.atom2_index]) for b in molecule.bonds],
        title=molecule.title,
    )


def rotation_matrix(axis: Sequence[float], degrees: float) -> np.ndarray:
    """Proper rotation about ``axis`` (Rodrigues formula)."""
    axis = np.asarray(axis, dtype=float)
    axis = axis / np.linalg.norm(axis)
    theta = math.radians(degrees)
    K = np.array(
        [
            [0.0, -axis[2], axis[1]],
            [axis[2], 0.0, -axis[0]],
            [-axis[1], axis[0], 0.0],
        ]
    )
    return np.eye(3) + math.sin(theta) * K + (1 - math.cos(theta)) * K @ K


def transform(coords: np.ndarray, rotation: np.ndarray, shift: Sequence[float]) -> np.ndarray:
    return np.asarray(coords, dtype=float) @ rotation.T + np.asarray(shift, dtype=float)


def brute_force_rmsd(reference: MolecularGraph, test: MolecularGraph) -> float:
    """Minimum raw RMSD over all bond-preserving permutations (small graphs only)."""
    ref_bonds = {frozenset((b.atom1_index, b.atom2_index)) for b in reference.bonds}
    test_bonds = {frozenset((b.atom1_index, b.atom2_index)) for b in test.bonds}
    ref_coords = reference.get_coordinates()
    test_coords = test.get_coordinates()
    best = math.inf
    for perm in itertools.permutations(range(test.num_atoms)):
        if any(
            reference.atoms[i].element != test.atoms[perm[i]].element
            for i in range(reference.num_atoms)
        ):
            continue
        if {frozenset((perm[i], perm[j])) for i, j in map(tuple, ref_bonds)} != test_bonds:
            continue
        diff = ref_coords - test_coords[list(perm)]
        best = min(best, float(np.sqrt(np.sum(diff ** 2) / len(diff))))
    return best


def ring_coordinates(size: int, radius: float = 1.2) -> List[Tuple[float, float, float]]:
    return [
        (
            radius * math.cos(2 * math.pi * k / size),
            radius * math.sin(2 * math.pi * k / size),
            0.0,
        )
        for k in range(size)
    ]


def ring_bonds(size: int) -> List[Tuple[int, int]]:
    return [(k, (k + 1) % size) for k in range(size)]


@pytest.fixture
def ring5() -> MolecularGraph:
    """Planar five-membered carbon ring."""
    return make_molecule(["C"] * 5, ring_coordinates(5), ring_bonds(5), title="ring5")


@pytest.fixture
def ring6() -> MolecularGraph:
    """Planar six-membered carbon ring."""
    return make_molecule(["C"] * 6, ring_coordinates(6, 1.4), ring_bonds(6), title="ring6")


@pytest.fixture
def tert_butylamine() -> MolecularGraph:
    """N-C(CH3)3 heavy-atom skeleton with three equivalent methyl carbons.

    The methyl positions are deliberately irregular so that each of the six
    automorphic mappings gives a different RMSD against a relabelled copy.
    """
    return make_molecule(
        ["N", "C", "C", "C", "C"],
        [
            (0.0, 0.0, 1.47),
            (0.0, 0.0, 0.0),
            (1.45, 0.0, -0.55),
            (-0.70, 1.30, -0.45),
            (-0.80, -1.20, -0.60),
        ],
        [(0, 1), (1, 2), (1, 3), (1, 4)],
        title="tBuNH2",
    )


@pytest.fixture
def phenol_with_hydrogens() -> MolecularGraph:
    """Phenol heavy atoms plus the hydroxyl and ring hydrogens."""
    ring = ring_coordinates(6, 1.39)
    elements = ["C"] * 6 + ["O", "H"] + ["H"] * 5
    coords = list(ring)
    coords.append((2.75, 0.0, 0.0))
    coords.append((3.10, 0.90, 0.0))
    for k in range(1, 6):
        x, y, _ = ring[k]
        coords.append((x * 1.78, y * 1.78, 0.0))
    bonds = ring_bonds(6) + [(0, 6), (6, 7)] + [(k, 7 + k) for k in range(1, 6)]
    return make_molecule(elements, coords, bonds, title="phenol")
