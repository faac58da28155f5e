"""Normalization of parsed molecules for connectivity-only matching."""

import logging
from typing import Dict, List

from ..domain.models.atom import Atom
from ..domain.models.bond import Bond, BondType
from ..domain.models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


def canonicalize(molecule: MolecularGraph) -> MolecularGraph:
    """
    Return a canonical copy of ``molecule`` for heavy-atom matching.

    Hydrogens and their bonds are dropped, aromatic flags are cleared, ring
    membership is set on every atom and bond, and every bond becomes a
    single bond. Aromaticity and ring perception can differ between two
    files describing the same compound, so neither may take part in the
    isomorphism compatibility test.

    Args:
        molecule: Parsed molecule; left untouched

    Returns:
        New MolecularGraph whose bonds index into its own heavy-atom list
    """
    index_map: Dict[int, int] = {}
    atoms: List[Atom] = []

    for old_index, atom in enumerate(molecule.atoms):
        if atom.is_hydrogen:
            continue
        index_map[old_index] = len(atoms)
        atoms.append(
            Atom(
                element=atom.element.strip().upper(),
                coordinates=tuple(float(c) for c in atom.coordinates),
                aromatic=False,
                in_ring=True,
                atom_name=atom.atom_name,
                serial=atom.serial,
            )
        )

    bonds: List[Bond] = []
    seen = set()
    for bond in molecule.bonds:
        idx1 = index_map.get(bond.atom1_index)
        idx2 = index_map.get(bond.atom2_index)
        if idx1 is None or idx2 is None:
            continue
        key = (min(idx1, idx2), max(idx1, idx2))
        if key in seen:
            continue
        seen.add(key)
        bonds.append(
            Bond(
                idx1,
                idx2,
                bond_type=BondType.SINGLE,
                bond_order=1.0,
                aromatic=False,
                in_ring=True,
            )
        )

    logger.debug(
        "Canonicalized %r: %d -> %d atoms, %d -> %d bonds",
        molecule.title,
        molecule.num_atoms,
        len(atoms),
        molecule.num_bonds,
        len(bonds),
    )
    return MolecularGraph(atoms, bonds, title=molecule.title)
