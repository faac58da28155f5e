#!/usr/bin/env python3
# src/heavyrmsd/infrastructure/adapters/pdb_adapter.py

"""
Adapter reading PDB files through Biopython.

Biopython does not keep CONECT records, so connectivity is read from the
raw text. Files without any CONECT record get bonds perceived from
interatomic distances and covalent radii.
"""

import io
import logging
from typing import Dict, Iterator, List, Set, TextIO, Tuple

import numpy as np
from Bio.PDB.PDBParser import PDBParser
from rdkit import Chem

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond
from ...core.domain.models.molecular_graph import MolecularGraph

# Slack added to the sum of covalent radii when perceiving bonds (Angstroms)
CONNECTIVITY_TOLERANCE = 0.45
# Closer pairs are overlapping alternate locations, not bonds
MIN_BOND_DISTANCE = 0.4
DEFAULT_COVALENT_RADIUS = 0.76
# Elements through lawrencium, all present in RDKit's periodic table
_MAX_ATOMIC_NUMBER = 103


class PDBAdapter:
    """Adapter converting PDB models into MolecularGraph objects."""

    def __init__(self):
        self._parser = PDBParser(QUIET=True)
        periodic_table = Chem.GetPeriodicTable()
        self._covalent_radii: Dict[str, float] = {
            periodic_table.GetElementSymbol(z).upper(): periodic_table.GetRcovalent(z)
            for z in range(1, _MAX_ATOMIC_NUMBER + 1)
        }
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _parse_connect_line(line: str) -> List[int]:
        """Parse a CONECT record into serial numbers, fixed columns first."""
        fields = [line[start : start + 5] for start in range(6, 31, 5)]
        try:
            return [int(field) for field in fields if field.strip()]
        except ValueError:
            pass
        # Some writers ignore the column layout
        try:
            return [int(x) for x in line.split()[1:]]
        except ValueError:
            raise ValueError(f"Malformed CONECT record {line.rstrip()!r}") from None

    @staticmethod
    def _parse_title(lines: List[str], fallback: str) -> str:
        for line in lines:
            if line.startswith("COMPND") and line[10:].strip():
                return line[10:].strip()
        return fallback

    def _covalent_radius(self, element: str) -> float:
        # Unknown symbols stay out of RDKit, which prints a C++ trace for them
        radius = self._covalent_radii.get(element.strip().upper())
        if radius is None:
            self.logger.debug("No covalent radius for %r, using default", element)
            return DEFAULT_COVALENT_RADIUS
        return radius

    def perceive_bonds(self, atoms: List[Atom]) -> List[Bond]:
        """
        Infer bonds between atoms based on distance.

        Two atoms are bonded when their distance is below the sum of their
        covalent radii plus ``CONNECTIVITY_TOLERANCE``.

        Args:
            atoms: Atoms with coordinates and elements

        Returns:
            List of Bond objects
        """
        if len(atoms) < 2:
            return []

        coords = np.array([atom.coordinates for atom in atoms], dtype=float)
        radii = np.array([self._covalent_radius(atom.element) for atom in atoms])

        distances = np.linalg.norm(coords[:, None, :] - coords[None, :, :], axis=-1)
        cutoffs = radii[:, None] + radii[None, :] + CONNECTIVITY_TOLERANCE
        bonded = (distances < cutoffs) & (distances > MIN_BOND_DISTANCE)

        idx1, idx2 = np.nonzero(np.triu(bonded, k=1))
        return [Bond(int(i), int(j)) for i, j in zip(idx1, idx2)]

    @staticmethod
    def _connect_bonds(
        atoms: List[Atom], connectivity: List[List[int]]
    ) -> List[Bond]:
        """Translate CONECT serial lists into bonds between present atoms."""
        atom_indices: Dict[int, int] = {
            atom.serial: i for i, atom in enumerate(atoms) if atom.serial is not None
        }
        seen: Set[Tuple[int, int]] = set()
        bonds = []
        for serials in connectivity:
            if len(serials) < 2 or serials[0] not in atom_indices:
                continue
            origin = atom_indices[serials[0]]
            for partner in serials[1:]:
                if partner not in atom_indices:
                    continue
                target = atom_indices[partner]
                key = (min(origin, target), max(origin, target))
                if origin == target or key in seen:
                    continue
                seen.add(key)
                bonds.append(Bond(key[0], key[1]))
        return bonds

    def read_pdb(self, stream: TextIO, title: str = "") -> Iterator[MolecularGraph]:
        """
        Yield one MolecularGraph per MODEL of a PDB stream.

        Args:
            stream: Text stream of PDB records
            title: Title used when the file carries no COMPND record

        Returns:
            Iterator over the models in file order
        """
        text = stream.read()
        lines = text.splitlines()
        connectivity = [
            self._parse_connect_line(line) for line in lines if line.startswith("CONECT")
        ]
        title = self._parse_title(lines, title)

        structure = self._parser.get_structure(title or "structure", io.StringIO(text))

        for model in structure:
            atoms = [
                Atom(
                    element=(atom.element or atom.get_name()[:1]).strip(),
                    coordinates=tuple(float(c) for c in atom.coord),
                    atom_name=atom.get_name(),
                    serial=atom.serial_number,
                )
                for atom in model.get_atoms()
            ]

            if connectivity:
                bonds = self._connect_bonds(atoms, connectivity)
            else:
                bonds = self.perceive_bonds(atoms)
                self.logger.info(
                    "No CONECT records in %r; perceived %d bonds", title, len(bonds)
                )

            yield MolecularGraph(atoms, bonds, title=title)
