"""Adapter reading SDF/MOL and MOL2 records through RDKit."""

import logging
from typing import Iterator, List, Optional, TextIO

from rdkit import Chem

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond, BondType
from ...core.domain.models.molecular_graph import MolecularGraph

SDF_DELIMITER = "$$$$"
MOL2_MOLECULE_TAG = "@<TRIPOS>MOLECULE"

_BOND_TYPES = {
    Chem.BondType.SINGLE: BondType.SINGLE,
    Chem.BondType.DOUBLE: BondType.DOUBLE,
    Chem.BondType.TRIPLE: BondType.TRIPLE,
    Chem.BondType.AROMATIC: BondType.AROMATIC,
}


class RDKitAdapter:
    """Adapter converting RDKit molecules into MolecularGraph objects.

    Records are parsed without sanitization and with hydrogens kept, so the
    structure reaches the canonicalizer as written in the file.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def to_molecular_graph(self, mol: Chem.Mol, title: str = "") -> MolecularGraph:
        """
        Convert an RDKit Mol to a MolecularGraph.

        Args:
            mol: RDKit molecule with at most one relevant conformer
            title: Fallback title when the molecule has no ``_Name``

        Returns:
            MolecularGraph with atoms in RDKit index order
        """
        if mol.HasProp("_Name") and mol.GetProp("_Name").strip():
            title = mol.GetProp("_Name").strip()

        Chem.FastFindRings(mol)
        ring_info = mol.GetRingInfo()

        if mol.GetNumConformers() > 0:
            positions = mol.GetConformer().GetPositions()
        else:
            self.logger.warning("Molecule %r has no coordinates", title)
            positions = [(0.0, 0.0, 0.0)] * mol.GetNumAtoms()

        atoms = []
        for rdatom in mol.GetAtoms():
            idx = rdatom.GetIdx()
            atoms.append(
                Atom(
                    element=rdatom.GetSymbol(),
                    coordinates=tuple(float(c) for c in positions[idx]),
                    aromatic=rdatom.GetIsAromatic(),
                    in_ring=ring_info.NumAtomRings(idx) > 0,
                    serial=idx + 1,
                )
            )

        bonds = []
        for rdbond in mol.GetBonds():
            bonds.append(
                Bond(
                    rdbond.GetBeginAtomIdx(),
                    rdbond.GetEndAtomIdx(),
                    bond_type=_BOND_TYPES.get(rdbond.GetBondType(), BondType.UNKNOWN),
                    bond_order=rdbond.GetBondTypeAsDouble(),
                    aromatic=rdbond.GetIsAromatic(),
                    in_ring=ring_info.NumBondRings(rdbond.GetIdx()) > 0,
                )
            )

        return MolecularGraph(atoms, bonds, title=title)

    @staticmethod
    def _split_records(stream: TextIO, delimiter: str, leading: bool) -> Iterator[str]:
        """Split a text stream into record blocks.

        With ``leading`` the delimiter opens a record (MOL2), otherwise it
        closes one (SDF).
        """
        lines: List[str] = []

        def complete() -> bool:
            if leading:
                return bool(lines) and lines[0].startswith(delimiter)
            return any(line.strip() for line in lines)

        for line in stream:
            if line.startswith(delimiter):
                if leading:
                    if complete():
                        yield "".join(lines)
                    lines = [line]
                else:
                    if complete():
                        yield "".join(lines)
                    lines = []
            else:
                lines.append(line)
        if complete():
            yield "".join(lines)

    def _convert(self, mol: Optional[Chem.Mol], title: str, record: int):
        if mol is None:
            self.logger.warning("Skipping unparsable record %d in %s", record, title)
            return None
        return self.to_molecular_graph(mol, title=title)

    def read_sdf(self, stream: TextIO, title: str = "") -> Iterator[MolecularGraph]:
        """Yield every record of an SDF/MOL stream."""
        for record, block in enumerate(
            self._split_records(stream, SDF_DELIMITER, leading=False), start=1
        ):
            mol = Chem.MolFromMolBlock(block, sanitize=False, removeHs=False)
            graph = self._convert(mol, title, record)
            if graph is not None:
                yield graph

    def read_mol2(self, stream: TextIO, title: str = "") -> Iterator[MolecularGraph]:
        """Yield every molecule of a Tripos MOL2 stream."""
        for record, block in enumerate(
            self._split_records(stream, MOL2_MOLECULE_TAG, leading=True), start=1
        ):
            mol = Chem.MolFromMol2Block(block, sanitize=False, removeHs=False)
            graph = self._convert(mol, title, record)
            if graph is not None:
                yield graph
