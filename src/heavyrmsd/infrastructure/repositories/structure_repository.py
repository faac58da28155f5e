# src/heavyrmsd/infrastructure/repositories/structure_repository.py
"""Repository implementation reading molecular structures from files."""

from typing import Callable, Dict, Iterator, List, TextIO
import logging
import os

from ...core.interfaces.molecule_source import MoleculeSource
from ...core.domain.models.molecular_graph import MolecularGraph
from ...core.exceptions import UnreadableInputError
from ..adapters.compression import (
    open_structure_stream,
    structure_extension,
    structure_stem,
)
from ..adapters.pdb_adapter import PDBAdapter
from ..adapters.rdkit_adapter import RDKitAdapter

Reader = Callable[[TextIO, str], Iterator[MolecularGraph]]

FORMATS_BY_EXTENSION = {
    "sdf": "sdf",
    "sd": "sdf",
    "mol": "sdf",
    "mdl": "sdf",
    "mol2": "mol2",
    "ml2": "mol2",
    "pdb": "pdb",
    "ent": "pdb",
}


def detect_format(path: str) -> str:
    """
    Structure format of ``path`` from its extension.

    Raises:
        UnreadableInputError: If the extension is not a supported format
    """
    extension = structure_extension(path)
    try:
        return FORMATS_BY_EXTENSION[extension]
    except KeyError:
        raise UnreadableInputError(
            f"Cannot read molecule format {extension!r}", path
        ) from None


class StructureRepository(MoleculeSource):
    """Repository streaming the molecules of one structure file."""

    def __init__(self, path: str):
        """
        Initialize repository for a structure file.

        Args:
            path: SDF/MOL, MOL2 or PDB file, optionally gzip-compressed

        Raises:
            UnreadableInputError: If the file is missing or of unknown format
        """
        self._path = path
        self._format = detect_format(path)
        if not os.path.isfile(path):
            raise UnreadableInputError("Cannot read file", path)

        self.logger = logging.getLogger(__name__)
        rdkit_adapter = RDKitAdapter()
        self._readers: Dict[str, Reader] = {
            "sdf": rdkit_adapter.read_sdf,
            "mol2": rdkit_adapter.read_mol2,
            "pdb": PDBAdapter().read_pdb,
        }

    @property
    def path(self) -> str:
        return self._path

    @property
    def format(self) -> str:
        return self._format

    def iter_molecules(self) -> Iterator[MolecularGraph]:
        """
        Lazily read the molecules of the file.

        Raises:
            UnreadableInputError: If the stream cannot be opened, decoded or parsed
        """
        reader = self._readers[self._format]
        self.logger.debug("Reading %s as %s", self._path, self._format)

        with open_structure_stream(self._path) as stream:
            try:
                yield from reader(stream, structure_stem(self._path))
            except (OSError, ValueError, EOFError) as e:
                # ValueError covers decoding errors and malformed records
                raise UnreadableInputError(f"Cannot read file ({e})", self._path) from e

    def list(self) -> List[MolecularGraph]:
        """Read every molecule of the file at once."""
        return list(self.iter_molecules())
