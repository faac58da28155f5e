"""Infrastructure implementations of core interfaces and adapters."""

from .repositories.structure_repository import StructureRepository
from .adapters.pdb_adapter import PDBAdapter
from .adapters.rdkit_adapter import RDKitAdapter

__all__ = [
    "StructureRepository",
    "PDBAdapter",
    "RDKitAdapter",
]
