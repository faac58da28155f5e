"""Adapters for external libraries and file formats."""

from .compression import open_structure_stream
from .pdb_adapter import PDBAdapter
from .rdkit_adapter import RDKitAdapter

__all__ = [
    "open_structure_stream",
    "PDBAdapter",
    "RDKitAdapter",
]
