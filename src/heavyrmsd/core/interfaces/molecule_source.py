"""Abstract source of molecules read one at a time."""

from abc import ABC, abstractmethod
from typing import Iterator

from ..domain.models.molecular_graph import MolecularGraph


class MoleculeSource(ABC):
    """
    Read-only stream of molecules.

    Implementations parse a structure file lazily so that large multi-record
    files never need to be held in memory at once.
    """

    @abstractmethod
    def iter_molecules(self) -> Iterator[MolecularGraph]:
        """Yield the molecules of the source in file order."""
        pass

    def __iter__(self) -> Iterator[MolecularGraph]:
        return self.iter_molecules()
