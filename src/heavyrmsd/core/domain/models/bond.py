#!/usr/bin/env python3
# src/heavyrmsd/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class BondType(Enum):
    """Enumeration of possible bond types."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    AROMATIC = auto()
    UNKNOWN = auto()


@dataclass
class Bond:
    """Represents a chemical bond between two atoms.

    Atoms are referenced by their zero-based position in the owning
    molecule's atom list.
    """

    atom1_index: int
    atom2_index: int
    bond_type: BondType = BondType.SINGLE
    bond_order: float = 1.0
    aromatic: bool = False
    in_ring: bool = False

    @property
    def key(self) -> Tuple[int, int]:
        """Order-independent identifier of the bonded pair."""
        if self.atom1_index <= self.atom2_index:
            return (self.atom1_index, self.atom2_index)
        return (self.atom2_index, self.atom1_index)
