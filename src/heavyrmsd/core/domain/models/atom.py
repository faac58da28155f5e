#!/usr/bin/env python3
# src/heavyrmsd/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass
class Atom:
    """Represents an atom in a molecular structure."""

    element: str
    coordinates: Tuple[float, float, float]
    aromatic: bool = False
    in_ring: bool = False
    atom_name: str = ""
    serial: Optional[int] = None

    @property
    def is_hydrogen(self) -> bool:
        """Whether this atom is a hydrogen (any isotope)."""
        return self.element.strip().upper() in ("H", "D", "T")
