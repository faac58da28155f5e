"""Domain model for structure alignment results."""

from dataclasses import dataclass
from typing import Optional, Tuple
import math

Mapping = Tuple[Tuple[int, int], ...]


@dataclass
class AlignmentResult:
    """Contains the best RMSD found across all atom correspondences."""

    rmsd: float = math.inf
    num_mappings: int = 0
    best_mapping: Optional[Mapping] = None
    minimized: bool = False

    @property
    def matched_atoms(self) -> int:
        return len(self.best_mapping) if self.best_mapping else 0

    @property
    def isomorphic_match(self) -> bool:
        """False when the two graphs admitted no correspondence."""
        return self.num_mappings > 0

    def consider(self, rmsd: float, mapping: Mapping) -> None:
        """Record one scored mapping, keeping the running minimum."""
        self.num_mappings += 1
        if rmsd < self.rmsd:
            self.rmsd = rmsd
            self.best_mapping = mapping
