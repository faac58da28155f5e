"""Core domain models and interfaces."""

from .models.molecular_graph import MolecularGraph
from .models.query import MoleculeQuery
from .models.alignment_result import AlignmentResult
from .interfaces.isomorphism_searcher import IsomorphismSearcher

__all__ = [
    "MolecularGraph",
    "MoleculeQuery",
    "AlignmentResult",
    "IsomorphismSearcher",
]
