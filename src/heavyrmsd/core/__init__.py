"""Core domain models, interfaces and services for heavy-atom RMSD."""

from .domain.models.molecular_graph import MolecularGraph
from .domain.models.alignment_result import AlignmentResult
from .domain.interfaces.isomorphism_searcher import IsomorphismSearcher
from .services.canonicalizer import canonicalize
from .services.correspondence_matcher import CorrespondenceMatcher
from .services.comparison_service import ComparisonOptions, ComparisonService

__all__ = [
    "MolecularGraph",
    "AlignmentResult",
    "IsomorphismSearcher",
    "canonicalize",
    "CorrespondenceMatcher",
    "ComparisonOptions",
    "ComparisonService",
]
