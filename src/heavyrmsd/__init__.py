"""Heavy-atom RMSD between chemically identical structures."""

from .core import (
    AlignmentResult,
    ComparisonOptions,
    ComparisonService,
    CorrespondenceMatcher,
    MolecularGraph,
    canonicalize,
)
from .core.exceptions import (
    ConstructionError,
    DimensionMismatchError,
    HeavyRMSDError,
    SearchTimeoutError,
    UnreadableInputError,
)

__version__ = "0.1.0"

__all__ = [
    "AlignmentResult",
    "ComparisonOptions",
    "ComparisonService",
    "CorrespondenceMatcher",
    "MolecularGraph",
    "canonicalize",
    "ConstructionError",
    "DimensionMismatchError",
    "HeavyRMSDError",
    "SearchTimeoutError",
    "UnreadableInputError",
]
