"""Domain interfaces."""

from .isomorphism_searcher import (
    IsomorphismSearcher,
    MappingCallback,
    TargetView,
    graphs_compatible,
)

__all__ = [
    "IsomorphismSearcher",
    "MappingCallback",
    "TargetView",
    "graphs_compatible",
]
