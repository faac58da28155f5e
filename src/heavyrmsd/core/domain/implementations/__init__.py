"""Concrete isomorphism search strategies."""

from .backtracking_isomorphism_searcher import BacktrackingIsomorphismSearcher
from .vf2_isomorphism_searcher import VF2IsomorphismSearcher

SEARCHERS = {
    "backtracking": BacktrackingIsomorphismSearcher,
    "vf2": VF2IsomorphismSearcher,
}

__all__ = [
    "BacktrackingIsomorphismSearcher",
    "VF2IsomorphismSearcher",
    "SEARCHERS",
]
