"""Numeric helpers shared by the services."""

from .geometry import (
    apply_rotation,
    center,
    centroid,
    optimal_rotation,
    rms,
    superposed_rms,
    translate,
)

__all__ = [
    "apply_rotation",
    "center",
    "centroid",
    "optimal_rotation",
    "rms",
    "superposed_rms",
    "translate",
]
