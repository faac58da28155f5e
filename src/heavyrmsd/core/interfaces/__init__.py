"""Interfaces to collaborators outside the core."""

from .molecule_source import MoleculeSource

__all__ = ["MoleculeSource"]
