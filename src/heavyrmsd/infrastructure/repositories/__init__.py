"""File-backed molecule sources."""

from .structure_repository import StructureRepository, detect_format

__all__ = ["StructureRepository", "detect_format"]
