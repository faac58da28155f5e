"""Custom exceptions for heavy-atom RMSD computation."""

from typing import Optional, Tuple


class HeavyRMSDError(Exception):
    """Base exception for all heavyrmsd errors."""

    pass


class UnreadableInputError(HeavyRMSDError, OSError):
    """Structure file is missing, unreadable or of an unknown format."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path is not None:
            super().__init__(f"{message}: {path}")
        else:
            super().__init__(message)


class ConstructionError(HeavyRMSDError):
    """A reference molecule could not be compiled into a query."""

    pass


class DimensionMismatchError(HeavyRMSDError, ValueError):
    """Two coordinate sets that must be parallel have different shapes."""

    def __init__(self, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]):
        self.shape_a = shape_a
        self.shape_b = shape_b
        super().__init__(
            f"Coordinate sets have incompatible shapes {shape_a} and {shape_b}"
        )


class SearchTimeoutError(HeavyRMSDError, TimeoutError):
    """Isomorphism enumeration exceeded its deadline."""

    def __init__(self, timeout: float, mappings_found: int = 0):
        self.timeout = timeout
        self.mappings_found = mappings_found
        super().__init__(
            f"Isomorphism search exceeded {timeout:g}s "
            f"after {mappings_found} mapping(s)"
        )
