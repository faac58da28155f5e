"""Command-line interfaces and other presentation layer components."""

from .cli.compute_rmsd import main as compute_rmsd_main

__all__ = [
    "compute_rmsd_main",
]
