# src/heavyrmsd/core/utils/geometry.py

"""
Numeric primitives over (N, 3) point sets.

Nothing in here knows about molecules: callers pass plain coordinate arrays
and receive new arrays back. Inputs are never modified in place.
"""

import numpy as np

from ..exceptions import DimensionMismatchError

# Covariance matrices whose largest singular value falls below this are
# treated as zero, leaving the rotation undetermined.
_DEGENERATE_TOLERANCE = 1e-12


def _as_points(points: np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise DimensionMismatchError(arr.shape, (arr.shape[0] if arr.ndim else 0, 3))
    return arr


def _check_parallel(points_a: np.ndarray, points_b: np.ndarray) -> None:
    if points_a.shape != points_b.shape:
        raise DimensionMismatchError(points_a.shape, points_b.shape)


def centroid(points: np.ndarray) -> np.ndarray:
    """Mean position of a point set."""
    arr = _as_points(points)
    if len(arr) == 0:
        raise ValueError("Cannot compute the centroid of an empty point set")
    return arr.mean(axis=0)


def translate(points: np.ndarray, offset: np.ndarray) -> np.ndarray:
    """Shift every point by ``offset``."""
    return _as_points(points) + np.asarray(offset, dtype=float)


def center(points: np.ndarray) -> np.ndarray:
    """Translate a point set so that its centroid sits at the origin."""
    return translate(points, -centroid(points))


def optimal_rotation(reference: np.ndarray, test: np.ndarray) -> np.ndarray:
    """
    Rotation that best superimposes ``test`` onto ``reference``.

    Both point sets must already be centred at the origin. The rotation is
    the least-squares (Kabsch) solution restricted to proper rotations, so
    a reflected mirror image is never produced.

    Args:
        reference: Centred reference coordinates, shape (N, 3)
        test: Centred test coordinates in the same atom order, shape (N, 3)

    Returns:
        A 3x3 rotation matrix R such that ``apply_rotation(test, R)`` lies
        as close as possible to ``reference``. With a single point, or a
        vanishing covariance, the identity is returned.
    """
    ref = _as_points(reference)
    tst = _as_points(test)
    _check_parallel(ref, tst)

    if len(ref) < 2:
        return np.eye(3)

    # Covariance of the moving set against the fixed set
    covariance = np.dot(tst.T, ref)
    U, S, Vt = np.linalg.svd(covariance)
    if S[0] < _DEGENERATE_TOLERANCE:
        return np.eye(3)

    # Flip the weakest axis when the best orthogonal fit is a reflection
    d = 1.0 if np.linalg.det(np.dot(Vt.T, U.T)) > 0 else -1.0
    correction = np.diag([1.0, 1.0, d])

    return np.dot(Vt.T, np.dot(correction, U.T))


def apply_rotation(points: np.ndarray, rotation: np.ndarray) -> np.ndarray:
    """Rotate every point about the origin."""
    arr = _as_points(points)
    return np.dot(arr, np.asarray(rotation, dtype=float).T)


def rms(points_a: np.ndarray, points_b: np.ndarray) -> float:
    """
    Root-mean-square deviation between two parallel point sets.

    Raises:
        DimensionMismatchError: If the sets differ in size or are not (N, 3)
        ValueError: If the sets are empty
    """
    a = _as_points(points_a)
    b = _as_points(points_b)
    _check_parallel(a, b)
    if len(a) == 0:
        raise ValueError("Cannot compute the RMSD of empty point sets")

    return float(np.sqrt(np.sum((a - b) ** 2) / len(a)))


def superposed_rms(reference: np.ndarray, test: np.ndarray) -> float:
    """RMSD after centring both sets and rotating ``test`` onto ``reference``."""
    ref = center(reference)
    tst = center(test)
    rotation = optimal_rotation(ref, tst)
    return rms(ref, apply_rotation(tst, rotation))
