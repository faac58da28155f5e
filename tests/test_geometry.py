import numpy as np
import pytest

from heavyrmsd.core.exceptions import DimensionMismatchError
from heavyrmsd.core.utils import geometry

from conftest import rotation_matrix, transform

POINTS = np.array(
    [
        [0.0, 0.0, 0.0],
        [1.5, 0.0, 0.0],
        [1.9, 1.4, 0.0],
        [0.4, 2.0, 0.9],
        [-0.8, 0.7, -1.1],
    ]
)


def test_centroid_and_center():
    c = geometry.centroid(POINTS)
    assert c == pytest.approx(POINTS.mean(axis=0))

    centered = geometry.center(POINTS)
    assert geometry.centroid(centered) == pytest.approx(np.zeros(3), abs=1e-12)


def test_translate_does_not_modify_input():
    original = POINTS.copy()
    shifted = geometry.translate(POINTS, [1.0, 2.0, 3.0])
    assert np.allclose(shifted - POINTS, [1.0, 2.0, 3.0])
    assert np.array_equal(POINTS, original)


def test_optimal_rotation_recovers_rigid_motion():
    R = rotation_matrix([0.3, -1.0, 0.5], 73.0)
    moved = transform(POINTS, R, [4.0, -2.0, 0.5])

    ref = geometry.center(POINTS)
    tst = geometry.center(moved)
    rotation = geometry.optimal_rotation(ref, tst)

    assert np.linalg.det(rotation) == pytest.approx(1.0)
    assert np.allclose(rotation, R.T, atol=1e-9)
    assert geometry.rms(ref, geometry.apply_rotation(tst, rotation)) < 1e-9


def test_optimal_rotation_never_reflects():
    mirrored = POINTS * np.array([1.0, 1.0, -1.0])

    ref = geometry.center(POINTS)
    tst = geometry.center(mirrored)
    rotation = geometry.optimal_rotation(ref, tst)

    assert np.linalg.det(rotation) == pytest.approx(1.0)
    # A non-planar set cannot be rotated onto its mirror image
    assert geometry.rms(ref, geometry.apply_rotation(tst, rotation)) > 0.1


def test_optimal_rotation_single_point_is_identity():
    point = np.zeros((1, 3))
    assert np.array_equal(geometry.optimal_rotation(point, point), np.eye(3))


def test_optimal_rotation_two_points():
    ref = geometry.center(np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]))
    tst = geometry.center(np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0]]))
    rotation = geometry.optimal_rotation(ref, tst)

    assert np.linalg.det(rotation) == pytest.approx(1.0)
    assert geometry.rms(ref, geometry.apply_rotation(tst, rotation)) < 1e-9


def test_rms_value():
    a = np.zeros((2, 3))
    b = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
    assert geometry.rms(a, b) == pytest.approx(np.sqrt(2.5))


def test_rms_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        geometry.rms(np.zeros((3, 3)), np.zeros((4, 3)))

    with pytest.raises(DimensionMismatchError):
        geometry.rms(np.zeros((3, 2)), np.zeros((3, 2)))


def test_rms_empty():
    with pytest.raises(ValueError):
        geometry.rms(np.zeros((0, 3)), np.zeros((0, 3)))


def test_superposed_rms_is_not_larger_than_raw():
    R = rotation_matrix([1.0, 1.0, 0.0], 20.0)
    noisy = transform(POINTS, R, [0.5, 0.0, 0.0]) + np.array(
        [[0.1, 0.0, 0.0], [0.0, -0.1, 0.0], [0.0, 0.0, 0.2], [0.05, 0.05, 0.0], [0.0, 0.0, 0.0]]
    )
    assert geometry.superposed_rms(POINTS, noisy) <= geometry.rms(POINTS, noisy)
    assert geometry.superposed_rms(POINTS, noisy) < 0.2
