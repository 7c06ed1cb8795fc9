"""Тести cp3d.geom: Pt і відстань."""

from __future__ import annotations

from math import sqrt

import numpy as np
import pytest

from cp3d.geom import MAX_COORD, Pt, as_points, distance


def test_pt_is_immutable_and_iterable():
    p = Pt(1, 2, 3)
    assert tuple(p) == (1, 2, 3)
    with pytest.raises(Exception):
        p.x = 5  # frozen dataclass


@pytest.mark.parametrize("coords", [(-1, 0, 0), (0, -5, 0), (0, 0, -1)])
def test_pt_rejects_negative(coords):
    with pytest.raises(ValueError, match="non-negative"):
        Pt(*coords)


@pytest.mark.parametrize("coords", [(1.5, 0, 0), ("1", 0, 0), (True, 0, 0)])
def test_pt_rejects_non_integers(coords):
    with pytest.raises(ValueError, match="integer"):
        Pt(*coords)


def test_distance_345():
    assert distance(Pt(0, 0, 0), Pt(3, 4, 0)) == 5.0


def test_distance_no_unsigned_wraparound():
    """Менша мінус більша координата не «перекручується»."""
    a = Pt(0, 0, 0)
    b = Pt(2**40, 0, 0)
    assert distance(a, b) == float(2**40)
    assert distance(b, a) == float(2**40)


def test_distance_symmetric_on_random_pairs():
    rng = np.random.default_rng(3)
    pts = as_points(rng.integers(0, 1000, size=(50, 3)))
    for a in pts:
        for b in pts:
            assert distance(a, b) == distance(b, a)


def test_distance_coincident_is_zero():
    assert distance(Pt(7, 7, 7), Pt(7, 7, 7)) == 0.0


def test_distance_3d_diagonal():
    assert distance(Pt(1, 1, 1), Pt(2, 2, 2)) == pytest.approx(sqrt(3), abs=1e-12)


def test_as_points_accepts_numpy_ints_and_pts():
    pts = as_points([Pt(1, 2, 3), (np.int64(4), np.uint32(5), 6)])
    assert pts == [Pt(1, 2, 3), Pt(4, 5, 6)]


def test_as_points_rejects_floats():
    with pytest.raises(ValueError):
        as_points([(1.0, 2, 3)])


def test_pt_accepts_uint64_max():
    p = Pt(MAX_COORD, 0, MAX_COORD)
    assert distance(p, Pt(0, 0, 0)) == pytest.approx(sqrt(2) * MAX_COORD, rel=1e-12)


def test_pt_rejects_above_uint64():
    with pytest.raises(ValueError, match="uint64"):
        Pt(0, MAX_COORD + 1, 0)
