"""Спільні фікстури для тестів cp3d."""

from __future__ import annotations

import logging
from itertools import combinations
from math import inf

import pytest

from cp3d.counter import DistanceCounter
from cp3d.geom import Pt, distance


@pytest.fixture
def counter() -> DistanceCounter:
    return DistanceCounter()


@pytest.fixture
def triangle_points() -> list:
    """Пара 3-4-5 плюс далека точка."""
    return [Pt(0, 0, 0), Pt(3, 4, 0), Pt(100, 100, 100)]


@pytest.fixture(autouse=True)
def _reset_cp3d_logger():
    # CLI вішає хендлери на логер 'cp3d'; не тягнемо їх між тестами
    yield
    logger = logging.getLogger("cp3d")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def _naive_min(points) -> float:
    return min((distance(a, b) for a, b in combinations(points, 2)), default=inf)


@pytest.fixture
def naive_min():
    """Незалежний еталон без Ball і лічильника."""
    return _naive_min
