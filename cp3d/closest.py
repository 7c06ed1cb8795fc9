# cp3d/closest.py
from __future__ import annotations
import logging
from math import inf
from typing import Iterable, List, Optional

from . import config
from .ball import Ball, PointLike, as_balls
from .counter import DistanceCounter

logger = logging.getLogger(__name__)

NO_PAIR = inf  # «пари немає»: менше двох точок


def _by_x(b: Ball) -> int:
    return b.x


def _by_y(b: Ball) -> int:
    return b.y


def brute_force(balls: List[Ball], counter: Optional[DistanceCounter] = None) -> float:
    """Повний перебір усіх C(N,2) пар. Для N <= 1 повертає NO_PAIR."""
    best = NO_PAIR
    n = len(balls)
    for a in range(n):
        for b in range(a + 1, n):
            d = balls[a].distance_to(balls[b], counter)
            if d < best:
                best = d
    return best


def strip_iter(balls: List[Ball], bound: float, counter: Optional[DistanceCounter] = None) -> float:
    """
    Злиття через смугу.
    Кандидати сортуються за y (у копії), для кожного a переглядаємо b > a,
    поки y[b] - y[a] < best. best лише зменшується, тож вікно звужується по ходу.
    Повертає best <= bound; порожня смуга -> bound без змін.
    """
    ys = sorted(balls, key=_by_y)
    best = bound
    n = len(ys)
    for a in range(n):
        ya = ys[a].y
        b = a + 1
        while b < n and ys[b].y - ya < best:
            d = ys[a].distance_to(ys[b], counter)
            if d < best:
                best = d
            b += 1
    return best


def _half_bound(lhs: float, rhs: float, bound: str) -> float:
    if bound == "max":
        return lhs if lhs > rhs else rhs
    if bound == "min":
        return lhs if lhs < rhs else rhs
    raise ValueError(f"bound must be one of {config.STRIP_BOUNDS}, got {bound!r}")


def closest_iter(balls: List[Ball], counter: Optional[DistanceCounter] = None,
                 bound: str = "max") -> float:
    """
    Рекурсивний крок. Передумова: balls відсортовані за x.

    bound="max" — межа смуги = max з двох половин (ширша смуга,
    та сама відповідь); bound="min" — класичний варіант, лише швидше відсікає.
    """
    n = len(balls)
    if n <= config.BRUTE_FORCE_THRESHOLD:
        return brute_force(balls, counter)

    mid = n // 2
    pivot = balls[mid]

    # зрізи — окремі копії, сортування за x зберігається
    d_lhs = closest_iter(balls[:mid], counter, bound)
    d_rhs = closest_iter(balls[mid:], counter, bound)
    best = _half_bound(d_lhs, d_rhs, bound)

    px = pivot.x
    strip = [b for b in balls if abs(b.x - px) < best]
    d_strip = strip_iter(strip, best, counter)

    return d_strip if d_strip < best else best


def closest_pair_of_points(items: Iterable[PointLike],
                           counter: Optional[DistanceCounter] = None,
                           bound: Optional[str] = None) -> Optional[float]:
    """
    Мінімальна попарна відстань між точками (Ball, Pt або трійки (x, y, z)).

    Вхід не змінюється: працюємо з відсортованою за x копією.
    Повертає None, якщо точок менше двох.
    bound=None бере значення з config (CP3D_STRIP_BOUND, за замовчуванням "max").
    """
    if bound is None:
        bound = config.strip_bound()
    elif bound not in config.STRIP_BOUNDS:
        raise ValueError(f"bound must be one of {config.STRIP_BOUNDS}, got {bound!r}")

    balls = sorted(as_balls(items), key=_by_x)
    logger.debug("closest pair over %d points (bound=%s)", len(balls), bound)

    d = closest_iter(balls, counter, bound)
    if d == NO_PAIR:
        logger.debug("fewer than two points, no pair")
        return None
    return d
