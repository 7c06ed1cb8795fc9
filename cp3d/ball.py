from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .counter import DistanceCounter, DISTANCE_EVALUATIONS
from .geom import Pt, as_points, distance


@dataclass(frozen=True)
class Ball:
    """
    Одиниця пошуку: обгортка над однією точкою.
    Копіюється між робочими списками, сама ніколи не змінюється.
    """
    point: Pt

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    @property
    def z(self) -> int:
        return self.point.z

    def distance_to(self, other: Ball, counter: Optional[DistanceCounter] = None) -> float:
        """Відстань до іншої кулі; кожен виклик рівно +1 до лічильника."""
        (counter if counter is not None else DISTANCE_EVALUATIONS).increment()
        return distance(self.point, other.point)


PointLike = Union[Ball, Pt, Tuple[int, int, int]]


def as_balls(items: Iterable[PointLike]) -> List[Ball]:
    """Ball лишаються як є, Pt і трійки загортаються в нові Ball."""
    out: List[Ball] = []
    for it in items:
        if isinstance(it, Ball):
            out.append(it)
        else:
            out.append(Ball(as_points([it])[0]))
    return out
