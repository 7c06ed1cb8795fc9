from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from operator import index
from typing import Iterable, List, Tuple

MAX_COORD = 2**64 - 1  # координати — uint64


@dataclass(frozen=True)
class Pt:
    """Точка з невід'ємними цілими координатами."""
    x: int
    y: int
    z: int

    def __post_init__(self):
        for name in ("x", "y", "z"):
            v = getattr(self, name)
            # bool теж int, але як координата це майже завжди помилка
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"coordinate {name} must be an integer, got {v!r}")
            if v < 0:
                raise ValueError(f"coordinate {name} must be non-negative, got {v}")
            if v > MAX_COORD:
                raise ValueError(f"coordinate {name} exceeds {MAX_COORD} (uint64), got {v}")

    def __iter__(self):
        yield self.x; yield self.y; yield self.z


def distance(a: Pt, b: Pt) -> float:
    # різниці в знакових int Python — без переповнення
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return sqrt(dx*dx + dy*dy + dz*dz)


def _coord(v) -> int:
    # numpy.int64 не є int, але підтримує __index__; float — ні
    try:
        return index(v)
    except TypeError:
        raise ValueError(f"coordinate must be an integer, got {v!r}") from None


def as_points(points: Iterable[Tuple[int, int, int]]) -> List[Pt]:
    """Перетворити трійки (x, y, z) на список Pt; готові Pt лишаються як є."""
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
        else:
            x, y, z = p
            out.append(Pt(_coord(x), _coord(y), _coord(z)))
    return out
