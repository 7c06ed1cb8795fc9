from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple

from .ball import PointLike, as_balls
from .closest import NO_PAIR, brute_force, closest_pair_of_points
from .counter import DistanceCounter
from .geom import Pt
from .io import points_to_array


def _require_scipy():
    try:
        from scipy.spatial import cKDTree
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', but SciPy is not installed. "
            "Install scipy or use backend='divide'."
        ) from e
    return cKDTree


def closest_distance(
    items: Iterable[PointLike],
    backend: str = "divide",
    counter: Optional[DistanceCounter] = None,
    bound: Optional[str] = None,
) -> Optional[float]:
    """
    Мінімальна відстань обраним бекендом:
      "divide" — рекурсивний алгоритм (основний);
      "brute"  — повний перебір (еталон для перевірок);
      "scipy"  — cKDTree, незалежна перевірка; лічильник не чіпає.
    None, якщо точок менше двох.
    """
    balls = as_balls(items)
    name = backend.lower()

    if name == "divide":
        return closest_pair_of_points(balls, counter=counter, bound=bound)

    if name == "brute":
        d = brute_force(balls, counter)
        return None if d == NO_PAIR else d

    if name == "scipy":
        if len(balls) < 2:
            return None
        cKDTree = _require_scipy()
        arr = points_to_array([b.point for b in balls]).astype(float)
        # k=2: перший сусід — сама точка (або її дублікат)
        dist, _ = cKDTree(arr).query(arr, k=2)
        return float(dist[:, 1].min())

    raise ValueError(f"Unknown backend: {backend}")


def closest_pairs(points: Sequence[Pt], distance: float,
                  rtol: float = 1e-9) -> List[Tuple[int, int]]:
    """
    Усі пари індексів (i, j), i < j, на відстані distance (з відносним допуском).
    Для підсвічування найближчих пар на графіку.
    """
    if len(points) < 2:
        return []
    cKDTree = _require_scipy()
    arr = points_to_array(points).astype(float)
    tol = rtol * max(distance, 1.0)
    pairs = cKDTree(arr).query_pairs(distance + tol)
    out = []
    for i, j in sorted(pairs):
        d = float(((arr[i] - arr[j]) ** 2).sum() ** 0.5)
        if abs(d - distance) <= tol:
            out.append((i, j))
    return out
