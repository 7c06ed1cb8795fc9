"""
Джерела точок: текстовий файл, numpy-масив, випадкова хмара.

Формат файлу:
    N            — кількість точок (ціле >= 0)
    x y z        — до N рядків, три невід'ємні цілі через пробіли

Якщо файл закінчився раніше, ніж N рядків, — попередження в лог
і працюємо з тим, що прочитали.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .geom import Pt

logger = logging.getLogger(__name__)


class PointFormatError(ValueError):
    """Битий вхід. lineno — номер рядка (з 1), якщо відомий."""

    def __init__(self, message: str, lineno: Optional[int] = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


def _parse_count(line: Optional[str]) -> int:
    if line is None or not line.strip():
        raise PointFormatError("missing number of entries", 1)
    token = line.strip()
    try:
        n = int(token)
    except ValueError:
        raise PointFormatError(f"invalid number of entries {token!r}", 1) from None
    if n < 0:
        raise PointFormatError(f"invalid number of entries {n}", 1)
    return n


def _parse_point(line: str, lineno: int) -> Pt:
    parts = line.split()
    if len(parts) != 3:
        raise PointFormatError(f"expected 3 integers, got {len(parts)}", lineno)
    try:
        x, y, z = (int(t) for t in parts)
        return Pt(x, y, z)
    except ValueError as e:
        raise PointFormatError(f"cannot read point {line.strip()!r}: {e}", lineno) from None


def parse_points(lines: Iterable[str]) -> List[Pt]:
    """Розібрати рядки у форматі файлу точок."""
    it = iter(lines)
    n = _parse_count(next(it, None))

    points: List[Pt] = []
    for lineno, line in enumerate(it, start=2):
        if len(points) == n:
            break
        points.append(_parse_point(line, lineno))

    if len(points) < n:
        logger.warning(
            "reached end-of-file before fetching given number of entries (%d of %d)",
            len(points), n,
        )
    return points


def read_points(path: Union[str, Path]) -> List[Pt]:
    """Прочитати файл точок. OSError пробрасується як є."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            points = parse_points(f)
    except UnicodeDecodeError as e:
        raise PointFormatError(f"file is not valid UTF-8 text (byte offset {e.start})") from None
    logger.info("read %d points from %s", len(points), path)
    return points


def write_points(path: Union[str, Path], points: Sequence[Pt]) -> None:
    lines = [str(len(points))]
    lines.extend(f"{p.x} {p.y} {p.z}" for p in points)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")


# ---------- numpy ----------
def points_from_array(arr) -> List[Pt]:
    """Масив (N, 3) невід'ємних цілих -> список Pt."""
    a = np.asarray(arr)
    if a.size == 0:
        return []
    if a.ndim != 2 or a.shape[1] != 3:
        raise ValueError(f"expected array of shape (N, 3), got {a.shape}")
    if a.dtype.kind not in "iu":
        raise ValueError(f"expected integer coordinates, got dtype {a.dtype}")
    if (a < 0).any():
        raise ValueError("coordinates must be non-negative")
    return [Pt(int(x), int(y), int(z)) for x, y, z in a.tolist()]


def points_to_array(points: Sequence[Pt]) -> np.ndarray:
    if not points:
        return np.empty((0, 3), dtype=np.uint64)
    return np.array([(p.x, p.y, p.z) for p in points], dtype=np.uint64)


def random_points(n: int, high: int = 10000, seed: Optional[int] = None) -> List[Pt]:
    """n рівномірно випадкових точок у [0, high]^3."""
    if n < 0:
        raise ValueError("n must be non-negative")
    rng = np.random.default_rng(seed)
    return points_from_array(rng.integers(0, high, size=(n, 3), endpoint=True))
