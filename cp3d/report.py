from __future__ import annotations
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .counter import DistanceCounter
from .geom import Pt
from .pipeline import closest_distance


@dataclass(frozen=True)
class Report:
    entries: int
    distance: Optional[float]   # None — пари немає
    evaluations: int
    elapsed_ns: int


def format_report(r: Report) -> List[str]:
    lines = [f"Number of entries involved in calculation: {r.entries}."]
    if r.distance is None:
        lines.append("No pair of points to compare.")
    else:
        lines.append(f"The lowest distance is {r.distance:.6g}.")
    lines.append(f"Number of total distance calculations is {r.evaluations}.")
    lines.append(f"Monotonic time elapsed during execution: {r.elapsed_ns} ns (1E-9 s).")
    return lines


def run_timed(points: Sequence[Pt], backend: str = "divide",
              counter: Optional[DistanceCounter] = None,
              bound: Optional[str] = None) -> Report:
    """
    Запустити обчислення й заміряти монотонний час.
    Лічильник свіжий, якщо не передали власний; у звіт іде його значення.
    """
    if counter is None:
        counter = DistanceCounter()
    start = time.perf_counter_ns()
    d = closest_distance(points, backend=backend, counter=counter, bound=bound)
    elapsed = time.perf_counter_ns() - start
    return Report(len(points), d, counter.value, elapsed)
