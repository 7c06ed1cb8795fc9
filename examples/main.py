# examples/main.py
from __future__ import annotations

import logging

from cp3d.io import random_points, read_points, write_points
from cp3d.logging_config import setup_logging
from cp3d.pipeline import closest_pairs
from cp3d.plot import make_figure
from cp3d.report import format_report, run_timed


def main():
    setup_logging(logging.INFO)

    # --- 1) Вхідні дані ---
    # Можеш змінити на свій файл
    points = random_points(1000, high=10000, seed=7)
    write_points("points.txt", points)
    points = read_points("points.txt")

    # --- 2) Усі бекенди на тих самих точках ---
    reports = {}
    for backend in ("divide", "brute", "scipy"):
        reports[backend] = run_timed(points, backend=backend)
        print(f"--- {backend} ---")
        for line in format_report(reports[backend]):
            print(line)

    d = reports["divide"].distance
    assert d is not None and abs(d - reports["brute"].distance) < 1e-6

    # --- 3) closest.png — хмара + найближчі пари ---
    pairs = closest_pairs(points, d)
    print("Найближчі пари (індекси):", pairs)
    fig = make_figure(points, pairs, title=f"d = {d:.6g}")
    fig.savefig("closest.png", dpi=120)
    print("closest.png записано.")


if __name__ == "__main__":
    main()
