# examples/demo_bound.py
# Скільки обчислень відстані економить класична межа min проти max за замовчуванням.
from cp3d.counter import DistanceCounter
from cp3d.closest import closest_pair_of_points
from cp3d.io import random_points

if __name__ == "__main__":
    for n in (100, 1000, 5000):
        pts = random_points(n, high=10000, seed=n)
        row = []
        for bound in ("max", "min"):
            counter = DistanceCounter()
            d = closest_pair_of_points(pts, counter=counter, bound=bound)
            row.append(f"{bound}: d={d:.4f} evals={counter.value}")
        print(f"N={n:5d}  " + "  |  ".join(row))
