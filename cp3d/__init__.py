"""
cp3d — найближча пара точок у 3D (Py 3.9+).
Рекурсивний «розділяй і володарюй» зі смугою злиття + лічильник обчислень відстані.
"""

__version__ = "0.1.0"

from cp3d.geom import Pt, distance
from cp3d.counter import DistanceCounter, DISTANCE_EVALUATIONS
from cp3d.ball import Ball
from cp3d.closest import NO_PAIR, brute_force, strip_iter, closest_iter, closest_pair_of_points
from cp3d.pipeline import closest_distance, closest_pairs

__all__ = [
    "Pt", "distance",
    "DistanceCounter", "DISTANCE_EVALUATIONS", "Ball",
    "NO_PAIR", "brute_force", "strip_iter", "closest_iter", "closest_pair_of_points",
    "closest_distance", "closest_pairs", "__version__",
]
