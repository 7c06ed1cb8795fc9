# examples/demo_pipeline.py
from cp3d.counter import DistanceCounter
from cp3d.pipeline import closest_distance

if __name__ == "__main__":
    raw = [(0, 0, 0), (3, 4, 0), (100, 100, 100)]

    for bound in ("max", "min"):
        counter = DistanceCounter()
        d = closest_distance(raw, backend="divide", counter=counter, bound=bound)  # або "brute" / "scipy"
        print(f"bound={bound}: distance={d}, evaluations={counter.value}")
