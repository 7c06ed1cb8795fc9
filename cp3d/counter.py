from __future__ import annotations
import threading


class DistanceCounter:
    """
    Лічильник обчислень відстані між парами.
    Інкремент під замком: рекурсію можна буде розпаралелити без гонок.
    """

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("counter start must be non-negative")
        self._value = start
        self._lock = threading.Lock()

    def increment(self, n: int = 1) -> int:
        with self._lock:
            self._value += n
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"DistanceCounter({self.value})"


# спільний на весь процес; рушій його не скидає
DISTANCE_EVALUATIONS = DistanceCounter()
