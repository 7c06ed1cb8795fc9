"""Тести лічильника обчислень відстані та Ball.distance_to."""

from __future__ import annotations

import threading

import pytest

from cp3d.ball import Ball, as_balls
from cp3d.counter import DISTANCE_EVALUATIONS, DistanceCounter
from cp3d.geom import Pt


def test_counter_starts_at_zero():
    assert DistanceCounter().value == 0
    assert int(DistanceCounter(4)) == 4


def test_counter_rejects_negative_start():
    with pytest.raises(ValueError):
        DistanceCounter(-1)


def test_distance_to_increments_once_per_call(counter):
    a, b = Ball(Pt(0, 0, 0)), Ball(Pt(3, 4, 0))
    assert a.distance_to(b, counter) == 5.0
    assert b.distance_to(a, counter) == 5.0
    assert counter.value == 2


def test_distance_to_defaults_to_process_counter():
    a, b = Ball(Pt(1, 1, 1)), Ball(Pt(1, 1, 2))
    before = DISTANCE_EVALUATIONS.value
    a.distance_to(b)
    assert DISTANCE_EVALUATIONS.value == before + 1


def test_explicit_counter_leaves_process_counter_alone(counter):
    a, b = Ball(Pt(1, 1, 1)), Ball(Pt(1, 1, 2))
    before = DISTANCE_EVALUATIONS.value
    a.distance_to(b, counter)
    assert DISTANCE_EVALUATIONS.value == before
    assert counter.value == 1


def test_counter_is_thread_safe():
    c = DistanceCounter()
    per_thread = 10_000

    def work():
        for _ in range(per_thread):
            c.increment()

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert c.value == 8 * per_thread


def test_as_balls_wraps_mixed_inputs():
    b = Ball(Pt(9, 9, 9))
    out = as_balls([b, Pt(1, 2, 3), (4, 5, 6)])
    assert out[0] is b
    assert [x.point for x in out[1:]] == [Pt(1, 2, 3), Pt(4, 5, 6)]
    assert (out[2].x, out[2].y, out[2].z) == (4, 5, 6)
