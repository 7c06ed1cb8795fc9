"""Тести звіту та заміру часу."""

from __future__ import annotations

from cp3d.counter import DISTANCE_EVALUATIONS, DistanceCounter
from cp3d.report import Report, format_report, run_timed


def test_format_report_with_distance():
    lines = format_report(Report(entries=3, distance=5.0, evaluations=3, elapsed_ns=1234))
    assert lines == [
        "Number of entries involved in calculation: 3.",
        "The lowest distance is 5.",
        "Number of total distance calculations is 3.",
        "Monotonic time elapsed during execution: 1234 ns (1E-9 s).",
    ]


def test_format_report_without_pair():
    lines = format_report(Report(entries=1, distance=None, evaluations=0, elapsed_ns=10))
    assert lines[1] == "No pair of points to compare."


def test_format_report_fractional_distance():
    lines = format_report(Report(entries=2, distance=2 ** 0.5, evaluations=1, elapsed_ns=1))
    assert lines[1] == "The lowest distance is 1.41421."


def test_run_timed_triangle(triangle_points):
    before = DISTANCE_EVALUATIONS.value
    r = run_timed(triangle_points)
    assert r.entries == 3
    assert r.distance == 5.0
    assert r.evaluations == 3
    assert r.elapsed_ns >= 0
    # власний лічильник звіту, процесний не зачеплено
    assert DISTANCE_EVALUATIONS.value == before


def test_run_timed_uses_given_counter(triangle_points):
    c = DistanceCounter(10)
    r = run_timed(triangle_points, backend="brute", counter=c)
    assert r.evaluations == 13
    assert c.value == 13


def test_run_timed_empty():
    r = run_timed([])
    assert r.distance is None
    assert r.evaluations == 0
