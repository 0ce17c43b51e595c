from __future__ import annotations

import random
from collections.abc import Callable

import pendulum
import pytest

from phasechart.model.interval import Interval
from phasechart.service.packing import (
    find_available_row,
    intervals_overlap,
    pack_intervals,
    row_count,
    sort_by_start,
)


def test_overlapping_intervals_get_separate_rows(
    interval_factory: Callable[..., Interval],
) -> None:
    intervals = [
        interval_factory("One", "A", "2024-01-01", "2024-01-10"),
        interval_factory("Two", "A", "2024-01-05", "2024-01-15"),
        interval_factory("Three", "A", "2024-01-20", "2024-01-25"),
    ]

    placed = pack_intervals(intervals)

    assert [p["row"] for p in placed] == [0, 1, 0]
    assert [p["interval"]["label"] for p in placed] == ["One", "Two", "Three"]
    assert row_count(placed) == 2


def test_touching_intervals_share_a_row(
    interval_factory: Callable[..., Interval],
) -> None:
    first = interval_factory("One", "A", "2024-01-01", "2024-01-10")
    second = interval_factory("Two", "A", "2024-01-10", "2024-01-20")

    assert intervals_overlap(first, second) is False
    assert [p["row"] for p in pack_intervals([first, second])] == [0, 0]


def test_first_free_row_is_reused(interval_factory: Callable[..., Interval]) -> None:
    placed = pack_intervals(
        [
            interval_factory("One", "A", "2024-01-01", "2024-03-01"),
            interval_factory("Two", "A", "2024-01-02", "2024-01-05"),
            interval_factory("Three", "A", "2024-01-03", "2024-02-01"),
        ]
    )
    candidate = interval_factory("Four", "A", "2024-01-06", "2024-01-08")

    assert [p["row"] for p in placed] == [0, 1, 2]
    assert find_available_row(candidate, placed) == 1


def test_empty_lane() -> None:
    assert pack_intervals([]) == []
    assert row_count([]) == 0


def test_sort_by_start_is_stable(interval_factory: Callable[..., Interval]) -> None:
    intervals = [
        interval_factory("Late", "A", "2024-03-01", "2024-03-05"),
        interval_factory("TieFirst", "A", "2024-01-01", "2024-01-05"),
        interval_factory("TieSecond", "A", "2024-01-01", "2024-02-05"),
    ]

    ordered = sort_by_start(intervals)

    assert [i["label"] for i in ordered] == ["TieFirst", "TieSecond", "Late"]


def _max_simultaneous(intervals: list[Interval]) -> int:
    events: list[tuple[pendulum.Date, int]] = []
    for interval in intervals:
        assert interval["start"] is not None and interval["end"] is not None
        events.append((interval["start"], 1))
        events.append((interval["end"], -1))
    # Ends sort before starts on the same day: touching intervals do not overlap
    events.sort(key=lambda event: (event[0], event[1]))

    current = best = 0
    for _, delta in events:
        current += delta
        best = max(best, current)
    return best


@pytest.mark.parametrize("seed", range(20))
def test_packing_is_valid_and_uses_minimum_rows(
    seed: int, interval_factory: Callable[..., Interval]
) -> None:
    rng = random.Random(seed)
    base = pendulum.date(2024, 1, 1)
    intervals = []
    for index in range(rng.randint(1, 25)):
        start = base.add(days=rng.randint(0, 90))
        end = start.add(days=rng.randint(1, 40))
        intervals.append(
            interval_factory(f"P{index}", "A", start.isoformat(), end.isoformat())
        )

    placed = pack_intervals(sort_by_start(intervals))

    for i, first in enumerate(placed):
        for second in placed[i + 1 :]:
            if first["row"] == second["row"]:
                assert not intervals_overlap(first["interval"], second["interval"])
    assert row_count(placed) == _max_simultaneous(intervals)
