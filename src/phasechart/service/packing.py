# SPDX-License-Identifier: MIT

import pendulum

from phasechart.model.interval import Interval, PlacedInterval


def intervals_overlap(first: Interval, second: Interval) -> bool:
    """Half-open overlap test; intervals that only touch at an endpoint do not overlap."""
    assert first["start"] is not None and first["end"] is not None
    assert second["start"] is not None and second["end"] is not None
    return first["start"] < second["end"] and second["start"] < first["end"]


def find_available_row(interval: Interval, placed: list[PlacedInterval]) -> int:
    """Return the lowest row where no already placed interval overlaps this one."""
    row = 0
    while any(
        placed_interval["row"] == row
        and intervals_overlap(interval, placed_interval["interval"])
        for placed_interval in placed
    ):
        row += 1
    return row


def sort_by_start(intervals: list[Interval]) -> list[Interval]:
    """Stable sort by start date; ties keep their original order."""
    return sorted(intervals, key=lambda interval: interval["start"] or pendulum.Date.min)


def pack_intervals(intervals: list[Interval]) -> list[PlacedInterval]:
    """
    Assign each interval of one lane to a display row.

    Greedy first-fit over intervals that are already sorted by start date, which
    uses as many rows as the largest number of simultaneously overlapping
    intervals.

    Args:
        intervals: Intervals of a single lane, sorted by start date

    Returns:
        The intervals in input order, each paired with its row
    """
    placed: list[PlacedInterval] = []
    for interval in intervals:
        row = find_available_row(interval, placed)
        placed.append({"interval": interval, "row": row})
    return placed


def row_count(placed: list[PlacedInterval]) -> int:
    if not placed:
        return 0
    return max(placed_interval["row"] for placed_interval in placed) + 1

