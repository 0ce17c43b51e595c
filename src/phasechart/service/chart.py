# SPDX-License-Identifier: MIT

import logging

import pendulum

from phasechart.model.interval import Interval
from phasechart.model.layout import Bar, BarGeometry, ChartLayout, Lane
from phasechart.model.phase import Phase
from phasechart.model.record import Record, get_phase_interval
from phasechart.model.viewport import Viewport
from phasechart.service.calendar_grid import (
    month_bands,
    total_viewport_days,
    week_markers,
)
from phasechart.service.navigator import viewport_end
from phasechart.service.packing import pack_intervals, row_count, sort_by_start
from phasechart.time import days_between

logger = logging.getLogger(__name__)

BAR_HEIGHT_PX = 20
BAR_GUTTER_PX = 4
ROW_HEIGHT_PX = BAR_HEIGHT_PX + BAR_GUTTER_PX
LANE_PADDING_PX = 8

DEFAULT_BAR_COLOR = "white"

OVERVIEW_TITLE = "Project Overview"


def phase_intervals(records: list[Record], phase: Phase) -> list[Interval]:
    """Collect the intervals of one phase across all records that have it."""
    intervals = []
    for record in records:
        interval = get_phase_interval(record, phase)
        if interval is not None:
            intervals.append(interval)
    return intervals


def has_valid_dates(interval: Interval) -> bool:
    if interval["start"] is None or interval["end"] is None:
        logger.debug(
            "Skipping %s interval for '%s': unparsable dates '%s' to '%s'",
            interval["phase"].value,
            interval["label"],
            interval["start_text"],
            interval["end_text"],
        )
        return False
    return True


def is_visible(
    interval: Interval, view_start: pendulum.Date, view_end: pendulum.Date
) -> bool:
    """Inclusive test: an interval ending on the first visible day is still drawn."""
    assert interval["start"] is not None and interval["end"] is not None
    return interval["end"] >= view_start and interval["start"] <= view_end


def bar_geometry(
    start: pendulum.Date,
    end: pendulum.Date,
    view_start: pendulum.Date,
    total_days: int,
) -> BarGeometry:
    """
    Horizontal placement of a bar as percentages of the viewport.

    The left edge is clamped at 0 and the width at 100; a bar running past the
    end of the viewport is left for the renderer to clip.
    """
    left = days_between(view_start, start) / total_days * 100
    visible_start = max(start, view_start)
    width = days_between(visible_start, end) / total_days * 100
    return {
        "left_percent": max(left, 0.0),
        "width_percent": min(width, 100.0),
    }


def lane_height(rows: int, marker_strip_px: int = 0) -> int:
    return rows * ROW_HEIGHT_PX + LANE_PADDING_PX + marker_strip_px


def _unique_in_order(values: list[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def build_phase_chart(
    records: list[Record],
    phase: Phase,
    viewport: Viewport,
    project_colors: dict[str, str],
    locale: str = "en",
    marker_strip_px: int = 0,
) -> ChartLayout:
    """
    Lay out one phase as a chart with a lane per owner.

    Owners appear in the order they first occur. Within each lane the visible
    intervals are sorted by start date and packed into rows so overlapping
    projects never share a row.

    Args:
        records: Parsed project records
        phase: Phase to chart
        viewport: Visible window
        project_colors: Bar color per project name
        locale: Locale for month labels
        marker_strip_px: Extra lane height when week markers are shown

    Returns:
        Chart layout ready for rendering
    """
    view_start = viewport["start"]
    view_end = viewport_end(viewport)
    total_days = total_viewport_days(view_start, view_end)
    markers = week_markers(view_start, view_end)
    strip_px = marker_strip_px if markers else 0

    intervals = phase_intervals(records, phase)
    owners = _unique_in_order([interval["owner"] for interval in intervals])

    lanes: list[Lane] = []
    for owner in owners:
        owned = [
            interval
            for interval in intervals
            if interval["owner"] == owner and has_valid_dates(interval)
        ]
        visible = [
            interval
            for interval in sort_by_start(owned)
            if is_visible(interval, view_start, view_end)
        ]
        placed = pack_intervals(visible)

        bars: list[Bar] = []
        for placed_interval in placed:
            interval = placed_interval["interval"]
            assert interval["start"] is not None and interval["end"] is not None
            geometry = bar_geometry(
                interval["start"], interval["end"], view_start, total_days
            )
            bars.append(
                {
                    "label": interval["label"],
                    "tooltip": f"{interval['label']}: {interval['start_text']} to {interval['end_text']}",
                    "color": project_colors.get(interval["label"], DEFAULT_BAR_COLOR),
                    "row": placed_interval["row"],
                    "left_percent": geometry["left_percent"],
                    "width_percent": geometry["width_percent"],
                    "top_px": placed_interval["row"] * ROW_HEIGHT_PX,
                }
            )

        # An empty lane still reserves one row
        rows = max(row_count(placed), 1)
        lanes.append(
            {"name": owner, "bars": bars, "height_px": lane_height(rows, strip_px)}
        )

    return {
        "title": phase.display_title,
        "lane_header": "Staff",
        "viewport": viewport,
        "viewport_end": view_end,
        "month_bands": month_bands(view_start, view_end, locale),
        "week_markers": markers,
        "lanes": lanes,
    }


def build_overview_chart(
    records: list[Record],
    viewport: Viewport,
    locale: str = "en",
    marker_strip_px: int = 0,
) -> ChartLayout:
    """
    Lay out every project as a lane with one row per visible phase.

    Rows follow the fixed phase order and are compacted over the phases that
    are actually drawn. Bars are colored by phase. When several records share a
    name only the first one is charted.
    """
    view_start = viewport["start"]
    view_end = viewport_end(viewport)
    total_days = total_viewport_days(view_start, view_end)
    markers = week_markers(view_start, view_end)
    strip_px = marker_strip_px if markers else 0

    first_records: dict[str, Record] = {}
    for record in records:
        first_records.setdefault(record["name"], record)

    lanes: list[Lane] = []
    for name, record in first_records.items():
        bars: list[Bar] = []
        for phase in Phase:
            interval = get_phase_interval(record, phase)
            if interval is None or not has_valid_dates(interval):
                continue
            if not is_visible(interval, view_start, view_end):
                continue

            assert interval["start"] is not None and interval["end"] is not None
            row = len(bars)
            geometry = bar_geometry(
                interval["start"], interval["end"], view_start, total_days
            )
            bars.append(
                {
                    "label": interval["owner"],
                    "tooltip": f"{phase.value}: {interval['owner']} ({interval['start_text']} to {interval['end_text']})",
                    "color": phase.color,
                    "row": row,
                    "left_percent": geometry["left_percent"],
                    "width_percent": geometry["width_percent"],
                    "top_px": row * ROW_HEIGHT_PX,
                }
            )

        lanes.append(
            {"name": name, "bars": bars, "height_px": lane_height(len(bars), strip_px)}
        )

    return {
        "title": OVERVIEW_TITLE,
        "lane_header": "Project",
        "viewport": viewport,
        "viewport_end": view_end,
        "month_bands": month_bands(view_start, view_end, locale),
        "week_markers": markers,
        "lanes": lanes,
    }
