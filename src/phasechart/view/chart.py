# SPDX-License-Identifier: MIT

import math

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from phasechart.color import GRID_COLOR, LANE_NAME_COLOR
from phasechart.model.layout import Bar, ChartLayout, Lane
from phasechart.time import date_to_display_str

MIN_TIMELINE_WIDTH = 10

type Cell = tuple[str, str]


def _fit(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)


def _percent_to_column(percent: float, timeline_width: int) -> int:
    return round(percent / 100 * timeline_width)


def _cells_to_text(cells: list[Cell]) -> Text:
    text = Text()
    for char, style in cells:
        text.append(char, style=style)
    return text


def _build_title(chart: ChartLayout) -> Text:
    last_day = chart["viewport_end"].subtract(days=1)
    title = Text(chart["title"], style="bold")
    title.append(
        f"  {date_to_display_str(chart['viewport']['start'])} to {date_to_display_str(last_day)}",
        style="dim",
    )
    return title


def _build_month_row(
    chart: ChartLayout, timeline_width: int, left_column_width: int
) -> Text:
    """Month names, each spanning its share of the timeline with alternating shading."""
    row = Text(_fit(chart["lane_header"], left_column_width), style="bold")

    cursor = 0
    cumulative = 0.0
    for index, band in enumerate(chart["month_bands"]):
        band_start = min(_percent_to_column(cumulative, timeline_width), timeline_width)
        cumulative += band["width_percent"]
        band_end = min(_percent_to_column(cumulative, timeline_width), timeline_width)
        band_start = max(band_start, cursor)
        if band_end <= band_start:
            continue

        bg_style = " on grey23" if index % 2 == 1 else ""
        row.append(_fit(band["label"], band_end - band_start), style="bold" + bg_style)
        cursor = band_end

    if cursor < timeline_width:
        row.append(" " * (timeline_width - cursor))

    return row


def _build_week_row(
    chart: ChartLayout, timeline_width: int, left_column_width: int
) -> Text:
    """Weekly tick labels; a label that would collide with the previous one is dropped."""
    cells: list[Cell] = [(" ", "")] * timeline_width
    next_free = 0

    for marker in chart["week_markers"]:
        column = _percent_to_column(marker["position_percent"], timeline_width)
        if column < next_free or column >= timeline_width:
            continue

        label = f"╵{marker['label']}"
        for offset, char in enumerate(label):
            if column + offset >= timeline_width:
                break
            cells[column + offset] = (char, GRID_COLOR)
        next_free = column + len(label) + 1

    row = Text(" " * left_column_width)
    row.append_text(_cells_to_text(cells))
    return row


def _bar_columns(bar: Bar, timeline_width: int) -> tuple[int, int]:
    start = math.floor(bar["left_percent"] / 100 * timeline_width)
    end = math.ceil((bar["left_percent"] + bar["width_percent"]) / 100 * timeline_width)
    start = max(start, 0)
    end = min(end, timeline_width)
    # Zero-length bars still get one column so they stay visible
    if end <= start:
        end = min(start + 1, timeline_width)
    return start, end


def _build_lane_rows(
    lane: Lane, timeline_width: int, left_column_width: int
) -> list[Text]:
    row_total = max([bar["row"] for bar in lane["bars"]], default=0) + 1

    rows: list[Text] = []
    for row_index in range(row_total):
        lane_name = lane["name"] if row_index == 0 else ""
        row = Text(_fit(lane_name, left_column_width), style=LANE_NAME_COLOR)

        cells: list[Cell] = [(" ", "")] * timeline_width
        for bar in lane["bars"]:
            if bar["row"] != row_index:
                continue
            start, end = _bar_columns(bar, timeline_width)
            if start >= timeline_width:
                continue

            label = bar["label"][: end - start]
            for column in range(start, end):
                offset = column - start
                char = label[offset] if offset < len(label) else " "
                cells[column] = (char, f"bold black on {bar['color']}")

        row.append_text(_cells_to_text(cells))
        rows.append(row)

    return rows


def render_chart(chart: ChartLayout, width: int, left_column_width: int = 24) -> Group:
    """
    Render a chart layout as rich text lines sized to the given width.

    The timeline gets whatever width remains after the lane name column; bar
    positions and widths are scaled from their percentages.

    Args:
        chart: Layout produced by the chart service
        width: Total character width available
        left_column_width: Width of the lane name column

    Returns:
        Rich Group with the title, month header, week markers and lanes
    """
    timeline_width = max(width - left_column_width, MIN_TIMELINE_WIDTH)

    elements: list[Text] = [
        _build_title(chart),
        _build_month_row(chart, timeline_width, left_column_width),
        _build_week_row(chart, timeline_width, left_column_width),
        Text("─" * (left_column_width + timeline_width), style="dim"),
    ]

    if not chart["lanes"]:
        elements.append(Text("No projects to display", style="dim"))

    for lane in chart["lanes"]:
        elements.extend(_build_lane_rows(lane, timeline_width, left_column_width))

    return Group(*elements)


def print_chart(
    console: Console, chart: ChartLayout, left_column_width: int = 24
) -> None:
    console.print(
        Padding(render_chart(chart, console.width, left_column_width), (1, 0, 0, 0))
    )
