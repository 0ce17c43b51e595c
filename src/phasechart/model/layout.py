# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from phasechart.model.viewport import Viewport


class MonthBand(TypedDict):
    label: str
    width_percent: float


class WeekMarker(TypedDict):
    label: str
    position_percent: float


class BarGeometry(TypedDict):
    left_percent: float
    width_percent: float


class Bar(TypedDict):
    label: str
    tooltip: str
    color: str
    row: int
    left_percent: float
    width_percent: float
    top_px: int


class Lane(TypedDict):
    name: str
    bars: list[Bar]
    height_px: int


class ChartLayout(TypedDict):
    title: str
    lane_header: str
    viewport: Viewport
    viewport_end: pendulum.Date
    month_bands: list[MonthBand]
    week_markers: list[WeekMarker]
    lanes: list[Lane]
