from __future__ import annotations

import math
from collections.abc import Callable

import pendulum

from phasechart.color import PROJECT_COLORS, assign_project_colors
from phasechart.model.interval import Interval
from phasechart.model.phase import Phase
from phasechart.model.record import Record
from phasechart.model.viewport import Viewport
from phasechart.service.chart import (
    LANE_PADDING_PX,
    ROW_HEIGHT_PX,
    bar_geometry,
    build_overview_chart,
    build_phase_chart,
    is_visible,
    phase_intervals,
)

VIEWPORT: Viewport = {"start": pendulum.date(2024, 1, 1), "months": 4}
VIEW_START = pendulum.date(2024, 1, 1)
VIEW_END = pendulum.date(2024, 5, 1)
TOTAL_DAYS = 121


def _alpha(record_factory: Callable[..., Record]) -> Record:
    return record_factory(
        "Alpha",
        design=("A", "2024-01-10", "2024-01-20"),
        production=("B", "2024-01-15", "2024-01-25"),
    )


def test_phase_chart_places_each_owner_in_its_own_lane(
    record_factory: Callable[..., Record],
) -> None:
    records = [_alpha(record_factory)]
    colors = assign_project_colors(records)

    design = build_phase_chart(records, Phase.DESIGN, VIEWPORT, colors)
    production = build_phase_chart(records, Phase.PRODUCTION, VIEWPORT, colors)

    assert design["title"] == "Design Phase"
    assert design["lane_header"] == "Staff"
    assert [lane["name"] for lane in design["lanes"]] == ["A"]
    assert [lane["name"] for lane in production["lanes"]] == ["B"]

    bar = design["lanes"][0]["bars"][0]
    assert bar["label"] == "Alpha"
    assert bar["row"] == 0
    assert bar["top_px"] == 0
    assert bar["color"] == PROJECT_COLORS[0]
    assert bar["tooltip"] == "Alpha: 2024-01-10 to 2024-01-20"
    assert math.isclose(bar["left_percent"], 9 / TOTAL_DAYS * 100)
    assert math.isclose(bar["width_percent"], 10 / TOTAL_DAYS * 100)
    assert design["lanes"][0]["height_px"] == ROW_HEIGHT_PX + LANE_PADDING_PX
    assert production["lanes"][0]["bars"][0]["row"] == 0


def test_overview_chart_uses_fixed_phase_order(
    record_factory: Callable[..., Record],
) -> None:
    chart = build_overview_chart([_alpha(record_factory)], VIEWPORT)

    assert chart["title"] == "Project Overview"
    assert chart["lane_header"] == "Project"
    lane = chart["lanes"][0]
    assert lane["name"] == "Alpha"
    assert [(bar["label"], bar["row"]) for bar in lane["bars"]] == [("A", 0), ("B", 1)]
    assert [bar["color"] for bar in lane["bars"]] == [
        Phase.DESIGN.color,
        Phase.PRODUCTION.color,
    ]
    assert lane["bars"][1]["top_px"] == ROW_HEIGHT_PX
    assert lane["bars"][0]["tooltip"] == "design: A (2024-01-10 to 2024-01-20)"
    assert lane["height_px"] == 2 * ROW_HEIGHT_PX + LANE_PADDING_PX


def test_overview_compacts_rows_over_hidden_phases(
    record_factory: Callable[..., Record],
) -> None:
    record = record_factory(
        "Beta",
        design=("A", "2023-06-01", "2023-07-01"),
        estimating=("B", "2024-01-02", "2024-01-05"),
        production=("C", "2024-02-01", "bad date"),
    )

    lane = build_overview_chart([record], VIEWPORT)["lanes"][0]

    assert [(bar["label"], bar["row"]) for bar in lane["bars"]] == [("B", 0)]
    assert lane["height_px"] == ROW_HEIGHT_PX + LANE_PADDING_PX


def test_overview_uses_first_record_for_duplicate_names(
    record_factory: Callable[..., Record],
) -> None:
    records = [
        record_factory("Alpha", design=("First", "2024-01-02", "2024-01-05")),
        record_factory("Alpha", design=("Second", "2024-01-02", "2024-01-05")),
        record_factory("Empty"),
    ]

    lanes = build_overview_chart(records, VIEWPORT)["lanes"]

    assert [lane["name"] for lane in lanes] == ["Alpha", "Empty"]
    assert lanes[0]["bars"][0]["label"] == "First"
    assert lanes[1]["bars"] == []
    assert lanes[1]["height_px"] == LANE_PADDING_PX


def test_phase_chart_packs_overlapping_projects(
    record_factory: Callable[..., Record],
) -> None:
    records = [
        record_factory("Late", design=("A", "2024-01-20", "2024-01-25")),
        record_factory("Early", design=("A", "2024-01-01", "2024-01-10")),
        record_factory("Middle", design=("A", "2024-01-05", "2024-01-15")),
        record_factory("Other", design=("B", "2024-01-05", "2024-01-15")),
    ]

    chart = build_phase_chart(records, Phase.DESIGN, VIEWPORT, {})

    lane_a, lane_b = chart["lanes"]
    assert [(bar["label"], bar["row"]) for bar in lane_a["bars"]] == [
        ("Early", 0),
        ("Middle", 1),
        ("Late", 0),
    ]
    assert lane_a["height_px"] == 2 * ROW_HEIGHT_PX + LANE_PADDING_PX
    assert lane_b["bars"][0]["row"] == 0
    assert lane_b["bars"][0]["color"] == "white"


def test_phase_chart_drops_invisible_and_invalid_intervals(
    record_factory: Callable[..., Record],
) -> None:
    records = [
        record_factory("Past", design=("A", "2023-01-01", "2023-02-01")),
        record_factory("Broken", design=("A", "someday", "2024-01-10")),
        record_factory("Future", design=("B", "2024-06-01", "2024-07-01")),
    ]

    chart = build_phase_chart(records, Phase.DESIGN, VIEWPORT, {})

    assert [lane["name"] for lane in chart["lanes"]] == ["A", "B"]
    assert all(lane["bars"] == [] for lane in chart["lanes"])
    assert all(
        lane["height_px"] == ROW_HEIGHT_PX + LANE_PADDING_PX for lane in chart["lanes"]
    )


def test_marker_strip_is_added_to_lane_height(
    record_factory: Callable[..., Record],
) -> None:
    records = [_alpha(record_factory)]

    chart = build_phase_chart(records, Phase.DESIGN, VIEWPORT, {}, marker_strip_px=16)
    overview = build_overview_chart(records, VIEWPORT, marker_strip_px=16)

    assert chart["lanes"][0]["height_px"] == ROW_HEIGHT_PX + LANE_PADDING_PX + 16
    assert overview["lanes"][0]["height_px"] == 2 * ROW_HEIGHT_PX + LANE_PADDING_PX + 16


def test_chart_carries_grid(record_factory: Callable[..., Record]) -> None:
    chart = build_overview_chart([_alpha(record_factory)], VIEWPORT)

    assert chart["viewport_end"] == VIEW_END
    assert [band["label"] for band in chart["month_bands"]] == ["Jan", "Feb", "Mar", "Apr"]
    assert chart["week_markers"][0]["label"] == "1/1"


def test_bar_geometry_clamps_left_edge() -> None:
    geometry = bar_geometry(
        pendulum.date(2023, 12, 20), pendulum.date(2024, 1, 10), VIEW_START, TOTAL_DAYS
    )

    assert geometry["left_percent"] == 0.0
    assert math.isclose(geometry["width_percent"], 9 / TOTAL_DAYS * 100)


def test_bar_geometry_clamps_width() -> None:
    geometry = bar_geometry(
        pendulum.date(2023, 1, 1), pendulum.date(2025, 1, 1), VIEW_START, TOTAL_DAYS
    )

    assert geometry == {"left_percent": 0.0, "width_percent": 100.0}


def test_bar_geometry_past_viewport_end_is_not_clipped() -> None:
    geometry = bar_geometry(
        pendulum.date(2024, 4, 1), pendulum.date(2024, 6, 30), VIEW_START, TOTAL_DAYS
    )

    assert math.isclose(geometry["left_percent"], 91 / TOTAL_DAYS * 100)
    assert math.isclose(geometry["width_percent"], 90 / TOTAL_DAYS * 100)


def test_visibility_is_inclusive(interval_factory: Callable[..., Interval]) -> None:
    ends_on_start = interval_factory("X", "A", "2023-12-01", "2024-01-01")
    starts_on_end = interval_factory("Y", "A", "2024-05-01", "2024-05-10")
    before = interval_factory("Z", "A", "2023-12-01", "2023-12-31")

    assert is_visible(ends_on_start, VIEW_START, VIEW_END)
    assert is_visible(starts_on_end, VIEW_START, VIEW_END)
    assert not is_visible(before, VIEW_START, VIEW_END)


def test_phase_intervals_skips_records_without_phase(
    record_factory: Callable[..., Record],
) -> None:
    records = [_alpha(record_factory), record_factory("Beta", estimating=("C", None, None))]

    assert [i["label"] for i in phase_intervals(records, Phase.DESIGN)] == ["Alpha"]
    assert [i["owner"] for i in phase_intervals(records, Phase.ESTIMATING)] == ["C"]


def test_project_colors_cycle_in_first_appearance_order(
    record_factory: Callable[..., Record],
) -> None:
    names = [f"P{index}" for index in range(len(PROJECT_COLORS) + 2)]
    records = [record_factory(name) for name in names] + [record_factory("P0")]

    colors = assign_project_colors(records)

    assert len(colors) == len(names)
    assert colors["P0"] == PROJECT_COLORS[0]
    assert colors[f"P{len(PROJECT_COLORS)}"] == PROJECT_COLORS[0]
    assert colors[f"P{len(PROJECT_COLORS) + 1}"] == PROJECT_COLORS[1]
