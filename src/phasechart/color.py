# SPDX-License-Identifier: MIT

from phasechart.model.record import Record

# Distinct bar colors for projects in the per-phase charts
PROJECT_COLORS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEEAD", "#D4A5A5",
    "#FF9F1C", "#2EC4B6", "#E71D36", "#011627", "#7DCEA0", "#E8C547",
    "#4A90E2", "#50E3C2", "#B8E986", "#D6B1FF", "#FF9EAA", "#FFD93D",
    "#6C5CE7", "#A8E6CF", "#DCEDC1", "#FFD3B6", "#FFAAA5", "#98DDCA",
    "#D5ECC2", "#FFD3B5", "#FFAAA7", "#FF8B94", "#A8D8EA", "#FF61A6",
]  # fmt: skip

HEADER_COLOR = "dark_orange"
SUB_HEADER_COLOR = "sandy_brown"
LANE_NAME_COLOR = "plum1"
GRID_COLOR = "grey50"


def assign_project_colors(records: list[Record]) -> dict[str, str]:
    """Give every distinct project name a palette color, cycling in order of first appearance."""
    colors: dict[str, str] = {}
    for record in records:
        name = record["name"]
        if name not in colors:
            colors[name] = PROJECT_COLORS[len(colors) % len(PROJECT_COLORS)]
    return colors
