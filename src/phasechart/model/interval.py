# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from phasechart.model.phase import Phase


class Interval(TypedDict):
    label: str
    owner: str
    phase: Phase
    start: Optional[pendulum.Date]
    end: Optional[pendulum.Date]
    start_text: str
    end_text: str


class PlacedInterval(TypedDict):
    interval: Interval
    row: int
