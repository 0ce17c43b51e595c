# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from phasechart.model.interval import Interval
from phasechart.model.phase import Phase


class Record(TypedDict):
    name: str
    phases: dict[Phase, Interval]


def get_phase_interval(record: Record, phase: Phase) -> Optional[Interval]:
    return record["phases"].get(phase)
