from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Optional

import pytest

from phasechart import configuration
from phasechart.model.interval import Interval
from phasechart.model.phase import Phase
from phasechart.model.record import Record
from phasechart.repository.configuration import CONFIGURATION_REPO
from phasechart.time import parse_calendar_date
from phasechart.view import state as view_state

SAMPLE_CSV = """Project,Design Owner,Design Start,Design End,Estimating Owner,Estimating Start,Estimating End,Production Owner,Production Start,Production End
Alpha,Ana,2024-01-10,2024-01-20,n/a,,,Ben,2024-01-15,2024-01-25
Beta,Ana,2024-01-15,2024-02-10,Cara,2024-02-01,2024-02-20,Ben,2024-02-15,2024-03-20
Gamma,Dev,2024-02-01,2024-02-28,,,,N/A,,
"""


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path) -> Generator[Path, None, None]:
    original = configuration.CONFIG_PATH
    directory = tmp_path / "config"
    configuration.set_config_path(directory)
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield directory
    configuration.set_config_path(original)
    CONFIGURATION_REPO.reset()


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_path(tmp_path: Path) -> Path:
    path = tmp_path / "projects.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


def make_interval(
    label: str,
    owner: str,
    start: Optional[str],
    end: Optional[str],
    phase: Phase = Phase.DESIGN,
) -> Interval:
    return {
        "label": label,
        "owner": owner,
        "phase": phase,
        "start": parse_calendar_date(start),
        "end": parse_calendar_date(end),
        "start_text": start or "",
        "end_text": end or "",
    }


def make_record(name: str, **phases: tuple[str, Optional[str], Optional[str]]) -> Record:
    record: Record = {"name": name, "phases": {}}
    for phase_name, (owner, start, end) in phases.items():
        phase = Phase(phase_name)
        record["phases"][phase] = make_interval(name, owner, start, end, phase)
    return record


@pytest.fixture
def interval_factory() -> Callable[..., Interval]:
    return make_interval


@pytest.fixture
def record_factory() -> Callable[..., Record]:
    return make_record
