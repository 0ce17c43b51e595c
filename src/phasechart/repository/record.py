# SPDX-License-Identifier: MIT

import csv
import io
import logging
from pathlib import Path

import httpx

from phasechart.model.interval import Interval
from phasechart.model.phase import Phase
from phasechart.model.record import Record
from phasechart.time import parse_calendar_date

logger = logging.getLogger(__name__)

SHEET_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"

ABSENT_OWNER = "n/a"

# Column of each phase's owner; start and end dates follow it
PHASE_COLUMNS: dict[Phase, int] = {
    Phase.DESIGN: 1,
    Phase.ESTIMATING: 4,
    Phase.PRODUCTION: 7,
}
COLUMN_COUNT = 10


def sheet_export_url(sheet_id: str) -> str:
    return SHEET_EXPORT_URL.format(sheet_id=sheet_id)


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def parse_records_csv(text: str) -> list[Record]:
    """
    Parse the project spreadsheet export into records.

    The first row is a header. Each following row holds the project name and
    then owner, start and end for the design, estimating and production phases.
    A phase is only kept when its owner is set and is not "n/a". Dates that do
    not parse are kept as None alongside their original text.

    Args:
        text: CSV document

    Returns:
        One record per non-blank data row, in file order
    """
    records: list[Record] = []
    rows = csv.reader(io.StringIO(text))

    for index, row in enumerate(rows):
        if index == 0:
            continue

        values = [value.strip() for value in row]
        if not any(values):
            continue
        values += [""] * (COLUMN_COUNT - len(values))

        name = values[0]
        record: Record = {"name": name, "phases": {}}

        for phase, column in PHASE_COLUMNS.items():
            owner = values[column]
            if owner == "" or owner.lower() == ABSENT_OWNER:
                continue

            start_text = values[column + 1]
            end_text = values[column + 2]
            interval: Interval = {
                "label": name,
                "owner": owner,
                "phase": phase,
                "start": parse_calendar_date(start_text),
                "end": parse_calendar_date(end_text),
                "start_text": start_text,
                "end_text": end_text,
            }
            record["phases"][phase] = interval

        records.append(record)

    return records


def fetch_csv(url: str, timeout: float) -> str:
    response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return response.text


def load_records(source: str, timeout: float = 10.0) -> list[Record]:
    """
    Load records from an http(s) URL or a local CSV file.

    A failed fetch or unreadable file is logged and yields an empty dataset so
    the charts still render.
    """
    try:
        if is_url(source):
            text = fetch_csv(source, timeout)
        else:
            text = Path(source).expanduser().read_text(encoding="utf-8")
    except httpx.HTTPError as e:
        logger.warning("Error fetching project data from %s: %s", source, e)
        return []
    except OSError as e:
        logger.warning("Error reading project data from %s: %s", source, e)
        return []

    records = parse_records_csv(text)
    logger.debug("Loaded %d records from %s", len(records), source)
    return records
