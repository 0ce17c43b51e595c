# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from phasechart.model.date_span import DateSpan
from phasechart.model.phase import Phase
from phasechart.model.record import Record, get_phase_interval
from phasechart.time import first_of_month

FALLBACK_SPAN_MONTHS = 6


def compute_date_span(records: list[Record], today: pendulum.Date) -> DateSpan:
    """
    Compute the month-aligned date range covered by every phase of every record.

    Unparsable start or end dates are skipped. When no usable bounds remain the
    span falls back to today through six months from today. The result always
    starts on the first of a month and ends (exclusively) on the first of the
    month after the latest end date.

    Args:
        records: Parsed project records
        today: Reference date for the fallback span

    Returns:
        DateSpan with month-aligned start and exclusive end
    """
    earliest: Optional[pendulum.Date] = None
    latest: Optional[pendulum.Date] = None

    for record in records:
        for phase in Phase:
            interval = get_phase_interval(record, phase)
            if interval is None:
                continue

            start = interval["start"]
            end = interval["end"]
            if start is not None and (earliest is None or start < earliest):
                earliest = start
            if end is not None and (latest is None or end > latest):
                latest = end

    if earliest is None or latest is None or earliest > latest:
        earliest = today
        latest = today.add(months=FALLBACK_SPAN_MONTHS)

    return {
        "start": first_of_month(earliest),
        "end": first_of_month(latest).add(months=1),
    }
