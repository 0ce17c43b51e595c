# SPDX-License-Identifier: MIT

import pendulum

from phasechart.model.layout import MonthBand, WeekMarker
from phasechart.time import days_between, month_label, week_label


def total_viewport_days(start: pendulum.Date, end: pendulum.Date) -> int:
    return days_between(start, end)


def month_bands(
    start: pendulum.Date, end: pendulum.Date, locale: str = "en"
) -> list[MonthBand]:
    """
    Build one header band per calendar month from start up to (not including) end.

    Each band's width is the full length of its month relative to the viewport,
    so the widths only sum to 100 when the viewport starts on a month boundary.

    Args:
        start: First day of the viewport
        end: Exclusive end of the viewport
        locale: Locale used for the short month names

    Returns:
        List of month bands in calendar order
    """
    total_days = total_viewport_days(start, end)
    if total_days <= 0:
        return []

    bands: list[MonthBand] = []
    current = start
    while current < end:
        bands.append(
            {
                "label": month_label(current, locale),
                "width_percent": current.days_in_month / total_days * 100,
            }
        )
        current = current.add(months=1)

    return bands


def week_markers(start: pendulum.Date, end: pendulum.Date) -> list[WeekMarker]:
    """
    Build a tick for every Monday from start up to (not including) end.

    Positions are percentages of the viewport measured from its start.
    """
    total_days = total_viewport_days(start, end)
    if total_days <= 0:
        return []

    current = start
    while current.day_of_week != pendulum.MONDAY:
        current = current.add(days=1)

    markers: list[WeekMarker] = []
    while current < end:
        markers.append(
            {
                "label": week_label(current),
                "position_percent": days_between(start, current) / total_days * 100,
            }
        )
        current = current.add(weeks=1)

    return markers
