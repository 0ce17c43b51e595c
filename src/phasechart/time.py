# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

_US_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]\S.*)?$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def parse_calendar_date(text: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a spreadsheet cell into a calendar date.

    Accepts YYYY-MM-DD (any time component is dropped) and M/D/YYYY. Partial
    values such as a bare month name, day number or time are rejected rather
    than completed from today's date. Empty or unparsable text yields None.
    """
    if text is None:
        return None

    value = text.strip()
    if value == "":
        return None

    us_match = _US_DATE_PATTERN.match(value)
    if us_match:
        month, day, year = (int(group) for group in us_match.groups())
        try:
            return pendulum.date(year, month, day)
        except ValueError:
            return None

    if not _ISO_DATE_PATTERN.match(value):
        return None

    try:
        parsed = pendulum.parse(value, strict=True)
    except (ValueError, OverflowError):
        return None

    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    return None


def first_of_month(date: pendulum.Date) -> pendulum.Date:
    return date.start_of("month")


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of whole days from start to end."""
    return start.diff(end, False).in_days()


def month_label(date: pendulum.Date, locale: str = "en") -> str:
    return date.format("MMM", locale=locale)


def validate_locale(locale: str) -> str:
    """Raise ValueError when pendulum has no translations for the locale."""
    month_label(pendulum.date(2000, 1, 1), locale)
    return locale


def week_label(date: pendulum.Date) -> str:
    return f"{date.month}/{date.day}"


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date)


def month_from_str(value: str) -> pendulum.Date:
    """Parse a YYYY-MM (or YYYY-MM-DD) string into the first day of that month."""
    match = re.match(r"^(\d{4})-(\d{1,2})(?:-\d{1,2})?$", value.strip())
    if not match:
        raise ValueError(f"Expected YYYY-MM, got '{value}'")
    year, month = int(match.group(1)), int(match.group(2))
    return pendulum.date(year, month, 1)
