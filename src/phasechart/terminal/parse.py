# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from phasechart.model.phase import Phase, phase_from_str
from phasechart.time import month_from_str, validate_locale


def parse_month(month_param: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a --start value (YYYY-MM or YYYY-MM-DD) into the first day of its month."""
    if month_param is None:
        return None
    try:
        return month_from_str(str(month_param))
    except ValueError as e:
        raise typer.BadParameter(f"Invalid month: {e}")


def parse_phase(phase_param: str) -> Phase:
    try:
        return phase_from_str(phase_param)
    except ValueError:
        valid = ", ".join(phase.value for phase in Phase)
        raise typer.BadParameter(f"Phase must be one of {valid}, got '{phase_param}'")



def parse_locale(locale_param: Optional[str]) -> Optional[str]:
    if locale_param is None:
        return None
    try:
        return validate_locale(str(locale_param))
    except ValueError:
        raise typer.BadParameter(f"Unknown locale '{locale_param}'")
