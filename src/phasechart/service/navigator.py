# SPDX-License-Identifier: MIT

import pendulum

from phasechart.model.date_span import DateSpan
from phasechart.model.viewport import DEFAULT_VIEWPORT_MONTHS, Viewport
from phasechart.time import first_of_month


def initialize_viewport(
    today: pendulum.Date, months: int = DEFAULT_VIEWPORT_MONTHS
) -> Viewport:
    """Start the viewport on the first day of today's month, regardless of the data."""
    if months < 1:
        raise ValueError(f"Viewport must span at least one month, got {months}")
    return {"start": first_of_month(today), "months": months}


def viewport_end(viewport: Viewport) -> pendulum.Date:
    return viewport["start"].add(months=viewport["months"])


def page_backward(viewport: Viewport, span: DateSpan) -> Viewport:
    """Move one month back unless that would start before the span."""
    proposed = viewport["start"].subtract(months=1)
    if proposed >= span["start"]:
        return {"start": proposed, "months": viewport["months"]}
    return viewport


def page_forward(viewport: Viewport, span: DateSpan) -> Viewport:
    """Move one month forward unless the window would end after the span."""
    proposed: Viewport = {
        "start": viewport["start"].add(months=1),
        "months": viewport["months"],
    }
    if viewport_end(proposed) <= span["end"]:
        return proposed
    return viewport


class ViewportNavigator:
    """Owns the visible window of one or more charts over a dataset's span."""

    def __init__(self, span: DateSpan, viewport: Viewport) -> None:
        self.span = span
        self.viewport = viewport

    @property
    def end(self) -> pendulum.Date:
        return viewport_end(self.viewport)

    def page_backward(self) -> bool:
        """Returns True when the viewport moved."""
        previous = self.viewport
        self.viewport = page_backward(previous, self.span)
        return self.viewport is not previous

    def page_forward(self) -> bool:
        """Returns True when the viewport moved."""
        previous = self.viewport
        self.viewport = page_forward(previous, self.span)
        return self.viewport is not previous
