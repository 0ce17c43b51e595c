# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateSpan(TypedDict):
    """Month-aligned bounds of a dataset; ``end`` is exclusive."""

    start: pendulum.Date
    end: pendulum.Date
