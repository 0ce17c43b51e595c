# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

DEFAULT_VIEWPORT_MONTHS = 4


class Viewport(TypedDict):
    start: pendulum.Date
    months: int
