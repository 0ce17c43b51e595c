# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding

from phasechart.color import HEADER_COLOR, SUB_HEADER_COLOR
from phasechart.view.state import get_show_header


def header(console: Console, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        sub_header: Optional sub-header text, typically the data source
    """
    if not get_show_header():
        return

    console.print(Padding(f"[{HEADER_COLOR}]phasechart[/{HEADER_COLOR}]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(
            Padding(
                f"[{SUB_HEADER_COLOR}]{escape(sub_header)}[/{SUB_HEADER_COLOR}]", (0, 1)
            )
        )
