# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from phasechart import configuration
from phasechart.repository.configuration import CONFIGURATION_REPO
from phasechart.terminal.custom_typer import SourceAwareTyperGroup
from phasechart.terminal.parse import parse_locale
from phasechart.view import state as view_state

app = typer.Typer(cls=SourceAwareTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("source", config["source"] or "None")
    table.add_row("sheet_id", config["sheet_id"] or "None")
    table.add_row("viewport_months", str(config["viewport_months"]))
    table.add_row("fetch_timeout_seconds", str(config["fetch_timeout_seconds"]))
    table.add_row("locale", config["locale"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("marker_strip_px", str(config["marker_strip_px"]))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    source: Annotated[
        Optional[str],
        typer.Option("--source", help="CSV URL or file path for project data"),
    ] = None,
    remove_source: Annotated[
        bool, typer.Option("--remove-source", help="Remove the data source")
    ] = False,
    sheet_id: Annotated[
        Optional[str],
        typer.Option(
            "--sheet-id",
            help="Google Sheets id, used when no source is set",
        ),
    ] = None,
    remove_sheet_id: Annotated[
        bool, typer.Option("--remove-sheet-id", help="Remove the sheet id")
    ] = False,
    viewport_months: Annotated[
        Optional[int],
        typer.Option(
            "--viewport-months",
            min=1,
            help="Number of months visible at once",
        ),
    ] = None,
    fetch_timeout_seconds: Annotated[
        Optional[float],
        typer.Option(
            "--fetch-timeout",
            min=0.1,
            help="Seconds to wait for the data source",
        ),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option(
            "--locale",
            parser=parse_locale,
            help="Locale for month names, e.g. en, fr, de",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the application header above charts",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            min=4,
            help="Width of the lane name column",
        ),
    ] = None,
    marker_strip_px: Annotated[
        Optional[int],
        typer.Option(
            "--marker-strip-px",
            min=0,
            help="Extra lane height reserved for week markers",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        source=source,
        remove_source=remove_source,
        sheet_id=sheet_id,
        remove_sheet_id=remove_sheet_id,
        viewport_months=viewport_months,
        fetch_timeout_seconds=fetch_timeout_seconds,
        locale=locale,
        show_header=show_header,
        left_column_width=left_column_width,
        marker_strip_px=marker_strip_px,
    )
    CONFIGURATION_REPO.flush()

    if show_header is not None:
        view_state.set_show_header(show_header)

    view()
