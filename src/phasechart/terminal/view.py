# SPDX-License-Identifier: MIT

from typing import Annotated, Callable, Optional

import pendulum
import typer
from rich.console import Console
from rich.prompt import Prompt

from phasechart.color import assign_project_colors
from phasechart.configuration import Configuration
from phasechart.model.layout import ChartLayout
from phasechart.model.phase import Phase
from phasechart.model.record import Record
from phasechart.model.viewport import Viewport
from phasechart.repository.configuration import CONFIGURATION_REPO
from phasechart.repository.record import load_records, sheet_export_url
from phasechart.service.chart import build_overview_chart, build_phase_chart
from phasechart.service.date_span import compute_date_span
from phasechart.service.navigator import ViewportNavigator, initialize_viewport
from phasechart.terminal.custom_typer import SourceAwareTyperGroup
from phasechart.terminal.parse import parse_month, parse_phase
from phasechart.time import date_to_display_str, today_local
from phasechart.view.chart import print_chart
from phasechart.view.header import header

app = typer.Typer(cls=SourceAwareTyperGroup, no_args_is_help=True)

console = Console()

type ChartBuilder = Callable[[list[Record], Viewport, Configuration], ChartLayout]

SourceOption = Annotated[
    Optional[str],
    typer.Option(
        "--source",
        "-src",
        help="CSV URL or file path (defaults to the configured source or sheet id)",
    ),
]
StartOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--start",
        "-s",
        parser=parse_month,
        help="First month shown (YYYY-MM, defaults to the current month)",
    ),
]
MonthsOption = Annotated[
    Optional[int],
    typer.Option(
        "--months",
        "-m",
        min=1,
        help="Number of months visible at once (defaults to viewport_months)",
    ),
]
InteractiveOption = Annotated[
    bool,
    typer.Option(
        "--interactive",
        "-i",
        help="Page through months with p(revious) / n(ext) / q(uit)",
    ),
]


def resolve_source(source: Optional[str], config: Configuration) -> str:
    if source is not None:
        return source
    if config["source"] is not None:
        return config["source"]
    if config["sheet_id"] is not None:
        return sheet_export_url(config["sheet_id"])

    console.print(
        "[red]No data source configured.[/red] "
        "Pass --source or run [bold]phasechart config set --source[/bold]."
    )
    raise typer.Exit(1)


def _overview_builder(
    records: list[Record], viewport: Viewport, config: Configuration
) -> ChartLayout:
    return build_overview_chart(
        records,
        viewport,
        locale=config["locale"],
        marker_strip_px=config["marker_strip_px"],
    )


def _phase_builder(phase: Phase) -> ChartBuilder:
    def build(
        records: list[Record], viewport: Viewport, config: Configuration
    ) -> ChartLayout:
        return build_phase_chart(
            records,
            phase,
            viewport,
            assign_project_colors(records),
            locale=config["locale"],
            marker_strip_px=config["marker_strip_px"],
        )

    return build


def show_charts(
    builders: list[ChartBuilder],
    source: Optional[str],
    start: Optional[pendulum.Date],
    months: Optional[int],
    interactive: bool,
) -> None:
    """
    Load the data once and render the given charts over a shared viewport.

    In interactive mode every paging request recomputes all charts for the new
    window; a request past the data's span leaves the window where it is.
    """
    config = CONFIGURATION_REPO.get_config()
    resolved_source = resolve_source(source, config)

    records = load_records(resolved_source, config["fetch_timeout_seconds"])
    span = compute_date_span(records, today_local())
    viewport = initialize_viewport(
        start if start is not None else today_local(),
        months if months is not None else config["viewport_months"],
    )
    navigator = ViewportNavigator(span, viewport)

    header(console, resolved_source)

    render = True
    while True:
        if render:
            for build in builders:
                chart = build(records, navigator.viewport, config)
                print_chart(console, chart, config["left_column_width"])

        if not interactive:
            break

        choice = Prompt.ask(
            "\nprevious (p), next (n), quit (q)",
            choices=["p", "n", "q"],
            default="q",
            console=console,
        )
        if choice == "q":
            break

        if choice == "p":
            render = navigator.page_backward()
        else:
            render = navigator.page_forward()
        if not render:
            console.print("[dim]Already at the edge of the project data[/dim]")


@app.command("overview, o")
def overview(
    source: SourceOption = None,
    start: StartOption = None,
    months: MonthsOption = None,
    interactive: InteractiveOption = False,
) -> None:
    """Show every project with one row per phase."""
    show_charts([_overview_builder], source, start, months, interactive)


@app.command("phase, p", no_args_is_help=True)
def phase(
    name: Annotated[
        str, typer.Argument(help="Phase to chart: design, estimating or production")
    ],
    source: SourceOption = None,
    start: StartOption = None,
    months: MonthsOption = None,
    interactive: InteractiveOption = False,
) -> None:
    """Show one phase with a lane per staff member."""
    selected = parse_phase(name)
    show_charts([_phase_builder(selected)], source, start, months, interactive)


@app.command("all, a")
def all_charts(
    source: SourceOption = None,
    start: StartOption = None,
    months: MonthsOption = None,
    interactive: InteractiveOption = False,
) -> None:
    """Show the overview followed by the design, estimating and production charts."""
    builders = [_overview_builder] + [_phase_builder(phase) for phase in Phase]
    show_charts(builders, source, start, months, interactive)


@app.command("span, s")
def span(source: SourceOption = None) -> None:
    """Show the month-aligned date range covered by the project data."""
    config = CONFIGURATION_REPO.get_config()
    resolved_source = resolve_source(source, config)

    records = load_records(resolved_source, config["fetch_timeout_seconds"])
    date_span = compute_date_span(records, today_local())

    header(console, resolved_source)
    console.print()
    console.print(f"[bold]Projects:[/bold] {len(records)}")
    console.print(
        f"[bold]Span:[/bold] {date_to_display_str(date_span['start'])} "
        f"to {date_to_display_str(date_span['end'].subtract(days=1))}"
    )
