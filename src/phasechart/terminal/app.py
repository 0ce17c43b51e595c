# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from phasechart import configuration
from phasechart.initialize import initialize
from phasechart.logger import configure_logging
from phasechart.repository.configuration import CONFIGURATION_REPO
from phasechart.terminal import configuration as configuration_commands
from phasechart.terminal import view
from phasechart.terminal.custom_typer import SourceAwareTyperGroup
from phasechart.view import state as view_state

app = typer.Typer(
    cls=SourceAwareTyperGroup,
    help="phasechart - Project phase timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(view.app, name="view, v")
app.add_typer(configuration_commands.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log debug details"),
    ] = False,
    config_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--config-dir",
            envvar="PHASECHART_CONFIG_DIR",
            file_okay=False,
            help="Directory holding config.yaml",
        ),
    ] = None,
) -> None:
    """
    phasechart - Project phase timelines in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if config_dir is not None:
        configuration.set_config_path(config_dir)
        CONFIGURATION_REPO.reset()
    initialize()
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
