# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding

from phasechart.repository.configuration import CONFIGURATION_REPO

console = Console()


def _show_data_source(ctx: click.Context) -> None:
    """Show the configured data source above help text, once per context chain"""
    if hasattr(ctx, "_source_shown") and ctx._source_shown:
        return

    current: Optional[click.Context] = ctx
    while current is not None:
        current._source_shown = True  # type: ignore[attr-defined]
        current = current.parent

    try:
        config = CONFIGURATION_REPO.get_config()
    except (OSError, ValueError):
        # No configuration written yet
        return

    source = config["source"] or config["sheet_id"] or "not configured"
    console.print()
    console.print(
        Padding(f"[bold plum1]Data source: {escape(source)}[/bold plum1]", (0, 0, 0, 1)),
        markup=True,
        highlight=False,
    )


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name


class SourceAwareTyperGroup(AliasedTyperGroup):
    """Aliased group that lists commands in a fixed order and shows the data source in help"""

    desired_order = [
        "view, v",
        "config, c",
        "overview, o",
        "phase, p",
        "all, a",
        "span, s",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in desired order (not insertion order due to Typer internals)"""
        result = []
        for cmd_name in self.desired_order:
            if cmd_name in self.commands:
                result.append(cmd_name)

        # Add any commands not in the desired order list
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)

        return result

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_data_source(ctx)

        # Call original format_help to generate standard help
        super().format_help(ctx, formatter)
