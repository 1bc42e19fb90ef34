# topmark:header:start
#
#   project      : envexport
#   file         : version.py
#   file_relpath : src/envexport/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport `version` command.

Prints the current envexport version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from envexport.cli.cmd_common import get_console
from envexport.cli.options import OutputFormat, output_format_option
from envexport.constants import ENVEXPORT_VERSION

if TYPE_CHECKING:
    from envexport.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of envexport.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of envexport.

    Args:
        ctx (click.Context): Current Click context.
        output_format (str): ``text`` or ``json``.
    """
    console: ConsoleLike = get_console(ctx)

    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        console.print(json.dumps({"version": ENVEXPORT_VERSION}))
    else:
        console.print(console.styled(ENVEXPORT_VERSION, bold=True))
