# topmark:header:start
#
#   project      : envexport
#   file         : fields.py
#   file_relpath : src/envexport/cli/commands/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport `fields` command.

Lists the variables a record type can export, one per line:

    NAME     PATH   TYPE   [omitempty] [unsupported]

Reachable fields of unsupported type are flagged; exporting a record where such a
field holds a non-empty value fails.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING

import click

from envexport.cli.cmd_common import get_console, resolve_record_class
from envexport.cli.options import OutputFormat, output_format_option, tag_key_option
from envexport.core.fields import ExportedName, iter_exported_names

if TYPE_CHECKING:
    from envexport.cli.console import ConsoleLike


def _format_row(entry: ExportedName, name_width: int, path_width: int) -> str:
    flags: list[str] = []
    if entry.omit_empty:
        flags.append("omitempty")
    if not entry.supported:
        flags.append("unsupported")
    row: str = f"{entry.name:<{name_width}}  {entry.path:<{path_width}}  {entry.type_text}"
    if flags:
        row += "  " + " ".join(f"[{flag}]" for flag in flags)
    return row


@click.command(
    name="fields",
    help="List the variables RECORD (module:QualifiedName of a dataclass) can export.",
)
@click.argument("record_spec", metavar="RECORD")
@tag_key_option
@output_format_option
@click.pass_context
def fields_command(
    ctx: click.Context,
    *,
    record_spec: str,
    tag_key: str,
    output_format: str,
) -> None:
    """List the exportable variables of RECORD.

    Args:
        ctx (click.Context): Current Click context.
        record_spec (str): ``module:QualifiedName`` of the record dataclass.
        tag_key (str): Dataclass metadata key holding the export tags.
        output_format (str): ``text`` or ``json``.
    """
    console: ConsoleLike = get_console(ctx)
    record_class: type = resolve_record_class(record_spec)
    entries: list[ExportedName] = list(iter_exported_names(record_class, tag_key=tag_key))

    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        console.print(json.dumps([asdict(entry) for entry in entries], indent=2))
        return

    if not entries:
        console.print(f"{record_spec} exports no variables.")
        return

    name_width: int = max(len(entry.name) for entry in entries)
    path_width: int = max(len(entry.path) for entry in entries)
    for entry in entries:
        row: str = _format_row(entry, name_width, path_width)
        if not entry.supported:
            row = console.styled(row, fg="yellow")
        console.print(row)
