# topmark:header:start
#
#   project      : envexport
#   file         : export.py
#   file_relpath : src/envexport/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport `export` command.

Builds a record from an optional TOML values document and prints its shell
``export`` statements, ready to be sourced:

    envexport export myapp.settings:Settings --values prod.toml > prod.env
    . ./prod.env
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from envexport.cli.cmd_common import get_console, read_values, resolve_record_class
from envexport.cli.errors import EnvExportDataError, EnvExportIOError
from envexport.cli.options import tag_key_option
from envexport.config.logging import get_logger
from envexport.constants import OUTPUT_ENCODING
from envexport.core.builder import build_record
from envexport.core.encoder import dumps
from envexport.core.errors import RecordBuildError, UnsupportedTypeError

if TYPE_CHECKING:
    from envexport.cli.console import ConsoleLike
    from envexport.config.loaders import ValuesTable
    from envexport.config.logging import EnvExportLogger

logger: EnvExportLogger = get_logger(__name__)


@click.command(
    name="export",
    help="Print the shell export statements of RECORD (module:QualifiedName of a dataclass).",
)
@click.argument("record_spec", metavar="RECORD")
@click.option(
    "--values",
    "values_path",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=None,
    help="TOML document with the field values ('-' reads STDIN). Defaults apply otherwise.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the statements to this file instead of STDOUT.",
)
@tag_key_option
@click.pass_context
def export_command(
    ctx: click.Context,
    *,
    record_spec: str,
    values_path: Path | None,
    output_path: Path | None,
    tag_key: str,
) -> None:
    """Export the record named by RECORD as shell statements.

    Args:
        ctx (click.Context): Current Click context.
        record_spec (str): ``module:QualifiedName`` of the record dataclass.
        values_path (Path | None): TOML values document, ``-`` for STDIN.
        output_path (Path | None): Output file; STDOUT when ``None``.
        tag_key (str): Dataclass metadata key holding the export tags.
    """
    console: ConsoleLike = get_console(ctx)

    record_class: type = resolve_record_class(record_spec)
    values: ValuesTable = read_values(values_path)

    try:
        record: Any = build_record(record_class, values)
        text: str = dumps(record, tag_key=tag_key)
    except (RecordBuildError, UnsupportedTypeError) as exc:
        raise EnvExportDataError(str(exc)) from exc

    if output_path is None:
        console.print(text, nl=False)
        return

    try:
        output_path.write_text(text, encoding=OUTPUT_ENCODING)
    except OSError as exc:
        raise EnvExportIOError(f"Cannot write {output_path}: {exc}") from exc
    logger.info("Wrote %d export line(s) to %s", text.count("\n"), output_path)
