# topmark:header:start
#
#   project      : envexport
#   file         : cmd_common.py
#   file_relpath : src/envexport/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers encapsulate plumbing shared by several commands: looking up the
console, resolving the RECORD argument, and reading the values document. They
translate library errors into CLI errors carrying the right exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from envexport.cli.console import ClickConsole
from envexport.cli.errors import (
    EnvExportConfigError,
    EnvExportFileNotFoundError,
    EnvExportIOError,
    EnvExportUsageError,
)
from envexport.config.loaders import ValuesParseError, load_values_toml, parse_values_toml
from envexport.config.logging import get_logger
from envexport.core.kinds import is_record_type
from envexport.utils.introspection import ObjectSpecError, import_object

if TYPE_CHECKING:
    from envexport.cli.console import ConsoleLike
    from envexport.config.loaders import ValuesTable
    from envexport.config.logging import EnvExportLogger

logger: EnvExportLogger = get_logger(__name__)

STDIN_PATH: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context, creating a plain one if absent."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def resolve_record_class(spec: str) -> type:
    """Resolve a ``module:QualifiedName`` spec to a dataclass type.

    Args:
        spec (str): The RECORD argument.

    Returns:
        type: The dataclass type.

    Raises:
        EnvExportUsageError: If the spec cannot be imported or is not a dataclass type.
    """
    try:
        obj: Any = import_object(spec)
    except ObjectSpecError as exc:
        raise EnvExportUsageError(str(exc)) from exc
    if not is_record_type(obj):
        raise EnvExportUsageError(f"{spec!r} is not a dataclass type")
    return obj


def read_values(path: Path | None) -> ValuesTable:
    """Read the values document from ``path`` (``-`` for STDIN).

    Args:
        path (Path | None): Path of the TOML document, ``-`` for STDIN, or ``None``
            for no document.

    Returns:
        ValuesTable: The parsed values (empty without a document).

    Raises:
        EnvExportFileNotFoundError: If the document does not exist.
        EnvExportIOError: If the document cannot be read.
        EnvExportConfigError: If the document is not valid TOML.
    """
    if path is None:
        return {}
    try:
        if str(path) == STDIN_PATH:
            text: str = click.get_text_stream("stdin").read()
            return parse_values_toml(text, source="<stdin>")
        return load_values_toml(path)
    except FileNotFoundError as exc:
        raise EnvExportFileNotFoundError(f"Values file not found: {path}") from exc
    except ValuesParseError as exc:
        raise EnvExportConfigError(f"Invalid TOML in {exc}") from exc
    except OSError as exc:
        raise EnvExportIOError(f"Cannot read {path}: {exc}") from exc
