# topmark:header:start
#
#   project      : envexport
#   file         : errors.py
#   file_relpath : src/envexport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the envexport CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from envexport.cli.exit_codes import ExitCode


class EnvExportCliError(click.ClickException):
    """Base class for all envexport CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class EnvExportUsageError(EnvExportCliError):
    """Error for command-line invocation errors (invalid RECORD spec, flags)."""

    exit_code = ExitCode.USAGE_ERROR


class EnvExportDataError(EnvExportCliError):
    """Error for records that cannot be built or exported."""

    exit_code = ExitCode.DATA_ERROR


class EnvExportConfigError(EnvExportCliError):
    """Error for malformed values documents."""

    exit_code = ExitCode.CONFIG_ERROR


class EnvExportFileNotFoundError(EnvExportCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EnvExportIOError(EnvExportCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class EnvExportUnexpectedError(EnvExportCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
