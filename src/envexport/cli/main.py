# topmark:header:start
#
#   project      : envexport
#   file         : main.py
#   file_relpath : src/envexport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI for envexport.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands fetch the console from ``ctx.obj`` and raise CLI errors that carry
  sysexits-aligned exit codes.
- Unhandled exceptions surface as `EnvExportUnexpectedError` (exit code 255).
- Logging goes to stderr so the export statements on stdout stay sourceable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from envexport.cli.commands.export import export_command
from envexport.cli.commands.fields import fields_command
from envexport.cli.commands.version import version_command
from envexport.cli.console import ClickConsole
from envexport.cli.errors import EnvExportUnexpectedError
from envexport.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from envexport.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from envexport.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (log level & console) on the Click context.

    Explicit ``-v``/``-q`` flags win over ``ENVEXPORT_LOG_LEVEL``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_cli if (verbose or quiet or level_env is None) else level_env
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


class EnvExportGroup(click.Group):
    """Click group that reports unhandled errors with the last-resort exit code."""

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, turning unhandled exceptions into `EnvExportUnexpectedError`."""
        try:
            return super().invoke(ctx)
        except (click.exceptions.ClickException, click.exceptions.Exit, click.exceptions.Abort):
            raise
        except (EOFError, BrokenPipeError):
            # Click handles these itself
            raise
        except Exception as exc:
            logger.debug("Unhandled error", exc_info=True)
            raise EnvExportUnexpectedError(f"{type(exc).__name__}: {exc}") from exc


@click.group(
    cls=EnvExportGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Export dataclass records as shell environment variables.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the envexport CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'envexport export module:Record' to print export statements.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(export_command)

cli.add_command(fields_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
